"""Binding: resolution target → provider."""

from __future__ import annotations

from dataclasses import dataclass

from structdi.domain.model.class_ import ClassDescriptor
from structdi.domain.model.interface import InterfaceDescriptor


@dataclass(frozen=True, slots=True)
class Binding:
    """One registered provider for a target.

    Provider is either a ClassDescriptor (fresh instance per resolution)
    or an already constructed instance (returned unchanged).

    Attributes:
        target: Interface or class identity used as key
        provider: ClassDescriptor or singleton instance
    """

    target: InterfaceDescriptor | ClassDescriptor
    provider: object

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.target, InterfaceDescriptor | ClassDescriptor):
            raise TypeError(
                f"target must be InterfaceDescriptor or ClassDescriptor, "
                f"got {type(self.target).__name__}"
            )
        if self.provider is None:
            raise TypeError("provider must not be None")

    @property
    def is_singleton(self) -> bool:
        """True if provider is a pre-built instance."""
        return not isinstance(self.provider, ClassDescriptor)

    @property
    def class_provider(self) -> ClassDescriptor | None:
        """Provider as ClassDescriptor, None for singleton bindings."""
        return self.provider if isinstance(self.provider, ClassDescriptor) else None

    def __str__(self) -> str:
        """Format as target → provider."""
        if self.is_singleton:
            return f"{self.target} → <instance {type(self.provider).__name__}>"
        return f"{self.target} → {self.provider}"
