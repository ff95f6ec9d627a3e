"""Interface descriptor: immutable set of method signatures."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING

from structdi.domain.exceptions.signature import SignatureConflictError

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from structdi.domain.model.signature import MethodSignature


@dataclass(frozen=True, slots=True, eq=False)
class InterfaceDescriptor:
    """Structural contract a class or instance must satisfy.

    Identity semantics: two descriptors with the same signatures are still
    distinct binding keys. Use is_compatible() for structural comparison.

    Invariants (FAIL-FIRST):
        - name is non-empty
        - every signatures key equals the signature's name

    Attributes:
        name: Human-readable name (used in error messages and reports)
        signatures: Method name → MethodSignature (own + inherited)
        parents: Interfaces this one was composed from
    """

    name: str
    signatures: Mapping[str, MethodSignature]
    parents: tuple[InterfaceDescriptor, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("interface name must not be empty")

        for key, signature in self.signatures.items():
            if key != signature.name:
                raise ValueError(f"signature key '{key}' does not match '{signature.name}'")

    @property
    def method_names(self) -> frozenset[str]:
        """Names of all required methods."""
        return frozenset(self.signatures)

    def is_compatible(self, other: InterfaceDescriptor) -> bool:
        """Check structural interchangeability.

        True if both interfaces require the same methods with equal arities.
        """
        if self.signatures.keys() != other.signatures.keys():
            return False
        return all(
            sig.is_compatible(other.signatures[name]) for name, sig in self.signatures.items()
        )

    def extends(self, other: InterfaceDescriptor) -> bool:
        """Check if other is a direct or transitive parent of this interface."""
        return any(parent is other or parent.extends(other) for parent in self.parents)

    def __str__(self) -> str:
        """Format as interface name."""
        return self.name

    def __repr__(self) -> str:
        """Format as InterfaceDescriptor(name, [signatures])."""
        sigs = ", ".join(str(sig) for sig in self.signatures.values())
        return f"InterfaceDescriptor({self.name!r}, [{sigs}])"


def merge_signatures(
    sources: Iterable[Mapping[str, MethodSignature]],
    *,
    strict: bool = True,
) -> Mapping[str, MethodSignature]:
    """Union signature maps, checking arity agreement on shared names.

    Args:
        sources: Signature maps in precedence order (later wins when not strict)
        strict: Raise on arity conflicts. False = later source wins silently.

    Returns:
        Read-only merged mapping

    Raises:
        SignatureConflictError: Same name with different arity (strict only)
    """
    merged: dict[str, MethodSignature] = {}

    for source in sources:
        for name, signature in source.items():
            existing = merged.get(name)
            if strict and existing is not None and existing.arity != signature.arity:
                raise SignatureConflictError(name, left=existing.arity, right=signature.arity)
            merged[name] = signature

    return MappingProxyType(merged)
