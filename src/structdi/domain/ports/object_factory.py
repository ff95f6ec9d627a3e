"""Object factory port: builds types and instances for class descriptors."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from collections.abc import Mapping

    from structdi.domain.model.class_ import ClassDescriptor


class ObjectFactoryPort(Protocol):
    """Contract for the object construction collaborator.

    Given a descriptor's merged method/attribute table and its constructor
    (the __init__ entry, if any), produce objects that support method lookup
    along the class chain and per-instance properties.
    """

    def type_for(self, descriptor: ClassDescriptor) -> type:
        """Get (building on first use) the type backing descriptor.

        Args:
            descriptor: Class descriptor to materialize

        Returns:
            Type whose instances carry descriptor's methods and attributes
        """
        ...

    def instantiate(
        self,
        descriptor: ClassDescriptor,
        args: tuple[Any, ...],
        kwargs: Mapping[str, Any],
    ) -> Any:
        """Construct a new instance of descriptor.

        Args:
            descriptor: Class descriptor to instantiate
            args: Positional constructor arguments
            kwargs: Keyword constructor arguments

        Returns:
            New instance accepting per-instance attribute assignment
        """
        ...
