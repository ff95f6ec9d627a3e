"""Class descriptor: mergeable method table with contracts and dependencies."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from structdi.domain.model.interface import InterfaceDescriptor

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator, Mapping

    from structdi.domain.model.signature import MethodSignature
    from structdi.domain.ports.object_factory import ObjectFactoryPort

type Dependency = InterfaceDescriptor | ClassDescriptor
"""Resolution target a class may declare as a dependency."""

CONSTRUCTOR = "__init__"
"""Method handed to the object factory as constructor; never part of a contract."""


@dataclass(frozen=True, slots=True, eq=False, weakref_slot=True)
class ClassDescriptor:
    """Concrete class description, resolved into instances by the container.

    Immutable value object with FAIL-FIRST validation.
    Identity semantics (binding keys compare by identity).

    Calling the descriptor builds an instance through its object factory
    without dependency injection: Greeter("hi") works like a constructor.

    Invariants (FAIL-FIRST):
        - name is non-empty
        - methods and attributes do not share names
        - signatures name only methods, never the constructor
        - parent_methods is empty when there is no parent

    Attributes:
        name: Human-readable name (used in error messages and generated type)
        factory: Object factory that builds types and instances
        implements: Directly declared interfaces
        parent: Class this one extends, None for a root class
        dependencies: Property name → target resolved on make()
        methods: Merged method table (inherited, then own overrides)
        attributes: Merged non-callable class-level values
        signatures: Method name → MethodSignature, constructor excluded
            (a method without one was malformed while checking was disabled)
        parent_methods: Parent's merged method table at extension time
    """

    name: str
    factory: ObjectFactoryPort = field(repr=False)
    implements: tuple[InterfaceDescriptor, ...] = ()
    parent: ClassDescriptor | None = None
    dependencies: Mapping[str, Dependency] = field(default_factory=lambda: MappingProxyType({}))
    methods: Mapping[str, Callable[..., Any]] = field(
        default_factory=lambda: MappingProxyType({}), repr=False
    )
    attributes: Mapping[str, object] = field(
        default_factory=lambda: MappingProxyType({}), repr=False
    )
    signatures: Mapping[str, MethodSignature] = field(
        default_factory=lambda: MappingProxyType({}), repr=False
    )
    parent_methods: Mapping[str, Callable[..., Any]] = field(
        default_factory=lambda: MappingProxyType({}), repr=False
    )

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("class name must not be empty")

        shared = self.methods.keys() & self.attributes.keys()
        if shared:
            raise ValueError(f"names used as both method and attribute: {sorted(shared)}")

        unknown = self.signatures.keys() - (self.methods.keys() - {CONSTRUCTOR})
        if unknown:
            raise ValueError(f"signatures for unknown or constructor methods: {sorted(unknown)}")

        if self.parent is None and self.parent_methods:
            raise ValueError("parent_methods requires a parent")

    @property
    def all_interfaces(self) -> tuple[InterfaceDescriptor, ...]:
        """Interfaces declared by this class and all its ancestors.

        Ordered from this class up the chain, duplicates removed by identity.
        """
        seen: set[int] = set()
        result: list[InterfaceDescriptor] = []
        for descriptor in self.lineage():
            for interface in descriptor.implements:
                if id(interface) not in seen:
                    seen.add(id(interface))
                    result.append(interface)
        return tuple(result)

    def lineage(self) -> Iterator[ClassDescriptor]:
        """Yield this class, then each ancestor up to the root."""
        current: ClassDescriptor | None = self
        while current is not None:
            yield current
            current = current.parent

    def is_subclass_of(self, other: ClassDescriptor) -> bool:
        """Check if other is this class or one of its ancestors."""
        return any(descriptor is other for descriptor in self.lineage())

    def implements_interface(self, interface: InterfaceDescriptor) -> bool:
        """Check if interface is declared here or by an ancestor.

        Declaration check only; structural conformance is verified at
        definition time when checking is enabled.
        """
        return any(
            declared is interface or declared.extends(interface)
            for declared in self.all_interfaces
        )

    def call_parent(self, instance: object, name: str, *args: Any, **kwargs: Any) -> Any:
        """Invoke the parent's pre-override method with instance as context.

        Args:
            instance: Object passed as the method's first argument
            name: Method name in parent_methods

        Raises:
            AttributeError: If the parent has no such method
        """
        method = self.parent_methods.get(name)
        if method is None:
            raise AttributeError(f"{self.name} parent has no method '{name}'")
        return method(instance, *args, **kwargs)

    def runtime_type(self) -> type:
        """Get the Python type instances of this class are built from."""
        return self.factory.type_for(self)

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        """Construct an instance without dependency injection."""
        return self.factory.instantiate(self, args, kwargs)

    def __str__(self) -> str:
        """Format as class name."""
        return self.name
