"""Container: binding registry, checking flag and resolution entry point.

Explicit context object. A process-wide default instance lives in the
presentation layer for convenience; tests and libraries can build their own.
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING, Any

from structdi.application.services.conformance import check_provider
from structdi.application.services.definitions import build_class, build_interface
from structdi.application.services.resolver import Resolver, dependency_graph, unresolvable
from structdi.domain.exceptions.resolution import CircularDependencyError, MissingBindingError
from structdi.domain.model.binding import Binding
from structdi.domain.model.configuration import ContainerConfig
from structdi.domain.model.graph import find_cycle, topological_order
from structdi.domain.model.snapshot import ContainerSnapshot
from structdi.infrastructure.object_factory import default_object_factory

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from structdi.domain.model.class_ import ClassDescriptor, Dependency
    from structdi.domain.model.graph import DependencyGraph
    from structdi.domain.model.interface import InterfaceDescriptor
    from structdi.domain.ports.object_factory import ObjectFactoryPort


class Container:
    """Dependency injection container.

    Thread-safe: one coarse re-entrant lock guards bindings and the
    checking flag (constructors may call back into the container).

    Example:
        container = Container()
        Greeter = container.define_interface({"greet": lambda self, name: None})
        English = container.define_class(
            {"greet": lambda self, name: f"Hello {name}"},
            implements=[Greeter],
        )
        container.bind(Greeter, English)
        container.make(Greeter).greet("Ada")
    """

    def __init__(
        self,
        config: ContainerConfig | None = None,
        object_factory: ObjectFactoryPort | None = None,
    ) -> None:
        """Initialize empty container.

        Args:
            config: Initial state. Uses defaults if None.
            object_factory: Builds instances of class descriptors.
                Uses the shared TypeObjectFactory if None.
        """
        self._config = config or ContainerConfig()
        self._factory = object_factory or default_object_factory()
        self._lock = threading.RLock()
        self._bindings: dict[Dependency, Binding] = {}
        self._checking = self._config.checking_enabled

    # -------------------------------------------------------------------------
    # Checking flag
    # -------------------------------------------------------------------------

    @property
    def checking_enabled(self) -> bool:
        """Whether signature and conformance checks run."""
        with self._lock:
            return self._checking

    def enable_interface_checking(self) -> None:
        """Turn checks on for subsequent definitions and bindings."""
        with self._lock:
            self._checking = True

    def disable_interface_checking(self) -> None:
        """Turn checks off. Existing descriptors and bindings are not revisited."""
        with self._lock:
            self._checking = False

    # -------------------------------------------------------------------------
    # Definitions
    # -------------------------------------------------------------------------

    def define_interface(
        self,
        methods: Mapping[str, object],
        *,
        extends: Iterable[InterfaceDescriptor] = (),
        name: str | None = None,
    ) -> InterfaceDescriptor:
        """Define an interface from placeholder methods.

        Args:
            methods: Method name → placeholder function
            extends: Parent interfaces to compose
            name: Interface name. None = generated.

        Raises:
            SignatureConflictError: Malformed slot, or arity conflict
                between sources (when checking enabled)
        """
        with self._lock:
            strict = self._checking
        return build_interface(methods, extends=extends, name=name, strict=strict)

    def define_class(
        self,
        members: Mapping[str, object],
        *,
        implements: Iterable[InterfaceDescriptor] = (),
        extends: ClassDescriptor | None = None,
        dependencies: Mapping[str, Dependency] | None = None,
        name: str | None = None,
    ) -> ClassDescriptor:
        """Define a class descriptor.

        Args:
            members: Method implementations and class attributes
            implements: Interfaces this class declares
            extends: Parent class
            dependencies: Property name → target injected on make()
            name: Class name. None = generated.

        Raises:
            InterfaceConformanceError: Missing or mismatched method
                (when checking enabled)
        """
        with self._lock:
            check = self._checking
        return build_class(
            members,
            factory=self._factory,
            implements=implements,
            extends=extends,
            dependencies=dependencies,
            name=name,
            check=check,
        )

    # -------------------------------------------------------------------------
    # Bindings
    # -------------------------------------------------------------------------

    def bind(self, target: Dependency, provider: object) -> None:
        """Register provider for target, replacing any previous binding.

        Args:
            target: Interface or class identity
            provider: ClassDescriptor (fresh instance per make) or
                a constructed instance (returned as-is on every make)

        Raises:
            TypeError: target is not a descriptor, or provider is None
            InterfaceConformanceError: provider does not fit target
                (when checking enabled)
        """
        binding = Binding(target=target, provider=provider)

        with self._lock:
            if self._checking:
                check_provider(target, provider)
            self._bindings[target] = binding

    def is_bound(self, target: Dependency) -> bool:
        """Check if target has a binding."""
        with self._lock:
            return target in self._bindings

    def binding_for(self, target: Dependency) -> Binding | None:
        """Get the binding registered for target, None if unbound."""
        with self._lock:
            return self._bindings.get(target)

    def reset(self) -> None:
        """Drop all bindings and restore the configured checking flag."""
        with self._lock:
            self._bindings.clear()
            self._checking = self._config.checking_enabled

    # -------------------------------------------------------------------------
    # Resolution
    # -------------------------------------------------------------------------

    def make(self, target: Dependency) -> Any:
        """Resolve target into an instance with all dependencies injected.

        Singleton bindings return the bound instance. Class bindings
        produce a fresh instance on every call, and an unbound
        ClassDescriptor provides itself.

        Raises:
            MissingBindingError: target (or a dependency) is an unbound interface
            CircularDependencyError: resolution re-enters a target in progress
        """
        with self._lock:
            return Resolver(self._bindings).resolve(target)

    def dependency_graph(self) -> DependencyGraph[Dependency]:
        """Static graph of what resolving each bound target would resolve."""
        with self._lock:
            return dependency_graph(self._bindings)

    def validate(self) -> tuple[Dependency, ...]:
        """Check the whole configuration without building anything.

        Returns:
            All graph targets, dependencies before dependents

        Raises:
            CircularDependencyError: A dependency cycle exists
            MissingBindingError: An interface dependency has no binding
        """
        with self._lock:
            graph = dependency_graph(self._bindings)
            missing = unresolvable(graph, self._bindings)

        cycle = find_cycle(graph)
        if cycle is not None:
            raise CircularDependencyError(cycle)
        if missing:
            raise MissingBindingError(missing[0])

        order = topological_order(graph)
        return order if order is not None else ()

    def snapshot(self) -> ContainerSnapshot:
        """Capture current bindings and flag for reporting."""
        with self._lock:
            return ContainerSnapshot(
                bindings=tuple(self._bindings.values()),
                checking_enabled=self._checking,
            )
