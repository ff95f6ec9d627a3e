"""Dependency graph resolution.

Resolution is recursive: dependencies are built before the dependent,
so a failure never leaves a partially wired instance behind.
The chain of in-progress targets is an immutable tuple passed down.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from structdi.domain.exceptions.resolution import CircularDependencyError, MissingBindingError
from structdi.domain.model.class_ import ClassDescriptor
from structdi.domain.model.graph import DependencyGraph

if TYPE_CHECKING:
    from collections.abc import Mapping

    from structdi.domain.model.binding import Binding
    from structdi.domain.model.class_ import Dependency


class Resolver:
    """Builds fully wired instances from a binding map.

    Stateless between calls; the caller owns the map and its locking.
    """

    __slots__ = ("_bindings",)

    def __init__(self, bindings: Mapping[Dependency, Binding]) -> None:
        self._bindings = bindings

    def resolve(self, target: Dependency) -> object:
        """Resolve target into a singleton or a freshly wired instance.

        Unbound ClassDescriptors provide themselves.

        Raises:
            MissingBindingError: target is an interface without a binding
            CircularDependencyError: dependency chain re-enters a target
        """
        return self._resolve(target, ())

    def _resolve(self, target: Dependency, chain: tuple[Dependency, ...]) -> object:
        if target in chain:
            start = chain.index(target)
            raise CircularDependencyError((*chain[start:], target))

        binding = self._bindings.get(target)
        if binding is None:
            if isinstance(target, ClassDescriptor):
                return self._construct(target, (*chain, target))
            raise MissingBindingError(target)

        provider = binding.class_provider
        if provider is None:
            return binding.provider
        return self._construct(provider, (*chain, target))

    def _construct(self, descriptor: ClassDescriptor, chain: tuple[Dependency, ...]) -> object:
        resolved = {
            prop: self._resolve(dependency, chain)
            for prop, dependency in descriptor.dependencies.items()
        }

        instance = descriptor()
        for prop, value in resolved.items():
            setattr(instance, prop, value)
        return instance


def dependency_graph(
    bindings: Mapping[Dependency, Binding],
) -> DependencyGraph[Dependency]:
    """Build the static dependency graph of a binding map.

    Nodes: every bound target plus every target reachable through
    dependencies. Edge a → b: resolving a resolves b.

    Singleton bindings have no outgoing edges (already constructed).
    Unbound interfaces have no outgoing edges (unresolvable).
    """
    edges: list[tuple[Dependency, Dependency]] = []
    seen: set[Dependency] = set()
    pending: list[Dependency] = list(bindings)

    while pending:
        node = pending.pop()
        if node in seen:
            continue
        seen.add(node)

        provider = _class_provider(node, bindings)
        if provider is None:
            continue

        for dependency in provider.dependencies.values():
            edges.append((node, dependency))
            pending.append(dependency)

    return DependencyGraph.from_edges(edges, extra_nodes=seen)


def unresolvable(
    graph: DependencyGraph[Dependency],
    bindings: Mapping[Dependency, Binding],
) -> tuple[Dependency, ...]:
    """Targets in graph that make() could never provide (unbound interfaces)."""
    return tuple(
        node
        for node in graph.nodes
        if node not in bindings and not isinstance(node, ClassDescriptor)
    )


def _class_provider(
    node: Dependency,
    bindings: Mapping[Dependency, Binding],
) -> ClassDescriptor | None:
    binding = bindings.get(node)
    if binding is None:
        return node if isinstance(node, ClassDescriptor) else None
    return binding.class_provider
