"""Static dependency graph of a container and its ordering helpers."""

from __future__ import annotations

from dataclasses import dataclass
from graphlib import CycleError, TopologicalSorter
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping


@dataclass(frozen=True, slots=True)
class DependencyGraph[T]:
    """Immutable graph where edge a → b means "resolving a resolves b".

    Attributes:
        edges: Node → targets it depends on (nodes without dependencies omitted)
        nodes: Every node, including ones without edges
    """

    edges: Mapping[T, frozenset[T]]
    nodes: frozenset[T]

    def __post_init__(self) -> None:
        """Validate that every edge endpoint is a node. FAIL-FIRST."""
        for node, targets in self.edges.items():
            if node not in self.nodes:
                raise ValueError(f"edge source '{node}' not in nodes")
            missing = targets - self.nodes
            if missing:
                names = sorted(map(str, missing))
                raise ValueError(f"dependencies of '{node}' not in nodes: {names}")

    def dependencies_of(self, node: T) -> frozenset[T]:
        """Direct dependencies of node (empty for leaves and unknown nodes)."""
        return self.edges.get(node, frozenset())

    @classmethod
    def from_edges(
        cls,
        edges: Iterable[tuple[T, T]],
        extra_nodes: Iterable[T] = (),
    ) -> DependencyGraph[T]:
        """Build a graph from (dependent, dependency) pairs plus isolated nodes."""
        adjacency: dict[T, set[T]] = {}
        nodes: set[T] = set(extra_nodes)
        for source, target in edges:
            nodes.update((source, target))
            adjacency.setdefault(source, set()).add(target)
        return cls(
            edges={node: frozenset(targets) for node, targets in adjacency.items()},
            nodes=frozenset(nodes),
        )


def _sorter[T](graph: DependencyGraph[T]) -> TopologicalSorter[T]:
    # graphlib takes node -> predecessors; dependencies must be emitted first
    return TopologicalSorter({node: set(graph.dependencies_of(node)) for node in graph.nodes})


def find_cycle[T](graph: DependencyGraph[T]) -> tuple[T, ...] | None:
    """Find one dependency cycle.

    Returns:
        None if acyclic, otherwise a closed path (a, b, ..., a) following
        dependency edges. Only one cycle is reported when several exist.
    """
    try:
        _sorter(graph).prepare()
    except CycleError as e:
        # graphlib walks the path against dependency edges
        return tuple(reversed(e.args[1]))
    return None


def topological_order[T](graph: DependencyGraph[T]) -> tuple[T, ...] | None:
    """Dependencies-first ordering of graph, or None if it has a cycle."""
    try:
        return tuple(_sorter(graph).static_order())
    except CycleError:
        return None
