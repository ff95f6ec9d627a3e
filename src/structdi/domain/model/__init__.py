"""Domain model: descriptors, bindings, configuration and graphs."""

from structdi.domain.model.binding import Binding
from structdi.domain.model.class_ import ClassDescriptor, Dependency
from structdi.domain.model.configuration import ContainerConfig
from structdi.domain.model.graph import DependencyGraph, find_cycle, topological_order
from structdi.domain.model.interface import InterfaceDescriptor, merge_signatures
from structdi.domain.model.signature import MethodSignature
from structdi.domain.model.snapshot import ContainerSnapshot

__all__ = [
    # Value objects
    "MethodSignature",
    "InterfaceDescriptor",
    "ClassDescriptor",
    "Dependency",
    "Binding",
    # Configuration / state
    "ContainerConfig",
    "ContainerSnapshot",
    # Graph
    "DependencyGraph",
    "find_cycle",
    "topological_order",
    "merge_signatures",
]
