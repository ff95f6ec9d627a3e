"""Application services: definitions, conformance, resolution, container."""

from structdi.application.services.conformance import check_class, check_provider
from structdi.application.services.container import Container
from structdi.application.services.definitions import build_class, build_interface
from structdi.application.services.resolver import Resolver, dependency_graph

__all__ = [
    "Container",
    "Resolver",
    "build_class",
    "build_interface",
    "check_class",
    "check_provider",
    "dependency_graph",
]
