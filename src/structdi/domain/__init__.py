"""structdi domain layer.

Pure domain logic with no external dependencies.
Only imports: typing, dataclasses, types, graphlib, collections.abc
"""

from structdi.domain.exceptions import (
    CircularDependencyError,
    InterfaceConformanceError,
    MissingBindingError,
    SignatureConflictError,
    StructDIError,
)
from structdi.domain.model import (
    Binding,
    ClassDescriptor,
    ContainerConfig,
    ContainerSnapshot,
    InterfaceDescriptor,
    MethodSignature,
)
from structdi.domain.ports import ObjectFactoryPort, ReporterProtocol

__all__ = [
    # Exceptions
    "StructDIError",
    "SignatureConflictError",
    "InterfaceConformanceError",
    "MissingBindingError",
    "CircularDependencyError",
    # Value objects
    "MethodSignature",
    "InterfaceDescriptor",
    "ClassDescriptor",
    "Binding",
    # Configuration / state
    "ContainerConfig",
    "ContainerSnapshot",
    # Ports
    "ObjectFactoryPort",
    "ReporterProtocol",
]
