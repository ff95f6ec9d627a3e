"""Domain exceptions."""

from structdi.domain.exceptions.base import StructDIError
from structdi.domain.exceptions.conformance import InterfaceConformanceError
from structdi.domain.exceptions.resolution import CircularDependencyError, MissingBindingError
from structdi.domain.exceptions.signature import SignatureConflictError

__all__ = [
    "StructDIError",
    "SignatureConflictError",
    "InterfaceConformanceError",
    "MissingBindingError",
    "CircularDependencyError",
]
