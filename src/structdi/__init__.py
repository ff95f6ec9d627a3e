"""structdi - runtime dependency injection with structural interface contracts."""

__version__ = "0.1.0"

from structdi.application.reporters import ConsoleReporter, PlainTextReporter
from structdi.application.services.container import Container
from structdi.domain.exceptions import (
    CircularDependencyError,
    InterfaceConformanceError,
    MissingBindingError,
    SignatureConflictError,
    StructDIError,
)
from structdi.domain.model import ClassDescriptor, ContainerConfig, InterfaceDescriptor
from structdi.presentation.api import (
    ClassFactory,
    InterfaceFactory,
    bind,
    container,
    disable_interface_checking,
    disableInterfaceChecking,
    enable_interface_checking,
    enableInterfaceChecking,
    make,
    reset_default_container,
)

__all__ = [
    "__version__",
    # Container
    "Container",
    "ContainerConfig",
    "container",
    "bind",
    "make",
    "enable_interface_checking",
    "disable_interface_checking",
    "enableInterfaceChecking",
    "disableInterfaceChecking",
    "reset_default_container",
    # Descriptors
    "InterfaceFactory",
    "ClassFactory",
    "InterfaceDescriptor",
    "ClassDescriptor",
    # Reporters
    "ConsoleReporter",
    "PlainTextReporter",
    # Exceptions
    "StructDIError",
    "SignatureConflictError",
    "InterfaceConformanceError",
    "MissingBindingError",
    "CircularDependencyError",
]
