"""Public API: definition-mapping factories and the process-wide container."""

from structdi.presentation.api.default import (
    bind,
    container,
    default_container,
    disable_interface_checking,
    disableInterfaceChecking,
    enable_interface_checking,
    enableInterfaceChecking,
    make,
    reset_default_container,
)
from structdi.presentation.api.factories import ClassFactory, InterfaceFactory

__all__ = [
    "ClassFactory",
    "InterfaceFactory",
    "bind",
    "container",
    "default_container",
    "disableInterfaceChecking",
    "disable_interface_checking",
    "enableInterfaceChecking",
    "enable_interface_checking",
    "make",
    "reset_default_container",
]
