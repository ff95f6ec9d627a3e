"""Process-wide default container.

Boundary convenience only: library code should accept a Container
instead of reaching for this one.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from structdi.application.services.container import Container

if TYPE_CHECKING:
    from structdi.domain.model.class_ import Dependency

container = Container()
"""Shared container used by InterfaceFactory, ClassFactory and the functions below."""


def default_container() -> Container:
    """Get the process-wide container."""
    return container


def reset_default_container() -> Container:
    """Drop all default bindings and re-enable checking.

    Returns:
        The (same) process-wide container
    """
    container.reset()
    return container


def bind(target: Dependency, provider: object) -> None:
    """Bind on the process-wide container. See Container.bind()."""
    container.bind(target, provider)


def make(target: Dependency) -> Any:
    """Resolve on the process-wide container. See Container.make()."""
    return container.make(target)


def enable_interface_checking() -> None:
    """Turn checks on for the process-wide container."""
    container.enable_interface_checking()


def disable_interface_checking() -> None:
    """Turn checks off for the process-wide container."""
    container.disable_interface_checking()


# Aliases matching the factory-style public names
enableInterfaceChecking = enable_interface_checking  # noqa: N816
disableInterfaceChecking = disable_interface_checking  # noqa: N816
