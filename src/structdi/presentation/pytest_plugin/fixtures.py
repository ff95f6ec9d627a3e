"""pytest fixtures for dependency injection tests.

Each test gets its own Container; the process-wide one is never touched.
User overrides di_config in their conftest.py.
"""

from __future__ import annotations

import pytest

from structdi.application.services.container import Container
from structdi.domain.model.configuration import ContainerConfig

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off"})


def _get_ini_flag(config: pytest.Config, name: str, default: bool) -> bool:
    """Get boolean ini value from pytest config with fallback.

    Raises:
        pytest.UsageError: Value is not a recognized boolean
    """
    value = str(config.getini(name) or "").strip().lower()
    if not value:
        return default
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise pytest.UsageError(f"{name} must be a boolean, got '{value}'")


@pytest.fixture
def di_config(request: pytest.FixtureRequest) -> ContainerConfig:
    """Container configuration.

    Reads structdi_checking from pytest.ini / pyproject.toml (default: true).
    @pytest.mark.di(checking=...) overrides it for one test or class.
    Override this fixture in conftest.py for per-suite settings.

    Raises:
        pytest.UsageError: Marker checking value is not a bool
    """
    checking = _get_ini_flag(request.config, "structdi_checking", default=True)

    marker = request.node.get_closest_marker("di")
    if marker is not None and "checking" in marker.kwargs:
        checking = marker.kwargs["checking"]
        if not isinstance(checking, bool):
            raise pytest.UsageError(
                f"di marker checking must be a bool, got {type(checking).__name__}"
            )

    return ContainerConfig(checking_enabled=checking)


@pytest.fixture
def di_container(di_config: ContainerConfig) -> Container:
    """Fresh, empty Container built from di_config."""
    return Container(config=di_config)
