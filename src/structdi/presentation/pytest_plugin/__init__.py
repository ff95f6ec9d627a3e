"""pytest plugin for structdi.

Provides fixtures:
    di_config: Container configuration (override in conftest.py)
    di_container: Fresh Container per test

Markers:
    di(checking=...): Per-test override of the initial checking flag

Configuration (pytest.ini or pyproject.toml):
    structdi_checking: Initial interface checking flag (default: true)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from structdi.presentation.pytest_plugin.fixtures import di_config, di_container

if TYPE_CHECKING:
    import pytest

__all__ = [
    "di_config",
    "di_container",
]


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register ini options."""
    parser.addini(
        "structdi_checking",
        help="Initial interface checking flag for di_container (default: true)",
        default="true",
    )


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest plugin with markers."""
    config.addinivalue_line(
        "markers",
        "di(checking=None): dependency injection test; checking overrides"
        " the initial interface checking flag of di_container",
    )
