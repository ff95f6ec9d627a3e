"""Shared fixtures for structdi tests."""

import pytest

from structdi.application.services.container import Container
from structdi.presentation.api.default import reset_default_container


@pytest.fixture
def container() -> Container:
    """Fresh container with checking enabled."""
    return Container()


@pytest.fixture(autouse=True)
def _clean_default_container() -> None:
    """Tests never leak bindings through the process-wide container."""
    reset_default_container()
