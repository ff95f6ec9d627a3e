"""Tests for application/reporters."""

import pytest

from structdi.application.reporters import ConsoleConfig, ConsoleReporter, PlainTextReporter
from structdi.application.services.container import Container
from structdi.domain.ports.reporter import ReporterProtocol
from tests.factories import methods


class _Memory:
    def get(self, key):
        return key


@pytest.fixture
def populated(container: Container) -> Container:
    store = container.define_interface(methods(get=1), name="Store")
    cache = container.define_interface(methods(get=1), name="Cache")
    repo = container.define_class({}, dependencies={"store": store}, name="Repo")
    container.bind(store, container.define_class(methods(get=1), name="SqlStore"))
    container.bind(cache, _Memory())
    container.bind(repo, repo)
    return container


class TestPlainTextReporter:
    """Tests for PlainTextReporter."""

    def test_lists_bindings(self, populated: Container) -> None:
        output = PlainTextReporter().report(populated.snapshot())
        assert "Bindings: 3 (singletons: 1)" in output
        assert "Interface checking: on" in output
        assert "1. [interface] Store → SqlStore (transient)" in output
        assert "2. [interface] Cache → <_Memory instance> (singleton)" in output
        assert "3. [class] Repo → Repo (transient)" in output
        assert "   Dependencies: store: Store" in output

    def test_empty(self, container: Container) -> None:
        container.disable_interface_checking()
        output = PlainTextReporter().report(container.snapshot())
        assert "Bindings: 0 (singletons: 0)" in output
        assert "Interface checking: off" in output
        assert output.endswith("\n")


class TestConsoleReporter:
    """Tests for ConsoleReporter."""

    def test_table_content(self, populated: Container) -> None:
        output = ConsoleReporter(ConsoleConfig(color=False)).report(populated.snapshot())
        assert "CONTAINER" in output
        assert "SqlStore" in output
        assert "singleton" in output
        assert "store: Store" in output

    def test_hide_dependencies(self, populated: Container) -> None:
        config = ConsoleConfig(color=False, show_dependencies=False)
        output = ConsoleReporter(config).report(populated.snapshot())
        assert "Dependencies" not in output

    def test_empty(self, container: Container) -> None:
        output = ConsoleReporter(ConsoleConfig(color=False)).report(container.snapshot())
        assert "No bindings registered" in output

    def test_default_config_renders_names(self, populated: Container) -> None:
        output = ConsoleReporter().report(populated.snapshot())
        assert "Repo" in output
        assert "Cache" in output

    def test_narrow_width_raises(self) -> None:
        with pytest.raises(ValueError, match="width must be >= 40"):
            ConsoleConfig(width=10)


class TestReporterProtocol:
    """Built-in reporters satisfy ReporterProtocol."""

    @pytest.mark.parametrize("reporter", [PlainTextReporter(), ConsoleReporter()])
    def test_report_returns_str(self, reporter: ReporterProtocol, container: Container) -> None:
        assert isinstance(reporter.report(container.snapshot()), str)
