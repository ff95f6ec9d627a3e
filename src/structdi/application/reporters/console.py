"""Console reporter: ContainerSnapshot → rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

from structdi.application.reporters._rows import binding_rows

if TYPE_CHECKING:
    from structdi.domain.model.snapshot import ContainerSnapshot


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    Attributes:
        show_dependencies: Show the dependencies column.
        width: Console width in characters.
        color: Emit ANSI styles. False = plain text through rich layout.
    """

    show_dependencies: bool = True
    width: int = 120
    color: bool = True

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.width < 40:
            raise ValueError(f"width must be >= 40, got {self.width}")


class ConsoleReporter:
    """Console reporter: outputs rich formatted text.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, config: ConsoleConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or ConsoleConfig()

    def report(self, snapshot: ContainerSnapshot) -> str:
        """Format container snapshot as rich formatted string.

        Args:
            snapshot: Container state to format.

        Returns:
            Formatted string with header and bindings table.
        """
        output = StringIO()
        console = Console(
            file=output,
            force_terminal=self._config.color,
            no_color=not self._config.color,
            width=self._config.width,
        )

        self._render_header(console, snapshot)
        if snapshot.bindings:
            self._render_bindings(console, snapshot)
        else:
            console.print("[dim]No bindings registered[/dim]")

        return output.getvalue()

    def _render_header(self, console: Console, snapshot: ContainerSnapshot) -> None:
        console.print()
        console.rule("[bold]CONTAINER[/bold]")
        console.print()

        checking = "[green]on[/green]" if snapshot.checking_enabled else "[red]off[/red]"
        console.print(
            f"[bold]Bindings:[/bold] {snapshot.binding_count} "
            f"(singletons: {snapshot.singleton_count})  "
            f"[bold]Interface checking:[/bold] {checking}"
        )
        console.print()

    def _render_bindings(self, console: Console, snapshot: ContainerSnapshot) -> None:
        table = Table(show_header=True, header_style="bold")
        table.add_column("Target", style="cyan")
        table.add_column("Kind")
        table.add_column("Provider", style="yellow")
        table.add_column("Lifetime")
        if self._config.show_dependencies:
            table.add_column("Dependencies", style="dim")

        for row in binding_rows(snapshot):
            cells = [row.target, row.target_kind, row.provider, row.lifetime]
            if self._config.show_dependencies:
                cells.append(row.dependencies)
            table.add_row(*cells)

        console.print(table)
