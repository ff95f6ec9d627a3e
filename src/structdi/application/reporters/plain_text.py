"""Plain text reporter.

Stdlib-only reporter for logs and snapshots in tests.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from structdi.application.reporters._rows import binding_rows

if TYPE_CHECKING:
    from structdi.domain.model.snapshot import ContainerSnapshot


class PlainTextReporter:
    """Plain text reporter: one line per binding, no markup."""

    def report(self, snapshot: ContainerSnapshot) -> str:
        """Format container snapshot as plain text.

        Args:
            snapshot: Container state to format.

        Returns:
            Multi-line string ending with a newline.
        """
        lines = [
            "=" * 70,
            "Container Bindings",
            "=" * 70,
            f"Bindings: {snapshot.binding_count} (singletons: {snapshot.singleton_count})",
            f"Interface checking: {'on' if snapshot.checking_enabled else 'off'}",
        ]

        rows = binding_rows(snapshot)
        if rows:
            lines.append("-" * 70)
        for i, row in enumerate(rows, start=1):
            lines.append(
                f"{i}. [{row.target_kind}] {row.target} → {row.provider} ({row.lifetime})"
            )
            if row.dependencies != "-":
                lines.append(f"   Dependencies: {row.dependencies}")

        return "\n".join(lines) + "\n"
