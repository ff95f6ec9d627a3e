"""Reporter port: contract for all container reporters."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from structdi.domain.model.snapshot import ContainerSnapshot


class ReporterProtocol(Protocol):
    """Protocol for container state reporters.

    Output is str, not print(). Caller decides destination.
    """

    def report(self, snapshot: ContainerSnapshot) -> str:
        """Format container snapshot as string.

        Args:
            snapshot: Container state to format.

        Returns:
            Formatted string representation.
        """
        ...
