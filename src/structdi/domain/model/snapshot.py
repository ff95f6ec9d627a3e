"""Read-only view of container state."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from structdi.domain.model.binding import Binding


@dataclass(frozen=True, slots=True)
class ContainerSnapshot:
    """Container state captured at one point in time.

    Used by reporters and the static dependency graph check.

    Invariants:
        - at most one binding per target (FAIL-FIRST)

    Attributes:
        bindings: Registered bindings in registration order
        checking_enabled: Checking flag at capture time
    """

    bindings: tuple[Binding, ...]
    checking_enabled: bool

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        targets = {id(binding.target) for binding in self.bindings}
        if len(targets) != len(self.bindings):
            raise ValueError("snapshot must contain at most one binding per target")

    @property
    def binding_count(self) -> int:
        """Number of registered bindings."""
        return len(self.bindings)

    @property
    def singleton_count(self) -> int:
        """Number of bindings whose provider is a pre-built instance."""
        return sum(1 for binding in self.bindings if binding.is_singleton)
