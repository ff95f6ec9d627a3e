"""Method signature value object."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class MethodSignature:
    """Method contract: name and formal-parameter count.

    Arity counts positional parameters without defaults,
    excluding the instance parameter.

    Attributes:
        name: Method name
        arity: Number of required positional arguments (>= 0)
    """

    name: str
    arity: int

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("method name must not be empty")
        if self.arity < 0:
            raise ValueError(f"arity must be >= 0, got {self.arity}")

    def is_compatible(self, other: MethodSignature) -> bool:
        """Check if other describes the same method with the same arity."""
        return self.name == other.name and self.arity == other.arity

    def __str__(self) -> str:
        """Format as name/arity."""
        return f"{self.name}/{self.arity}"
