"""Resolution exceptions raised by the container."""

from __future__ import annotations

from structdi.domain.exceptions.base import StructDIError


class MissingBindingError(StructDIError, LookupError):
    """No provider registered for a resolution target.

    Attributes:
        target: The unresolved interface or class descriptor
    """

    def __init__(self, target: object) -> None:
        if target is None:
            raise TypeError("target must not be None")

        self.target = target
        super().__init__(f"No binding registered for {target}")


class CircularDependencyError(StructDIError, RuntimeError):
    """Dependency resolution re-entered a target already in progress.

    Attributes:
        cycle: Targets from the first occurrence of the re-entered target
            back to itself, e.g. (A, B, A)
    """

    def __init__(self, cycle: tuple[object, ...]) -> None:
        # FAIL-FIRST: a cycle closes on itself
        if len(cycle) < 2:
            raise ValueError("cycle must contain at least two entries")
        if cycle[0] is not cycle[-1]:
            raise ValueError("cycle must start and end with the same target")

        self.cycle = cycle
        path = " → ".join(str(node) for node in cycle)
        super().__init__(f"Circular dependency detected: {path}")
