"""Interface definition exceptions."""

from structdi.domain.exceptions.base import StructDIError


class SignatureConflictError(StructDIError, TypeError):
    """Interface sources disagree on a method, or a method slot is malformed.

    Two forms:
        - conflict: same method name with different arities (left, right set)
        - malformed: slot value cannot produce a signature (reason set)

    Inherits TypeError for semantic correctness (incompatible definitions).

    Attributes:
        method: Name of the offending method
        left: Arity already collected for the method (conflict form)
        right: Arity of the source being merged in (conflict form)
        reason: Why the slot is malformed (malformed form)
    """

    def __init__(
        self,
        method: str,
        *,
        left: int | None = None,
        right: int | None = None,
        reason: str | None = None,
    ) -> None:
        # FAIL-FIRST: exactly one form must be given
        if not method:
            raise ValueError("method must not be empty")
        has_arities = left is not None and right is not None
        if has_arities == bool(reason):
            raise ValueError("either both arities or a reason must be given")

        self.method = method
        self.left = left
        self.right = right
        self.reason = reason

        if reason:
            msg = f"Malformed method '{method}': {reason}"
        else:
            msg = f"Signature conflict on '{method}': arity {left} vs arity {right}"
        super().__init__(msg)
