"""Structural conformance exceptions."""

from structdi.domain.exceptions.base import StructDIError


class InterfaceConformanceError(StructDIError, TypeError):
    """A class or instance does not satisfy a required contract.

    Two forms:
        - signature: a required method is missing or has another arity
          (method and expected set)
        - lineage: a class provider does not descend from the bound class
          (reason set)

    Inherits TypeError for semantic correctness (value does not fit contract).

    Attributes:
        subject: Description of the checked class or instance
        interface: Description of the contract being checked
        method: Required method name (signature form)
        expected: Required arity (signature form)
        actual: Arity found, None if the method is missing
        reason: Why the provider is rejected (lineage form)
    """

    def __init__(
        self,
        *,
        subject: str,
        interface: str,
        method: str | None = None,
        expected: int | None = None,
        actual: int | None = None,
        reason: str | None = None,
    ) -> None:
        # FAIL-FIRST validation
        if not subject:
            raise ValueError("subject must not be empty")
        if not interface:
            raise ValueError("interface must not be empty")
        has_signature = bool(method) and expected is not None
        if has_signature == bool(reason):
            raise ValueError("either method with expected arity or a reason must be given")
        if has_signature and actual == expected:
            raise ValueError("actual arity must differ from expected arity")

        self.subject = subject
        self.interface = interface
        self.method = method
        self.expected = expected
        self.actual = actual
        self.reason = reason

        if reason:
            detail = reason
        elif actual is None:
            detail = f"missing method '{method}' (arity {expected})"
        else:
            detail = f"method '{method}' takes {actual} argument(s), expected {expected}"
        super().__init__(f"{subject} does not conform to {interface}: {detail}")
