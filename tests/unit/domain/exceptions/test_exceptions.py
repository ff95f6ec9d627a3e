"""Tests for domain/exceptions."""

import pytest

from structdi.domain.exceptions import (
    CircularDependencyError,
    InterfaceConformanceError,
    MissingBindingError,
    SignatureConflictError,
    StructDIError,
)


class TestHierarchy:
    """All errors share the StructDIError root and a builtin base."""

    @pytest.mark.parametrize(
        ("error_cls", "builtin"),
        [
            (SignatureConflictError, TypeError),
            (InterfaceConformanceError, TypeError),
            (MissingBindingError, LookupError),
            (CircularDependencyError, RuntimeError),
        ],
    )
    def test_bases(self, error_cls: type[Exception], builtin: type[Exception]) -> None:
        assert issubclass(error_cls, StructDIError)
        assert issubclass(error_cls, builtin)


class TestSignatureConflictError:
    """Tests for SignatureConflictError."""

    def test_conflict_form(self) -> None:
        err = SignatureConflictError("greet", left=1, right=2)
        assert err.method == "greet"
        assert (err.left, err.right) == (1, 2)
        assert err.reason is None
        assert str(err) == "Signature conflict on 'greet': arity 1 vs arity 2"

    def test_malformed_form(self) -> None:
        err = SignatureConflictError("greet", reason="expected a function, got int")
        assert str(err) == "Malformed method 'greet': expected a function, got int"

    def test_empty_method_raises(self) -> None:
        with pytest.raises(ValueError, match="method must not be empty"):
            SignatureConflictError("", reason="x")

    def test_neither_form_raises(self) -> None:
        with pytest.raises(ValueError, match="either both arities or a reason"):
            SignatureConflictError("greet")

    def test_both_forms_raise(self) -> None:
        with pytest.raises(ValueError, match="either both arities or a reason"):
            SignatureConflictError("greet", left=1, right=2, reason="x")


class TestInterfaceConformanceError:
    """Tests for InterfaceConformanceError."""

    def test_missing_method(self) -> None:
        err = InterfaceConformanceError(
            subject="class Impl", interface="Greeter", method="greet", expected=1, actual=None
        )
        assert str(err) == "class Impl does not conform to Greeter: missing method 'greet' (arity 1)"

    def test_arity_mismatch(self) -> None:
        err = InterfaceConformanceError(
            subject="class Impl", interface="Greeter", method="greet", expected=1, actual=2
        )
        assert err.actual == 2
        assert "takes 2 argument(s), expected 1" in str(err)

    def test_lineage_form(self) -> None:
        err = InterfaceConformanceError(
            subject="class Other", interface="class Base", reason="Other does not extend Base"
        )
        assert err.method is None
        assert str(err).endswith("Other does not extend Base")

    def test_equal_arities_raise(self) -> None:
        with pytest.raises(ValueError, match="must differ"):
            InterfaceConformanceError(
                subject="class Impl", interface="Greeter", method="greet", expected=1, actual=1
            )

    def test_missing_form_raises(self) -> None:
        with pytest.raises(ValueError, match="either method"):
            InterfaceConformanceError(subject="class Impl", interface="Greeter")


class TestResolutionErrors:
    """Tests for MissingBindingError and CircularDependencyError."""

    def test_missing_binding(self) -> None:
        err = MissingBindingError("Greeter")
        assert err.target == "Greeter"
        assert str(err) == "No binding registered for Greeter"

    def test_missing_binding_none_raises(self) -> None:
        with pytest.raises(TypeError):
            MissingBindingError(None)

    def test_cycle(self) -> None:
        err = CircularDependencyError(("A", "B", "A"))
        assert err.cycle == ("A", "B", "A")
        assert str(err) == "Circular dependency detected: A → B → A"

    def test_cycle_too_short_raises(self) -> None:
        with pytest.raises(ValueError, match="at least two"):
            CircularDependencyError(("A",))

    def test_open_path_raises(self) -> None:
        with pytest.raises(ValueError, match="start and end"):
            CircularDependencyError(("A", "B"))
