"""Tests for infrastructure/introspection.py."""

import functools

import pytest

from structdi.domain.exceptions import SignatureConflictError
from structdi.infrastructure.introspection import signature_of


def _two(self, a, b):
    return a, b


class _Service:
    def run(self, job, retries=3):
        return job, retries


class TestUnboundArity:
    """Arity of method implementations (instance parameter excluded)."""

    @pytest.mark.parametrize(
        ("func", "arity"),
        [
            (lambda self: None, 0),
            (lambda self, a: None, 1),
            (_two, 2),
            (lambda self, a, b=1: None, 1),
            (lambda self, a, *args: None, 1),
            (lambda self, a, **kwargs: None, 1),
            (lambda self, a, *, flag: None, 1),
            (lambda *args: None, 0),
        ],
    )
    def test_arity(self, func: object, arity: int) -> None:
        assert signature_of("m", func).arity == arity

    def test_name_kept(self) -> None:
        assert signature_of("greet", lambda self, name: None).name == "greet"

    def test_partial(self) -> None:
        assert signature_of("m", functools.partial(_two, None)).arity == 1


class TestBoundArity:
    """Arity of bound methods (instance already applied)."""

    def test_bound_method(self) -> None:
        assert signature_of("run", _Service().run, bound=True).arity == 1

    def test_plain_function_counts_everything(self) -> None:
        assert signature_of("f", lambda a, b: None, bound=True).arity == 2


class TestMalformed:
    """Slots that cannot produce a signature."""

    def test_non_callable_raises(self) -> None:
        with pytest.raises(SignatureConflictError, match="expected a function, got int"):
            signature_of("greet", 42)

    def test_no_instance_parameter_raises(self) -> None:
        with pytest.raises(SignatureConflictError, match="instance as first parameter"):
            signature_of("greet", lambda: None)

    def test_keyword_only_cannot_receive_instance(self) -> None:
        with pytest.raises(SignatureConflictError, match="instance as first parameter"):
            signature_of("greet", lambda *, name: None)

    def test_error_names_method(self) -> None:
        with pytest.raises(SignatureConflictError) as exc_info:
            signature_of("greet", None)
        assert exc_info.value.method == "greet"
        assert exc_info.value.reason is not None
