"""Arity introspection for method implementations.

Arity = positional parameters without defaults. For unbound method
implementations the leading instance parameter is not counted.
"""

from __future__ import annotations

import inspect
from typing import TYPE_CHECKING, Any

from structdi.domain.exceptions.signature import SignatureConflictError
from structdi.domain.model.signature import MethodSignature

if TYPE_CHECKING:
    from collections.abc import Callable

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


def signature_of(name: str, value: object, *, bound: bool = False) -> MethodSignature:
    """Capture the MethodSignature of a method slot.

    Args:
        name: Method name
        value: Method implementation
        bound: value is already bound to an instance (no instance parameter)

    Returns:
        MethodSignature with computed arity

    Raises:
        SignatureConflictError: value is not callable, has no introspectable
            signature, or cannot receive the instance
    """
    if not callable(value):
        raise SignatureConflictError(
            name, reason=f"expected a function, got {type(value).__name__}"
        )

    parameters = _parameters(name, value)
    positional = [p for p in parameters if p.kind in _POSITIONAL]
    required = sum(1 for p in positional if p.default is inspect.Parameter.empty)

    if bound:
        return MethodSignature(name=name, arity=required)

    if positional:
        # First positional parameter receives the instance
        has_default = positional[0].default is not inspect.Parameter.empty
        return MethodSignature(name=name, arity=required if has_default else required - 1)

    if any(p.kind is inspect.Parameter.VAR_POSITIONAL for p in parameters):
        return MethodSignature(name=name, arity=0)

    raise SignatureConflictError(name, reason="must accept the instance as first parameter")


def _parameters(name: str, value: Callable[..., Any]) -> tuple[inspect.Parameter, ...]:
    try:
        return tuple(inspect.signature(value).parameters.values())
    except (TypeError, ValueError) as e:
        raise SignatureConflictError(name, reason=f"signature not introspectable ({e})") from e
