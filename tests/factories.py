"""Test factories for creating descriptors.

Centralized factory functions to avoid duplication across test modules.
All factories accept simplified parameters (method name → arity)
and return fully constructed objects.
"""

from collections.abc import Callable
from types import MappingProxyType
from typing import Any

from structdi.domain.model.interface import InterfaceDescriptor
from structdi.domain.model.signature import MethodSignature

# Placeholder implementations by arity (instance parameter not counted)
_PLACEHOLDERS: dict[int, Callable[..., Any]] = {
    0: lambda self: None,
    1: lambda self, a: None,
    2: lambda self, a, b: None,
    3: lambda self, a, b, c: None,
}


def placeholder(arity: int) -> Callable[..., Any]:
    """Get a method placeholder taking arity arguments after the instance."""
    return _PLACEHOLDERS[arity]


def methods(**arities: int) -> dict[str, Callable[..., Any]]:
    """Build a method map from name=arity pairs.

    Example:
        methods(greet=1, close=0) → {"greet": lambda self, a: None, ...}
    """
    return {name: placeholder(arity) for name, arity in arities.items()}


def signatures(**arities: int) -> MappingProxyType[str, MethodSignature]:
    """Build a read-only signature map from name=arity pairs."""
    return MappingProxyType(
        {name: MethodSignature(name=name, arity=arity) for name, arity in arities.items()}
    )


def make_interface(
    name: str = "Service",
    parents: tuple[InterfaceDescriptor, ...] = (),
    **arities: int,
) -> InterfaceDescriptor:
    """Create an InterfaceDescriptor directly from name=arity pairs.

    Args:
        name: Interface name
        parents: Parent interfaces (recorded only, signatures not merged)
        **arities: Method name → arity

    Returns:
        InterfaceDescriptor instance
    """
    return InterfaceDescriptor(name=name, signatures=signatures(**arities), parents=parents)
