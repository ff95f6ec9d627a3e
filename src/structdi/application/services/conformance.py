"""Structural conformance checks.

Checks run at two points: class definition (declared interfaces) and
binding (provider against target). Purely structural: method names and
arities, no return types or bodies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from structdi.domain.exceptions.conformance import InterfaceConformanceError
from structdi.domain.exceptions.signature import SignatureConflictError
from structdi.domain.model.class_ import ClassDescriptor
from structdi.domain.model.interface import InterfaceDescriptor
from structdi.infrastructure.introspection import signature_of

if TYPE_CHECKING:
    from collections.abc import Mapping

    from structdi.domain.model.class_ import Dependency
    from structdi.domain.model.signature import MethodSignature


def first_mismatch(
    provided: Mapping[str, MethodSignature],
    required: Mapping[str, MethodSignature],
) -> tuple[MethodSignature, int | None] | None:
    """Find the first required signature not satisfied by provided.

    Args:
        provided: Signatures available on the class or instance
        required: Signatures the contract demands

    Returns:
        None if all satisfied, else (required signature, actual arity or None)
    """
    for name, signature in required.items():
        found = provided.get(name)
        if found is None:
            return signature, None
        if found.arity != signature.arity:
            return signature, found.arity
    return None


def check_class(descriptor: ClassDescriptor) -> None:
    """Verify descriptor satisfies every interface it or an ancestor declares.

    Raises:
        InterfaceConformanceError: On the first missing or mismatched method
    """
    for interface in descriptor.all_interfaces:
        _raise_on_mismatch(f"class {descriptor}", interface, descriptor.signatures)


def check_provider(target: Dependency, provider: object) -> None:
    """Verify provider may be bound to target.

    - class provider for an interface: structural conformance
    - class provider for a class: provider is target or a descendant
    - instance provider: its methods satisfy target's signatures

    Raises:
        InterfaceConformanceError: If provider does not fit target, or an
            instance method's signature cannot be introspected
    """
    if isinstance(provider, ClassDescriptor):
        if isinstance(target, InterfaceDescriptor):
            _raise_on_mismatch(f"class {provider}", target, provider.signatures)
        elif not provider.is_subclass_of(target):
            raise InterfaceConformanceError(
                subject=f"class {provider}",
                interface=f"class {target}",
                reason=f"{provider} does not extend {target}",
            )
        return

    subject = f"instance of {type(provider).__name__}"
    try:
        provided = instance_signatures(provider, target.signatures)
    except SignatureConflictError as e:
        raise InterfaceConformanceError(
            subject=subject,
            interface=str(target),
            reason=f"method '{e.method}' cannot be checked: {e.reason}",
        ) from e
    _raise_on_mismatch(subject, target, provided)


def instance_signatures(
    instance: object,
    required: Mapping[str, MethodSignature],
) -> Mapping[str, MethodSignature]:
    """Capture signatures of the instance methods named in required.

    Non-callable or absent attributes are left out (reported as missing).

    Raises:
        SignatureConflictError: A named method has no introspectable signature
    """
    provided: dict[str, MethodSignature] = {}
    for name in required:
        member = getattr(instance, name, None)
        if callable(member):
            provided[name] = signature_of(name, member, bound=True)
    return provided


def _raise_on_mismatch(
    subject: str,
    contract: Dependency,
    provided: Mapping[str, MethodSignature],
) -> None:
    mismatch = first_mismatch(provided, contract.signatures)
    if mismatch is None:
        return

    signature, actual = mismatch
    raise InterfaceConformanceError(
        subject=subject,
        interface=str(contract),
        method=signature.name,
        expected=signature.arity,
        actual=actual,
    )
