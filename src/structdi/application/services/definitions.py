"""Descriptor builders: method maps → InterfaceDescriptor / ClassDescriptor."""

from __future__ import annotations

import itertools
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from structdi.application.services.conformance import check_class
from structdi.domain.exceptions.signature import SignatureConflictError
from structdi.domain.model.class_ import CONSTRUCTOR, ClassDescriptor
from structdi.domain.model.interface import InterfaceDescriptor, merge_signatures
from structdi.infrastructure.introspection import signature_of

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Mapping

    from structdi.domain.model.class_ import Dependency
    from structdi.domain.model.signature import MethodSignature
    from structdi.domain.ports.object_factory import ObjectFactoryPort

_anonymous = itertools.count(1)


def build_interface(
    methods: Mapping[str, object],
    *,
    extends: Iterable[InterfaceDescriptor] = (),
    name: str | None = None,
    strict: bool = True,
) -> InterfaceDescriptor:
    """Build an interface from placeholder methods and parent interfaces.

    Args:
        methods: Method name → placeholder function (arity source)
        extends: Parent interfaces to compose
        name: Interface name. None = generated.
        strict: Fail on malformed slots and on arity conflicts between sources.
            When False, malformed slots impose no requirement and later
            sources win conflicts.

    Returns:
        Immutable InterfaceDescriptor

    Raises:
        TypeError: If a parent is not an InterfaceDescriptor
        SignatureConflictError: Malformed slot, constructor slot or arity
            conflict (strict only)
    """
    parents = tuple(extends)
    for parent in parents:
        if not isinstance(parent, InterfaceDescriptor):
            raise TypeError(f"extends expects InterfaceDescriptor, got {type(parent).__name__}")

    own: dict[str, MethodSignature] = {}
    for method, impl in methods.items():
        if method == CONSTRUCTOR:
            if strict:
                raise SignatureConflictError(
                    method, reason="an interface cannot require the constructor"
                )
            continue
        signature = _signature(method, impl, strict=strict)
        if signature is not None:
            own[method] = signature
    signatures = merge_signatures(
        [*(parent.signatures for parent in parents), own],
        strict=strict,
    )

    return InterfaceDescriptor(
        name=name or f"Interface{next(_anonymous)}",
        signatures=signatures,
        parents=parents,
    )


def build_class(
    members: Mapping[str, object],
    *,
    factory: ObjectFactoryPort,
    implements: Iterable[InterfaceDescriptor] = (),
    extends: ClassDescriptor | None = None,
    dependencies: Mapping[str, Dependency] | None = None,
    name: str | None = None,
    check: bool = True,
) -> ClassDescriptor:
    """Build a class descriptor, merging the parent's table when extending.

    Callable members (except types) become methods; other members become
    class attributes. Own members override inherited ones of the same name.

    Args:
        members: Method implementations and class attributes
        factory: Object factory used to build instances
        implements: Interfaces this class declares
        extends: Parent class. None = root class.
        dependencies: Property name → target injected on make()
        name: Class name. None = generated.
        check: Verify method slots and conformance to all declared and
            inherited interfaces

    Returns:
        Immutable ClassDescriptor

    Raises:
        TypeError: Wrong kind of value for implements, extends or dependencies
        SignatureConflictError: A method cannot receive the instance (check only)
        InterfaceConformanceError: Missing/mismatched method (check only)
    """
    interfaces = tuple(implements)
    for interface in interfaces:
        if not isinstance(interface, InterfaceDescriptor):
            raise TypeError(
                f"implements expects InterfaceDescriptor, got {type(interface).__name__}"
            )
    if extends is not None and not isinstance(extends, ClassDescriptor):
        raise TypeError(f"extends expects ClassDescriptor, got {type(extends).__name__}")

    merged_methods: dict[str, Callable[..., Any]] = {}
    merged_attributes: dict[str, object] = {}
    merged_signatures: dict[str, MethodSignature] = {}
    merged_dependencies: dict[str, Dependency] = {}

    if extends is not None:
        merged_methods.update(extends.methods)
        merged_attributes.update(extends.attributes)
        merged_signatures.update(extends.signatures)
        merged_dependencies.update(extends.dependencies)

    for member, value in members.items():
        if callable(value) and not isinstance(value, type):
            merged_attributes.pop(member, None)
            merged_methods[member] = value
            signature = None if member == CONSTRUCTOR else _signature(member, value, strict=check)
            if signature is None:
                merged_signatures.pop(member, None)
            else:
                merged_signatures[member] = signature
        else:
            merged_methods.pop(member, None)
            merged_signatures.pop(member, None)
            merged_attributes[member] = value

    for prop, target in (dependencies or {}).items():
        if not isinstance(target, InterfaceDescriptor | ClassDescriptor):
            raise TypeError(
                f"dependency '{prop}' must be InterfaceDescriptor or ClassDescriptor, "
                f"got {type(target).__name__}"
            )
        merged_dependencies[prop] = target

    descriptor = ClassDescriptor(
        name=name or f"Class{next(_anonymous)}",
        factory=factory,
        implements=interfaces,
        parent=extends,
        dependencies=MappingProxyType(merged_dependencies),
        methods=MappingProxyType(merged_methods),
        attributes=MappingProxyType(merged_attributes),
        signatures=MappingProxyType(merged_signatures),
        parent_methods=MappingProxyType(dict(extends.methods)) if extends else MappingProxyType({}),
    )

    if check:
        check_class(descriptor)

    return descriptor


def _signature(name: str, impl: object, *, strict: bool) -> MethodSignature | None:
    try:
        return signature_of(name, impl)
    except SignatureConflictError:
        if strict:
            raise
        # Checking disabled: the slot is kept but not part of any contract
        return None
