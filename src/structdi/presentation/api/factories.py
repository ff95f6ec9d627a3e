"""Definition-mapping factories: InterfaceFactory.make() and ClassFactory.make().

A definition mapping holds method entries plus reserved keys:

    _extends       parent interface(s) / parent class
    _implements    interfaces a class declares
    _dependencies  property name → interface or class to inject
    _name          descriptor name (optional)

Example:
    Greeter = InterfaceFactory.make({"greet": lambda self, name: None})
    English = ClassFactory.make({
        "_implements": [Greeter],
        "greet": lambda self, name: f"Hello {name}",
    })
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from structdi.domain.model.class_ import ClassDescriptor
from structdi.domain.model.interface import InterfaceDescriptor
from structdi.presentation.api.default import default_container

if TYPE_CHECKING:
    from collections.abc import Mapping

    from structdi.application.services.container import Container

EXTENDS = "_extends"
IMPLEMENTS = "_implements"
DEPENDENCIES = "_dependencies"
NAME = "_name"


class InterfaceFactory:
    """Builds InterfaceDescriptors from definition mappings."""

    RESERVED = frozenset({EXTENDS, NAME})

    @classmethod
    def make(
        cls,
        definition: Mapping[str, Any],
        *,
        container: Container | None = None,
    ) -> InterfaceDescriptor:
        """Define an interface.

        Args:
            definition: Method name → placeholder function, plus optional
                _extends (interface or list of interfaces) and _name
            container: Container whose checking flag applies.
                None = process-wide container.

        Raises:
            SignatureConflictError: Malformed method or arity conflict
        """
        target = container or default_container()
        methods = {key: value for key, value in definition.items() if key not in cls.RESERVED}
        return target.define_interface(
            methods,
            extends=_as_tuple(definition.get(EXTENDS, ())),
            name=definition.get(NAME),
        )


class ClassFactory:
    """Builds ClassDescriptors from definition mappings."""

    RESERVED = frozenset({EXTENDS, IMPLEMENTS, DEPENDENCIES, NAME})

    @classmethod
    def make(
        cls,
        definition: Mapping[str, Any],
        *,
        container: Container | None = None,
    ) -> ClassDescriptor:
        """Define a class.

        Args:
            definition: Methods and attributes, plus optional _implements,
                _extends (single class), _dependencies and _name
            container: Container whose checking flag and object factory apply.
                None = process-wide container.

        Raises:
            TypeError: _extends is not a single ClassDescriptor
            InterfaceConformanceError: Missing or mismatched method
        """
        target = container or default_container()

        parent = definition.get(EXTENDS)
        if parent is not None and not isinstance(parent, ClassDescriptor):
            raise TypeError(
                f"{EXTENDS} expects a single ClassDescriptor, got {type(parent).__name__}"
            )

        members = {key: value for key, value in definition.items() if key not in cls.RESERVED}
        return target.define_class(
            members,
            implements=_as_tuple(definition.get(IMPLEMENTS, ())),
            extends=parent,
            dependencies=definition.get(DEPENDENCIES),
            name=definition.get(NAME),
        )


def _as_tuple(value: object) -> tuple[Any, ...]:
    if isinstance(value, InterfaceDescriptor):
        return (value,)
    if isinstance(value, list | tuple):
        return tuple(value)
    raise TypeError(f"expected an interface or a list of interfaces, got {type(value).__name__}")
