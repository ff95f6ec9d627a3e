"""Tests for infrastructure/object_factory.py."""

import gc
from types import MappingProxyType

import pytest

from structdi.domain.model.class_ import ClassDescriptor
from structdi.infrastructure.object_factory import TypeObjectFactory, default_object_factory
from tests.factories import signatures


def _init(self, value=0):
    self.value = value


def _describe(self):
    return f"{type(self).__name__}:{self.value}"


@pytest.fixture
def factory() -> TypeObjectFactory:
    return TypeObjectFactory()


@pytest.fixture
def base(factory: TypeObjectFactory) -> ClassDescriptor:
    return ClassDescriptor(
        name="Base",
        factory=factory,
        methods=MappingProxyType({"__init__": _init, "describe": _describe}),
        attributes=MappingProxyType({"kind": "base"}),
        signatures=signatures(describe=0),
    )


class TestTypeObjectFactory:
    """Tests for TypeObjectFactory."""

    def test_type_named_after_descriptor(
        self, factory: TypeObjectFactory, base: ClassDescriptor
    ) -> None:
        cls = factory.type_for(base)
        assert cls.__name__ == "Base"
        assert cls.__qualname__ == "Base"

    def test_type_cached(self, factory: TypeObjectFactory, base: ClassDescriptor) -> None:
        assert factory.type_for(base) is factory.type_for(base)

    def test_instantiate_runs_constructor(
        self, factory: TypeObjectFactory, base: ClassDescriptor
    ) -> None:
        instance = factory.instantiate(base, (5,), {})
        assert instance.value == 5
        assert instance.describe() == "Base:5"
        assert instance.kind == "base"

    def test_instances_accept_properties(
        self, factory: TypeObjectFactory, base: ClassDescriptor
    ) -> None:
        instance = factory.instantiate(base, (), {})
        instance.logger = "injected"
        assert instance.logger == "injected"

    def test_subclass_type_extends_parent_type(
        self, factory: TypeObjectFactory, base: ClassDescriptor
    ) -> None:
        child = ClassDescriptor(
            name="Child",
            factory=factory,
            parent=base,
            methods=base.methods,
            attributes=base.attributes,
            signatures=base.signatures,
            parent_methods=base.methods,
        )
        instance = factory.instantiate(child, (), {"value": 1})
        assert isinstance(instance, factory.type_for(base))
        assert instance.describe() == "Child:1"

    def test_cache_does_not_keep_descriptor_alive(self, factory: TypeObjectFactory) -> None:
        descriptor = ClassDescriptor(name="Temp", factory=factory)
        factory.type_for(descriptor)
        assert len(factory._types) == 1

        del descriptor
        gc.collect()
        assert len(factory._types) == 0

    def test_default_factory_is_shared(self) -> None:
        assert default_object_factory() is default_object_factory()
