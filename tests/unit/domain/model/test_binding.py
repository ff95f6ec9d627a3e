"""Tests for domain/model/binding.py and domain/model/snapshot.py."""

import pytest

from structdi.domain.model.binding import Binding
from structdi.domain.model.class_ import ClassDescriptor
from structdi.domain.model.snapshot import ContainerSnapshot
from structdi.infrastructure.object_factory import TypeObjectFactory
from tests.factories import make_interface


class _Impl:
    def greet(self, name: str) -> str:
        return name


@pytest.fixture
def descriptor() -> ClassDescriptor:
    return ClassDescriptor(name="Impl", factory=TypeObjectFactory())


class TestBinding:
    """Tests for Binding."""

    def test_class_provider(self, descriptor: ClassDescriptor) -> None:
        binding = Binding(target=make_interface("Greeter"), provider=descriptor)
        assert not binding.is_singleton
        assert binding.class_provider is descriptor
        assert str(binding) == "Greeter → Impl"

    def test_instance_provider(self) -> None:
        instance = _Impl()
        binding = Binding(target=make_interface("Greeter"), provider=instance)
        assert binding.is_singleton
        assert binding.class_provider is None
        assert str(binding) == "Greeter → <instance _Impl>"

    def test_non_descriptor_target_raises(self, descriptor: ClassDescriptor) -> None:
        with pytest.raises(TypeError, match="target must be"):
            Binding(target="Greeter", provider=descriptor)  # type: ignore[arg-type]

    def test_none_provider_raises(self) -> None:
        with pytest.raises(TypeError, match="provider must not be None"):
            Binding(target=make_interface("Greeter"), provider=None)


class TestContainerSnapshot:
    """Tests for ContainerSnapshot."""

    def test_counts(self, descriptor: ClassDescriptor) -> None:
        snapshot = ContainerSnapshot(
            bindings=(
                Binding(target=make_interface("A"), provider=descriptor),
                Binding(target=make_interface("B"), provider=_Impl()),
            ),
            checking_enabled=True,
        )
        assert snapshot.binding_count == 2
        assert snapshot.singleton_count == 1

    def test_duplicate_target_raises(self, descriptor: ClassDescriptor) -> None:
        target = make_interface("A")
        with pytest.raises(ValueError, match="at most one binding per target"):
            ContainerSnapshot(
                bindings=(
                    Binding(target=target, provider=descriptor),
                    Binding(target=target, provider=_Impl()),
                ),
                checking_enabled=False,
            )
