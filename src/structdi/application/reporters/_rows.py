"""Shared row extraction for container reporters."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from structdi.domain.model.interface import InterfaceDescriptor

if TYPE_CHECKING:
    from structdi.domain.model.binding import Binding
    from structdi.domain.model.snapshot import ContainerSnapshot


@dataclass(frozen=True, slots=True)
class BindingRow:
    """One binding flattened to display strings."""

    target: str
    target_kind: str
    provider: str
    lifetime: str
    dependencies: str


def binding_rows(snapshot: ContainerSnapshot) -> tuple[BindingRow, ...]:
    """Flatten snapshot bindings, in registration order."""
    return tuple(_row(binding) for binding in snapshot.bindings)


def _row(binding: Binding) -> BindingRow:
    kind = "interface" if isinstance(binding.target, InterfaceDescriptor) else "class"
    provider = binding.class_provider

    if provider is None:
        return BindingRow(
            target=str(binding.target),
            target_kind=kind,
            provider=f"<{type(binding.provider).__name__} instance>",
            lifetime="singleton",
            dependencies="-",
        )

    deps = ", ".join(f"{prop}: {dep}" for prop, dep in provider.dependencies.items())
    return BindingRow(
        target=str(binding.target),
        target_kind=kind,
        provider=str(provider),
        lifetime="transient",
        dependencies=deps or "-",
    )
