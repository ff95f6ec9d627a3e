"""Container configuration."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ContainerConfig:
    """Initial state of a Container.

    Immutable configuration object. Container.reset() returns to it.

    Attributes:
        checking_enabled: Run signature and conformance checks on
            define_interface, define_class and bind.
    """

    checking_enabled: bool = True
