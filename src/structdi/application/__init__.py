"""structdi application layer: container services and reporters."""

from structdi.application.reporters import ConsoleConfig, ConsoleReporter, PlainTextReporter
from structdi.application.services import Container, Resolver

__all__ = [
    "Container",
    "Resolver",
    "ConsoleConfig",
    "ConsoleReporter",
    "PlainTextReporter",
]
