"""Reporters for container state.

Output is str; the caller decides where it goes.
"""

from structdi.application.reporters.console import ConsoleConfig, ConsoleReporter
from structdi.application.reporters.plain_text import PlainTextReporter

__all__ = [
    "ConsoleConfig",
    "ConsoleReporter",
    "PlainTextReporter",
]
