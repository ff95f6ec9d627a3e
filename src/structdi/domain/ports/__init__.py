"""Domain ports: contracts for external collaborators."""

from structdi.domain.ports.object_factory import ObjectFactoryPort
from structdi.domain.ports.reporter import ReporterProtocol

__all__ = [
    "ObjectFactoryPort",
    "ReporterProtocol",
]
