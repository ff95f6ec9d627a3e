"""Infrastructure adapters: introspection and object construction."""

from structdi.infrastructure.introspection import signature_of
from structdi.infrastructure.object_factory import TypeObjectFactory, default_object_factory

__all__ = [
    "TypeObjectFactory",
    "default_object_factory",
    "signature_of",
]
