"""Default object factory: one Python type per class descriptor.

Generated types subclass the parent descriptor's type, so method lookup
follows the class chain and isinstance() works against ancestors.
Instances keep a __dict__ for injected dependencies.
"""

from __future__ import annotations

import threading
import weakref
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Mapping

    from structdi.domain.model.class_ import ClassDescriptor


class TypeObjectFactory:
    """Builds and caches a type for each ClassDescriptor.

    Thread-safe: type creation guarded by a lock.
    Cache holds descriptors weakly.
    """

    __slots__ = ("_lock", "_types")

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._types: weakref.WeakKeyDictionary[ClassDescriptor, type] = weakref.WeakKeyDictionary()

    def type_for(self, descriptor: ClassDescriptor) -> type:
        """Get (building on first use) the type backing descriptor."""
        with self._lock:
            cached = self._types.get(descriptor)
            if cached is not None:
                return cached

            base = object if descriptor.parent is None else self.type_for(descriptor.parent)
            namespace: dict[str, Any] = dict(descriptor.attributes)
            namespace.update(descriptor.methods)
            namespace["__qualname__"] = descriptor.name

            cls = type(descriptor.name, (base,), namespace)
            self._types[descriptor] = cls
            return cls

    def instantiate(
        self,
        descriptor: ClassDescriptor,
        args: tuple[Any, ...],
        kwargs: Mapping[str, Any],
    ) -> Any:
        """Construct a new instance, running the __init__ entry if any."""
        return self.type_for(descriptor)(*args, **kwargs)


_default_factory = TypeObjectFactory()


def default_object_factory() -> TypeObjectFactory:
    """Get the shared default factory."""
    return _default_factory
