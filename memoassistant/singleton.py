"""A thread-safe metaclass that keeps one instance per class."""

from __future__ import annotations

import threading
from typing import Any


class SingletonMeta(type):
    """Classes using this metaclass are created once; later calls return that instance."""

    _instances: dict[type, Any] = {}
    _lock = threading.Lock()

    def __call__(cls, *args: Any, **kwargs: Any) -> Any:
        with SingletonMeta._lock:
            instance = SingletonMeta._instances.get(cls)
            if instance is None:
                instance = super().__call__(*args, **kwargs)
                SingletonMeta._instances[cls] = instance
            return instance