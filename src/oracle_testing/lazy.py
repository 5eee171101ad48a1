"""
Copyright (c) 2024, 2026, Oracle and/or its affiliates.
Licensed under the Universal Permissive License v1.0 as shown at http://oss.oracle.com/licenses/upl.

Thread-safe compute-once holder.
"""

import threading
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")


class LazyValue(Generic[T]):
    """Compute a value on first use and remember it for later callers.

    Concurrent callers of ``get()`` block on a lock while the factory runs,
    so the factory is invoked at most once per initialization. A factory that
    raises leaves the holder uninitialized.
    """

    def __init__(self, factory: Callable[[], T]) -> None:
        self._factory = factory
        self._lock = threading.Lock()
        self._initialized = False
        self._value: Optional[T] = None

    def get(self) -> T:
        """Return the cached value, computing it if needed."""
        if self._initialized:
            return self._value
        with self._lock:
            if not self._initialized:
                self._value = self._factory()
                self._initialized = True
            return self._value

    def is_initialized(self) -> bool:
        """True once a value has been computed."""
        return self._initialized

    def reset(self) -> None:
        """Forget the cached value."""
        with self._lock:
            self._initialized = False
            self._value = None
