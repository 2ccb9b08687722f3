"""Thread-safe in-flight request counter."""

import threading
from collections.abc import Iterator
from contextlib import contextmanager


class RequestCounter:
    """Counts requests currently being processed."""

    def __init__(self) -> None:
        self._active = 0
        self._total = 0
        self._lock = threading.Lock()

    @contextmanager
    def track(self) -> Iterator[None]:
        with self._lock:
            self._active += 1
            self._total += 1
        try:
            yield
        finally:
            with self._lock:
                self._active -= 1

    @property
    def active(self) -> int:
        with self._lock:
            return self._active

    @property
    def total(self) -> int:
        with self._lock:
            return self._total
