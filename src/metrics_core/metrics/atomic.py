"""AtomicValue — a float updated as a single indivisible step."""
from __future__ import annotations

import threading


class AtomicValue:
    """A float guarded by its own lock.

    Every primitive (gauge, counter, histogram bucket) keeps its state in one
    of these so that concurrent writers never observe a torn update and no
    caller needs external locking.
    """

    __slots__ = ("_value", "_lock")

    def __init__(self, value: float = 0.0) -> None:
        self._value = float(value)
        self._lock = threading.Lock()

    def add(self, delta: float) -> float:
        """Add *delta* and return the new value."""
        with self._lock:
            self._value += delta
            return self._value

    def store(self, value: float) -> None:
        with self._lock:
            self._value = float(value)

    def exchange(self, value: float) -> float:
        """Replace the value and return the previous one."""
        with self._lock:
            previous = self._value
            self._value = float(value)
            return previous

    def load(self) -> float:
        with self._lock:
            return self._value

    def __repr__(self) -> str:
        return f"AtomicValue({self.load()!r})"


__all__ = ["AtomicValue"]
