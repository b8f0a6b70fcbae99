"""A thread-safe integer counter with atomic update operations."""

from __future__ import annotations

import threading


class AtomicInt:
    """An integer whose updates are performed atomically across threads."""

    __slots__ = ("_value", "_lock")

    def __init__(self, value: int = 0) -> None:
        self._value = int(value)
        self._lock = threading.Lock()

    def __repr__(self) -> str:
        return f"AtomicInt({self.read()})"

    def set(self, value: int) -> None:
        """Replace the current value."""
        with self._lock:
            self._value = int(value)

    def read(self) -> int:
        """Return the current value."""
        return self._value

    def add(self, amount: int) -> None:
        """Add ``amount`` to the value."""
        with self._lock:
            self._value += amount

    def sub(self, amount: int) -> None:
        """Subtract ``amount`` from the value."""
        with self._lock:
            self._value -= amount

    def inc(self) -> None:
        """Increment the value by one."""
        with self._lock:
            self._value += 1

    def dec(self) -> None:
        """Decrement the value by one."""
        with self._lock:
            self._value -= 1

    def inc_and_test(self) -> int:
        """Increment the value and return what it held before the increment."""
        with self._lock:
            self._value += 1
            return self._value - 1

    def dec_and_test(self) -> int:
        """Decrement the value and return what it held before the decrement."""
        with self._lock:
            self._value -= 1
            return self._value + 1