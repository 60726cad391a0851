"""
Serial number allocation for containers.

Serials have the form ``KON-<kind>-<n>``; ``n`` comes from a counter shared by
every container kind, starts at 1 and is never reused.
"""

from __future__ import annotations

import threading

from containership_app.config.limits import SERIAL_PREFIX


class SerialNumberAllocator:
    """Thread-safe, monotonically increasing serial source."""

    def __init__(self, start: int = 1, prefix: str = SERIAL_PREFIX) -> None:
        if start < 1:
            raise ValueError("Serial counter must start at 1 or above.")
        self._next = start
        self._prefix = prefix
        self._lock = threading.Lock()

    @property
    def peek(self) -> int:
        """Number the next allocation will use."""
        with self._lock:
            return self._next

    def allocate(self, kind: str) -> str:
        if not kind:
            raise ValueError("Container kind tag is required.")
        with self._lock:
            n = self._next
            self._next += 1
        return f"{self._prefix}-{kind}-{n}"


# Process-wide allocator used when a container is built without one.
# Created once at import; never reset.
DEFAULT_ALLOCATOR = SerialNumberAllocator()
