"""
Process-wide request counter for the static file server.
"""

import threading

_INT32_MIN = -(2 ** 31)
_INT32_RANGE = 2 ** 32


def _wrap_int32(value: int) -> int:
    return (value - _INT32_MIN) % _INT32_RANGE + _INT32_MIN


class HitCounter:
    """
    Signed 32-bit counter with indivisible increment/load/store.

    Requests are served from several threads (FastAPI threadpool plus the
    event loop), so every operation holds the lock for exactly one step.
    Not persisted: a restart starts again from zero.
    """

    def __init__(self, value: int = 0):
        self._lock = threading.Lock()
        self._value = _wrap_int32(value)

    def increment(self, delta: int = 1) -> int:
        """Add delta and return the new value (wraps like an int32)"""
        with self._lock:
            self._value = _wrap_int32(self._value + delta)
            return self._value

    def load(self) -> int:
        with self._lock:
            return self._value

    def store(self, value: int) -> None:
        with self._lock:
            self._value = _wrap_int32(value)
