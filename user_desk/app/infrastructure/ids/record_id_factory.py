import threading
import time
from collections.abc import Callable


class RecordIdFactory:
    """Issues integer ids from the wall clock in milliseconds.

    Ids are strictly increasing for the life of the factory: a second call
    inside the same millisecond (or after a clock step backwards) gets the
    previous id plus one, so no two calls ever return the same value.
    """

    def __init__(self, clock_ms: Callable[[], int] | None = None) -> None:
        self._clock_ms = clock_ms or (lambda: time.time_ns() // 1_000_000)
        self._last = 0
        self._lock = threading.Lock()

    def new_id(self) -> int:
        with self._lock:
            candidate = max(int(self._clock_ms()), self._last + 1)
            self._last = candidate
            return candidate
