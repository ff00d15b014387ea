"""Record id generation."""

import time
from typing import Callable, Optional


class TimestampIdGenerator:
    """Issues decimal-string ids derived from epoch milliseconds.

    Ids are strictly increasing within one generator: when the clock has
    not advanced since the previous id, the previous value plus one is
    used instead.

    Not thread-safe on its own; callers issue ids while holding the
    store's write lock.
    """

    def __init__(self, clock: Optional[Callable[[], int]] = None) -> None:
        self._clock = clock or time.time_ns
        self._last = 0

    def next_id(self) -> str:
        """Return a new id."""
        now_ms = self._clock() // 1_000_000
        self._last = max(now_ms, self._last + 1)
        return str(self._last)
