"""Run-exactly-once guard for lifecycle hooks."""

from __future__ import annotations

import threading
from collections.abc import Callable


class Once:
    """Executes an effect at most once across any number of callers.

    Concurrent callers block until the first effect finishes, so nobody
    observes ``done`` before the effect has completed.  If the effect raises,
    the guard stays open and the next call tries again.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._done = False

    @property
    def done(self) -> bool:
        return self._done

    def run(self, effect: Callable[[], None]) -> bool:
        """Run *effect* unless it already ran.  Returns ``True`` if this call ran it."""
        if self._done:
            return False
        with self._lock:
            if self._done:
                return False
            effect()
            self._done = True
            return True
