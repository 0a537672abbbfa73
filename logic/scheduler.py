"""
One-shot timers for the delayed bot move.

The controller only needs two calls: schedule(delay_ms, callback) returning
a handle, and cancel(handle). The Tk UI provides its own implementation on
top of root.after / root.after_cancel (see ui.py).
"""

import time
from typing import Callable, Optional


class BlockingScheduler:
    """
    Scheduler for console mode.

    There is no event loop to come back to, so the callback runs right
    away after sleeping for the delay. Nothing is ever left pending.
    """

    def __init__(self, sleep: Callable[[float], None] = time.sleep):
        self.sleep = sleep

    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> Optional[int]:
        if delay_ms > 0:
            self.sleep(delay_ms / 1000)
        callback()
        return None

    def cancel(self, handle: Optional[int]):
        pass
