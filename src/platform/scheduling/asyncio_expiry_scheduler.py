"""
Asyncio Expiry Scheduler

Keyed ``loop.call_later`` timers. Everything runs on the event loop
thread, so a fired callback and a cancel can never interleave: whichever
runs first removes the handle and the other becomes a no-op.
"""

import asyncio
from typing import Callable

from src.platform.logging.loguru_io import Logger


class AsyncioExpiryScheduler:
    def __init__(self) -> None:
        self._handles: dict[str, asyncio.TimerHandle] = {}

    def schedule(self, *, key: str, delay: float, callback: Callable[[], None]) -> None:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            Logger.base.warning(
                f'⏱️ [EXPIRY] No running event loop, {key} will only leave on dismiss'
            )
            return

        self.cancel(key=key)

        def fire() -> None:
            # Handle is gone once the timer fires, cancel() after this point is a no-op
            if self._handles.pop(key, None) is None:
                return
            Logger.base.debug(f'⏱️ [EXPIRY] {key} expired')
            callback()

        self._handles[key] = loop.call_later(delay, fire)

    def cancel(self, *, key: str) -> bool:
        handle = self._handles.pop(key, None)
        if handle is None:
            return False
        handle.cancel()
        return True

    def pending_keys(self) -> set[str]:
        return set(self._handles)

    def cancel_all(self) -> None:
        for key in list(self._handles):
            self.cancel(key=key)
