from typing import Any, Callable

from src.service.analytics.app.interface.i_telemetry_sink import ITelemetrySink


FIXED_TIMESTAMP = '2026-03-15T08:00:00.000Z'


class FakeExpiryScheduler:
    """Records timers instead of running them; tests fire them by key"""

    def __init__(self) -> None:
        self.timers: dict[str, tuple[float, Callable[[], None]]] = {}

    def schedule(self, *, key: str, delay: float, callback: Callable[[], None]) -> None:
        self.timers[key] = (delay, callback)

    def cancel(self, *, key: str) -> bool:
        return self.timers.pop(key, None) is not None

    def pending_keys(self) -> set[str]:
        return set(self.timers)

    def fire(self, key: str) -> None:
        _, callback = self.timers.pop(key)
        callback()


class FailingSink(ITelemetrySink):
    def __init__(self) -> None:
        self._open = False
        self.attempts: list[dict[str, Any]] = []

    @property
    def is_open(self) -> bool:
        return self._open

    def open(self) -> None:
        self._open = True

    def send(self, event: dict[str, Any]) -> None:
        self.attempts.append(event)
        raise ConnectionError('collector unreachable')
