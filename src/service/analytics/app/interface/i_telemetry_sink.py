"""
Telemetry Sink Interface

Outbound analytics channel. Nothing may be sent before ``open()`` is
called, and ``open()`` is only called once consent has been granted.
"""

from abc import ABC, abstractmethod
from typing import Any


class ITelemetrySink(ABC):
    @abstractmethod
    def open(self) -> None:
        """Open the channel; calling it again is a no-op"""
        pass

    @property
    @abstractmethod
    def is_open(self) -> bool:
        pass

    @abstractmethod
    def send(self, event: dict[str, Any]) -> None:
        """
        Deliver one serialized event.

        Events are dicts of either shape:
            {'name': str, 'payload': dict}
            {'name': str, 'commerce': dict, 'extra': dict}
        """
        pass
