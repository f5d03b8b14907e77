"""
Expiry Scheduler Interface

Timer facility for records that expire on their own after a fixed delay
(agent activity toasts). Each pending expiry is keyed so it can be
cancelled when the record is dismissed earlier.
"""

from typing import Callable, Protocol


class IExpiryScheduler(Protocol):
    def schedule(self, *, key: str, delay: float, callback: Callable[[], None]) -> None:
        """
        Run callback once after delay seconds.

        Scheduling an already pending key replaces the previous timer.
        """
        ...

    def cancel(self, *, key: str) -> bool:
        """
        Cancel a pending expiry.

        Returns:
            True if a pending timer was cancelled, False if none existed
            (already fired, already cancelled, or never scheduled)
        """
        ...

    def pending_keys(self) -> set[str]: ...
