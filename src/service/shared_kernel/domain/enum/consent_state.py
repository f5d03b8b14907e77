"""Consent State Enum"""

from enum import StrEnum


class ConsentState(StrEnum):
    """Analytics consent decision; PENDING is the only non-terminal state"""

    PENDING = 'pending'
    GRANTED = 'granted'
    DENIED = 'denied'

    @property
    def is_decided(self) -> bool:
        return self is not ConsentState.PENDING
