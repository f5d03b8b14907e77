"""
Consent Storage Interface

Durable key/value storage for the consent decision. Two keys are used:
the decision itself and the ISO-8601 timestamp it was made at.
"""

from abc import ABC, abstractmethod
from typing import Optional


CONSENT_STORAGE_KEY = 'analytics_consent'
CONSENT_TIMESTAMP_KEY = 'analytics_consent_timestamp'


class IConsentStorage(ABC):
    @abstractmethod
    def get_item(self, key: str) -> Optional[str]:
        pass

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        pass
