from typing import Optional

from src.service.analytics.app.interface.i_consent_storage import IConsentStorage


class InMemoryConsentStorage(IConsentStorage):
    """Session-only storage; the decision is forgotten on restart"""

    def __init__(self, initial: Optional[dict[str, str]] = None) -> None:
        self._entries: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._entries.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._entries[key] = value
