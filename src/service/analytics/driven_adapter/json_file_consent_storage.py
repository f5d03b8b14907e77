"""
JSON File Consent Storage

Keeps the consent entries in a small JSON object on disk. The file is read
once, on first access; every write replaces it atomically.
"""

import os
from pathlib import Path
from typing import Optional

import orjson

from src.platform.logging.loguru_io import Logger
from src.service.analytics.app.interface.i_consent_storage import IConsentStorage


class JsonFileConsentStorage(IConsentStorage):
    def __init__(self, *, path: Path) -> None:
        self.path = Path(path)
        self._entries: Optional[dict[str, str]] = None

    def get_item(self, key: str) -> Optional[str]:
        return self._load().get(key)

    def set_item(self, key: str, value: str) -> None:
        entries = self._load()
        entries[key] = value
        self._write(entries)

    def _load(self) -> dict[str, str]:
        if self._entries is not None:
            return self._entries

        self._entries = {}
        if not self.path.exists():
            return self._entries
        try:
            data = orjson.loads(self.path.read_bytes())
        except (OSError, orjson.JSONDecodeError) as e:
            Logger.base.warning(f'💾 [CONSENT_STORAGE] Unreadable {self.path}, starting empty: {e}')
            return self._entries

        if isinstance(data, dict):
            self._entries = {str(k): str(v) for k, v in data.items() if v is not None}
        return self._entries

    def _write(self, entries: dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + '.tmp')
        tmp_path.write_bytes(orjson.dumps(entries, option=orjson.OPT_INDENT_2))
        os.replace(tmp_path, self.path)
