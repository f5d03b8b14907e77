"""
Settings for the booking core, read from the environment and ``.env``.

Every field can be overridden by an environment variable of the same name;
``BACKEND_CORS_ORIGINS`` also accepts a comma-separated list.
"""

from pathlib import Path
from typing import Annotated, List

from pydantic import BeforeValidator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from src.platform.constant.path import BASE_DIR, STATE_DIR


def _split_origins(value: object) -> object:
    if isinstance(value, str):
        return [origin.strip() for origin in value.split(',') if origin.strip()]
    return value


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=BASE_DIR / '.env',
        env_ignore_empty=True,
        extra='ignore',
    )

    # ---------- app ----------
    PROJECT_NAME: str = 'AgentAir Booking'
    VERSION: str = '0.1.0'
    DEBUG: bool = True
    BACKEND_CORS_ORIGINS: Annotated[List[str], NoDecode, BeforeValidator(_split_origins)] = []

    # ---------- agent activity feed ----------
    ACTIVITY_TTL_SECONDS: float = 6.0
    ACTIVITY_FEED_LIMIT: int = 10

    # ---------- consent / analytics ----------
    CONSENT_STORE_PATH: Path = STATE_DIR / 'consent.json'
    CURRENCY: str = 'USD'
    ITEM_BRAND: str = 'Air Agentic'


settings = Settings()  # type: ignore
