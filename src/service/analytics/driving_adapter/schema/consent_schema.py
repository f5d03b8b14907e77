from typing import Optional

from pydantic import BaseModel, ConfigDict


class ConsentStatusResponse(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'consent_state': 'granted',
                'consent_timestamp': '2026-03-15T08:00:00.000Z',
                'pending_events': 0,
            }
        }
    )

    consent_state: str
    consent_timestamp: Optional[str] = None
    pending_events: int = 0
