from typing import Any, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.service.analytics.app.consent_manager import ConsentManager


class GetConsentStatusUseCase:
    def __init__(self, consent_manager: ConsentManager) -> None:
        self.consent_manager = consent_manager

    @classmethod
    @inject
    def depends(
        cls, consent_manager: ConsentManager = Depends(Provide[Container.consent_manager])
    ) -> Self:
        return cls(consent_manager=consent_manager)

    def execute(self) -> dict[str, Any]:
        return {
            'consent_state': self.consent_manager.get_state(),
            'consent_timestamp': self.consent_manager.get_timestamp(),
            'pending_events': self.consent_manager.pending_count,
        }
