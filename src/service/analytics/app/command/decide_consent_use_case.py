"""
Decide Consent Use Case

Banner buttons of the presentation layer. A second decision is rejected
with 409 instead of being silently ignored, so the UI learns it is stale.
"""

from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import ConflictError
from src.platform.logging.loguru_io import Logger
from src.service.analytics.app.consent_manager import ConsentManager
from src.service.shared_kernel.domain.enum.consent_state import ConsentState


class DecideConsentUseCase:
    def __init__(self, consent_manager: ConsentManager) -> None:
        self.consent_manager = consent_manager

    @classmethod
    @inject
    def depends(
        cls, consent_manager: ConsentManager = Depends(Provide[Container.consent_manager])
    ) -> Self:
        return cls(consent_manager=consent_manager)

    @Logger.io
    def grant(self) -> ConsentState:
        if not self.consent_manager.grant():
            self._raise_already_decided()
        return ConsentState.GRANTED

    @Logger.io
    def deny(self) -> ConsentState:
        if not self.consent_manager.deny():
            self._raise_already_decided()
        return ConsentState.DENIED

    def _raise_already_decided(self) -> None:
        state = self.consent_manager.get_state()
        raise ConflictError(
            f'Consent was already {state}',
            detail={'consent_state': state.value},
        )
