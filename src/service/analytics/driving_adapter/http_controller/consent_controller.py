from typing import Any

from fastapi import APIRouter, Depends

from src.platform.logging.loguru_io import Logger
from src.service.analytics.app.command.decide_consent_use_case import DecideConsentUseCase
from src.service.analytics.app.query.get_consent_status_use_case import (
    GetConsentStatusUseCase,
)
from src.service.analytics.driving_adapter.schema.consent_schema import ConsentStatusResponse


router = APIRouter()


@router.get('', response_model=ConsentStatusResponse)
async def get_consent(
    use_case: GetConsentStatusUseCase = Depends(GetConsentStatusUseCase.depends),
) -> dict[str, Any]:
    return use_case.execute()


@router.post('/grant', response_model=ConsentStatusResponse)
@Logger.io
async def grant_consent(
    use_case: DecideConsentUseCase = Depends(DecideConsentUseCase.depends),
    status_use_case: GetConsentStatusUseCase = Depends(GetConsentStatusUseCase.depends),
) -> dict[str, Any]:
    use_case.grant()
    return status_use_case.execute()


@router.post('/deny', response_model=ConsentStatusResponse)
@Logger.io
async def deny_consent(
    use_case: DecideConsentUseCase = Depends(DecideConsentUseCase.depends),
    status_use_case: GetConsentStatusUseCase = Depends(GetConsentStatusUseCase.depends),
) -> dict[str, Any]:
    use_case.deny()
    return status_use_case.execute()
