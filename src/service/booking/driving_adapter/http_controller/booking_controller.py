from collections.abc import AsyncGenerator
from typing import Any

from fastapi import APIRouter, Depends, status
from sse_starlette.sse import EventSourceResponse

from src.platform.logging.loguru_io import Logger
from src.service.booking.app.command.clear_booking_use_case import ClearBookingUseCase
from src.service.booking.app.command.dismiss_activity_use_case import DismissActivityUseCase
from src.service.booking.app.command.remove_booking_item_use_case import (
    RemoveBookingItemUseCase,
)
from src.service.booking.app.query.get_booking_snapshot_use_case import (
    GetBookingSnapshotUseCase,
)
from src.service.booking.app.query.get_seat_map_use_case import GetSeatMapUseCase
from src.service.booking.app.query.stream_booking_use_case import StreamBookingUseCase
from src.service.booking.driving_adapter.schema.booking_schema import (
    BookingSnapshotResponse,
    SeatMapResponse,
)


router = APIRouter()


@router.get('', response_model=BookingSnapshotResponse)
async def get_booking(
    use_case: GetBookingSnapshotUseCase = Depends(GetBookingSnapshotUseCase.depends),
) -> dict[str, Any]:
    return use_case.execute().to_dict()


@router.delete('/items/{class_id}', response_model=BookingSnapshotResponse)
@Logger.io
async def remove_booking_item(
    class_id: str,
    use_case: RemoveBookingItemUseCase = Depends(RemoveBookingItemUseCase.depends),
) -> dict[str, Any]:
    return use_case.execute(class_id=class_id).to_dict()


@router.delete('', response_model=BookingSnapshotResponse)
@Logger.io
async def clear_booking(
    use_case: ClearBookingUseCase = Depends(ClearBookingUseCase.depends),
) -> dict[str, Any]:
    return use_case.execute().to_dict()


@router.delete('/activities/{activity_id}', response_model=BookingSnapshotResponse)
async def dismiss_activity(
    activity_id: str,
    use_case: DismissActivityUseCase = Depends(DismissActivityUseCase.depends),
) -> dict[str, Any]:
    return use_case.execute(activity_id=activity_id).to_dict()


@router.get('/seat-map/{class_id}', response_model=SeatMapResponse)
async def get_seat_map(
    class_id: str,
    use_case: GetSeatMapUseCase = Depends(GetSeatMapUseCase.depends),
) -> dict[str, Any]:
    return use_case.execute(class_id=class_id)


@router.get('/stream', status_code=status.HTTP_200_OK)
async def stream_booking(
    use_case: StreamBookingUseCase = Depends(StreamBookingUseCase.depends),
) -> EventSourceResponse:
    """SSE push of booking snapshots: the current one first, then one per change."""

    async def event_generator() -> AsyncGenerator[dict, None]:
        async for snapshot in use_case.stream():
            response = BookingSnapshotResponse.model_validate(snapshot.to_dict())
            yield {
                'event': 'booking_snapshot',
                'data': response.model_dump_json(by_alias=True),
            }

    return EventSourceResponse(event_generator())
