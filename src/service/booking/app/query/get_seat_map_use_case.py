"""
Get Seat Map Use Case

The cabin grid the seat map renders for one booked or bookable class, with
the columns split at the aisle and the currently selected seat marked.
"""

from typing import Any, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.service.booking.domain.aggregate.booking_store import BookingStore
from src.service.booking.domain.seat_allocation_domain import (
    build_seat_layout,
    get_seat_layout,
)


class GetSeatMapUseCase:
    def __init__(self, booking_store: BookingStore) -> None:
        self.booking_store = booking_store

    @classmethod
    @inject
    def depends(
        cls, booking_store: BookingStore = Depends(Provide[Container.booking_store])
    ) -> Self:
        return cls(booking_store=booking_store)

    def execute(self, *, class_id: str) -> dict[str, Any]:
        flight = self.booking_store.find_flight_by_class(class_id)
        flight_class = flight.find_class(class_id) if flight else None
        if flight is None or flight_class is None:
            raise NotFoundError(f'Class "{class_id}" not found')

        layout = get_seat_layout(flight_class.name)
        grid = build_seat_layout(flight_class.name)
        item = self.booking_store.get_item(class_id)

        return {
            'class_id': flight_class.id,
            'flight_id': flight.id,
            'cabin_class': flight_class.name.value,
            'left_columns': list(layout.left_columns),
            'right_columns': list(layout.right_columns),
            'rows': [[seat.to_dict() for seat in row] for row in grid],
            'available_seats': sum(1 for row in grid for seat in row if not seat.occupied),
            'selected_seat': item.seat.label if item and item.seat else None,
        }
