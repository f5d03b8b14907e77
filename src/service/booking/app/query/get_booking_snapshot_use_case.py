from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.service.booking.domain.aggregate.booking_store import BookingSnapshot, BookingStore


class GetBookingSnapshotUseCase:
    def __init__(self, booking_store: BookingStore) -> None:
        self.booking_store = booking_store

    @classmethod
    @inject
    def depends(
        cls, booking_store: BookingStore = Depends(Provide[Container.booking_store])
    ) -> Self:
        return cls(booking_store=booking_store)

    def execute(self) -> BookingSnapshot:
        return self.booking_store.snapshot()
