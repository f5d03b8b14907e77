from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.booking.domain.aggregate.booking_store import BookingSnapshot, BookingStore


class ClearBookingUseCase:
    def __init__(self, booking_store: BookingStore) -> None:
        self.booking_store = booking_store

    @classmethod
    @inject
    def depends(
        cls, booking_store: BookingStore = Depends(Provide[Container.booking_store])
    ) -> Self:
        return cls(booking_store=booking_store)

    @Logger.io
    def execute(self) -> BookingSnapshot:
        """Empty the booking and close checkout; the activity feed is left alone"""
        self.booking_store.clear()
        self.booking_store.set_checkout_open(False)
        self.booking_store.set_checkout_prefill(None)
        self.booking_store.open_seat_map(None)
        return self.booking_store.snapshot()
