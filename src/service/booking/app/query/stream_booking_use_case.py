"""
Stream Booking Use Case

SSE streaming of booking snapshots: the current snapshot first, then one
snapshot per effective store change.
"""

from collections.abc import AsyncGenerator
from typing import Self

import anyio
from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.booking.domain.aggregate.booking_store import BookingSnapshot, BookingStore


SNAPSHOT_BUFFER_SIZE = 64


class StreamBookingUseCase:
    def __init__(self, booking_store: BookingStore) -> None:
        self.booking_store = booking_store

    @classmethod
    @inject
    def depends(
        cls, booking_store: BookingStore = Depends(Provide[Container.booking_store])
    ) -> Self:
        return cls(booking_store=booking_store)

    async def stream(self) -> AsyncGenerator[BookingSnapshot, None]:
        send_stream, receive_stream = anyio.create_memory_object_stream(
            max_buffer_size=SNAPSHOT_BUFFER_SIZE
        )

        def on_change(snapshot: BookingSnapshot) -> None:
            try:
                send_stream.send_nowait(snapshot)
            except anyio.WouldBlock:
                Logger.base.warning('📺 [BOOKING_SSE] Subscriber too slow, snapshot skipped')

        unsubscribe = self.booking_store.subscribe(on_change)
        try:
            yield self.booking_store.snapshot()
            async with receive_stream:
                async for snapshot in receive_stream:
                    yield snapshot
        finally:
            unsubscribe()
            send_stream.close()
            Logger.base.info('📺 [BOOKING_SSE] Subscriber disconnected')
