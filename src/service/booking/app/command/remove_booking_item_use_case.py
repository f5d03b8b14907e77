from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.core_setting import Settings
from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.analytics.app.analytics_emitter import AnalyticsEmitter
from src.service.booking.domain.aggregate.booking_store import BookingSnapshot, BookingStore
from src.service.shared_kernel.domain.enum.interaction_source import InteractionSource


class RemoveBookingItemUseCase:
    def __init__(
        self,
        booking_store: BookingStore,
        emitter: AnalyticsEmitter,
        currency: str = 'USD',
    ) -> None:
        self.booking_store = booking_store
        self.emitter = emitter
        self.currency = currency

    @classmethod
    @inject
    def depends(
        cls,
        booking_store: BookingStore = Depends(Provide[Container.booking_store]),
        emitter: AnalyticsEmitter = Depends(Provide[Container.analytics_emitter]),
        settings: Settings = Depends(Provide[Container.config_service]),
    ) -> Self:
        return cls(booking_store=booking_store, emitter=emitter, currency=settings.CURRENCY)

    @Logger.io
    def execute(self, *, class_id: str) -> BookingSnapshot:
        item = self.booking_store.get_item(class_id)
        if item is None:
            raise NotFoundError(f'Class "{class_id}" is not in the booking')

        self.booking_store.remove_item(class_id)
        self.emitter.emit_commerce(
            'remove_from_cart',
            {
                'currency': self.currency,
                'value': item.subtotal,
                'items': [
                    {
                        'item_id': class_id,
                        'item_name': f'{item.flight.route} · {item.flight_class.name}',
                        'item_category': item.flight_class.name.value,
                        'price': item.flight_class.price,
                        'quantity': item.passengers,
                    }
                ],
            },
            source=InteractionSource.HUMAN,
        )
        return self.booking_store.snapshot()
