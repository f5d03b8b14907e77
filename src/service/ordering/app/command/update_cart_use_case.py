"""
Update Cart Use Case

Cart mutations from the presentation layer. Additions and removals are
reported as GA4 commerce events tagged as human interactions.
"""

from typing import Any, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.core_setting import Settings
from src.platform.config.di import Container
from src.platform.exception.exceptions import DomainError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.analytics.app.analytics_emitter import AnalyticsEmitter
from src.service.ordering.domain.aggregate.cart_store import CartStore
from src.service.ordering.domain.entity.menu_item_entity import MenuItem
from src.service.shared_kernel.domain.enum.interaction_source import InteractionSource


class UpdateCartUseCase:
    def __init__(
        self, cart_store: CartStore, emitter: AnalyticsEmitter, currency: str = 'USD'
    ) -> None:
        self.cart_store = cart_store
        self.emitter = emitter
        self.currency = currency

    @classmethod
    @inject
    def depends(
        cls,
        cart_store: CartStore = Depends(Provide[Container.cart_store]),
        emitter: AnalyticsEmitter = Depends(Provide[Container.analytics_emitter]),
        settings: Settings = Depends(Provide[Container.config_service]),
    ) -> Self:
        return cls(cart_store=cart_store, emitter=emitter, currency=settings.CURRENCY)

    @Logger.io
    def add_item(self, *, item_id: str, quantity: int = 1) -> dict[str, Any]:
        menu_item = self.cart_store.find_menu_item(item_id)
        if menu_item is None:
            raise NotFoundError(
                f'Menu item "{item_id}" not found',
                detail={'available_items': [m.id for m in self.cart_store.menu]},
            )

        cart_item = self.cart_store.add_item(item_id, quantity)
        if cart_item is None:
            raise DomainError(f'Quantity must be positive, got {quantity}')
        self._emit('add_to_cart', menu_item, quantity)
        return self.cart_store.summary()

    @Logger.io
    def remove_item(self, *, item_id: str) -> dict[str, Any]:
        removed = self.cart_store.remove_item(item_id)
        if removed is None:
            raise NotFoundError(f'Menu item "{item_id}" is not in the cart')
        self._emit('remove_from_cart', removed.menu_item, removed.quantity)
        return self.cart_store.summary()

    @Logger.io
    def clear(self) -> dict[str, Any]:
        self.cart_store.clear()
        return self.cart_store.summary()

    def _emit(self, name: str, menu_item: MenuItem, quantity: int) -> None:
        self.emitter.emit_commerce(
            name,
            {
                'currency': self.currency,
                'value': float(menu_item.price * quantity),
                'items': [
                    {
                        'item_id': menu_item.id,
                        'item_name': menu_item.name,
                        'item_category': menu_item.category.value,
                        'price': float(menu_item.price),
                        'quantity': quantity,
                    }
                ],
            },
            source=InteractionSource.HUMAN,
        )
