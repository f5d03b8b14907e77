from typing import Any, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.service.ordering.domain.aggregate.cart_store import CartStore
from src.service.ordering.domain.entity.menu_item_entity import MenuItem


class GetCartUseCase:
    def __init__(self, cart_store: CartStore) -> None:
        self.cart_store = cart_store

    @classmethod
    @inject
    def depends(cls, cart_store: CartStore = Depends(Provide[Container.cart_store])) -> Self:
        return cls(cart_store=cart_store)

    def menu(self) -> tuple[MenuItem, ...]:
        return self.cart_store.menu

    def execute(self) -> dict[str, Any]:
        return self.cart_store.summary()
