"""
Cart Store

Food-order sibling of the booking store. Adding an item already in the cart
accumulates its quantity, and the item count is the sum of quantities.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Callable, Optional, Sequence

import attrs

from src.platform.logging.loguru_io import Logger
from src.service.ordering.domain.entity.menu_item_entity import CartItem, MenuItem


_CENT = Decimal('0.01')

CartListener = Callable[[tuple[CartItem, ...]], None]


class CartStore:
    def __init__(self, *, menu: Sequence[MenuItem]) -> None:
        self._menu: tuple[MenuItem, ...] = tuple(menu)
        self._items: list[CartItem] = []
        self._listeners: list[CartListener] = []

    @property
    def menu(self) -> tuple[MenuItem, ...]:
        return self._menu

    @property
    def items(self) -> tuple[CartItem, ...]:
        return tuple(attrs.evolve(item) for item in self._items)

    def find_menu_item(self, item_id: str) -> Optional[MenuItem]:
        return next((m for m in self._menu if m.id == item_id), None)

    def get_item(self, item_id: str) -> Optional[CartItem]:
        return next((i for i in self._items if i.menu_item.id == item_id), None)

    @Logger.io
    def add_item(self, menu_item_id: str, quantity: int = 1) -> Optional[CartItem]:
        """Returns the resulting cart line, or None when nothing changed"""
        if quantity <= 0:
            return None
        menu_item = self.find_menu_item(menu_item_id)
        if menu_item is None:
            return None

        existing = self.get_item(menu_item_id)
        if existing is not None:
            existing.quantity += quantity
        else:
            existing = CartItem(menu_item=menu_item, quantity=quantity)
            self._items.append(existing)
        self._notify()
        return attrs.evolve(existing)

    @Logger.io
    def remove_item(self, menu_item_id: str) -> Optional[CartItem]:
        removed = self.get_item(menu_item_id)
        if removed is None:
            return None
        self._items = [i for i in self._items if i is not removed]
        self._notify()
        return removed

    @Logger.io
    def clear(self) -> None:
        if not self._items:
            return
        self._items = []
        self._notify()

    def summary(self) -> dict[str, Any]:
        return {
            'items': [item.to_dict() for item in self._items],
            'total': float(self.total()),
            'count': self.count(),
        }

    def total(self) -> Decimal:
        total = sum((item.subtotal for item in self._items), Decimal('0'))
        return total.quantize(_CENT, rounding=ROUND_HALF_UP)

    def count(self) -> int:
        return sum(item.quantity for item in self._items)

    def subscribe(self, listener: CartListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        items = self.items
        for listener in list(self._listeners):
            try:
                listener(items)
            except Exception as e:
                Logger.base.exception(f'🛒 [CART_STORE] Listener failed: {e}')
