from decimal import Decimal
from typing import Any

import attrs

from src.service.ordering.domain.enum.menu_category import MenuCategory


@attrs.frozen
class MenuItem:
    id: str
    name: str
    description: str
    price: Decimal = attrs.field(converter=Decimal)
    category: MenuCategory = MenuCategory.CHEESESTEAKS

    def to_dict(self) -> dict[str, Any]:
        return {
            'id': self.id,
            'name': self.name,
            'description': self.description,
            'price': float(self.price),
            'category': self.category.value,
        }


@attrs.define
class CartItem:
    menu_item: MenuItem
    quantity: int = 1

    @property
    def subtotal(self) -> Decimal:
        return self.menu_item.price * self.quantity

    def to_dict(self) -> dict[str, Any]:
        return {
            'menu_item': self.menu_item.to_dict(),
            'quantity': self.quantity,
            'subtotal': float(self.subtotal),
        }
