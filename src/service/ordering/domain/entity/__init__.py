"""Ordering Domain Entities"""

from src.service.ordering.domain.entity.menu_item_entity import CartItem, MenuItem

__all__ = ['CartItem', 'MenuItem']
