"""Ordering Domain Enums"""

from src.service.ordering.domain.enum.menu_category import MenuCategory

__all__ = ['MenuCategory']
