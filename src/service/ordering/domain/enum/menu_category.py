"""Menu Category Enum"""

from enum import StrEnum


class MenuCategory(StrEnum):
    CHEESESTEAKS = 'cheesesteaks'
    SIDES = 'sides'
    DRINKS = 'drinks'

    @property
    def label(self) -> str:
        return self.value.capitalize()
