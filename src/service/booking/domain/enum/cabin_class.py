"""Cabin Class Enum"""

from enum import StrEnum


class CabinClass(StrEnum):
    ECONOMY = 'Economy'
    BUSINESS = 'Business'
    FIRST = 'First'
