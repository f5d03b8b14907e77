"""Seat Type Enum"""

from enum import StrEnum


class SeatType(StrEnum):
    WINDOW = 'window'
    AISLE = 'aisle'
    MIDDLE = 'middle'
