"""Booking Domain Enums"""

from src.service.booking.domain.enum.cabin_class import CabinClass
from src.service.booking.domain.enum.seat_type import SeatType
from src.service.booking.domain.enum.tool_name import ToolName

__all__ = ['CabinClass', 'SeatType', 'ToolName']
