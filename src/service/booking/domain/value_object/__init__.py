"""Booking Value Objects"""

from src.service.booking.domain.value_object.seat import SeatInfo, SelectedSeat

__all__ = ['SeatInfo', 'SelectedSeat']
