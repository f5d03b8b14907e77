"""Booking Domain Entities"""

from src.service.booking.domain.entity.agent_activity_entity import AgentActivity
from src.service.booking.domain.entity.booking_item_entity import BookingItem, CheckoutPrefill
from src.service.booking.domain.entity.flight_entity import Flight, FlightClass

__all__ = ['AgentActivity', 'BookingItem', 'CheckoutPrefill', 'Flight', 'FlightClass']
