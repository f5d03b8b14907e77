from typing import Any, Optional

import attrs

from src.service.booking.domain.entity.flight_entity import Flight, FlightClass
from src.service.booking.domain.value_object.seat import SelectedSeat


@attrs.define
class BookingItem:
    """One reserved flight class in the in-progress booking, keyed by class id"""

    flight: Flight
    flight_class: FlightClass
    passengers: int = 1
    added_by_agent: bool = False
    seat: Optional[SelectedSeat] = None

    @property
    def class_id(self) -> str:
        return self.flight_class.id

    @property
    def subtotal(self) -> int:
        return self.flight_class.price * self.passengers

    def to_dict(self) -> dict[str, Any]:
        return {
            'flight_id': self.flight.id,
            'route': self.flight.route,
            'departure': self.flight.departure,
            'arrival': self.flight.arrival,
            'class': self.flight_class.name.value,
            'class_id': self.class_id,
            'price_per_passenger': self.flight_class.price,
            'passengers': self.passengers,
            'subtotal': self.subtotal,
            'added_by_agent': self.added_by_agent,
            'seat': self.seat.to_dict() if self.seat else None,
        }


@attrs.frozen
class CheckoutPrefill:
    """
    Checkout form values handed to the presentation layer.

    Holds personal data, so it stays in the store for rendering and is
    never passed to analytics.
    """

    name: Optional[str] = None
    email: Optional[str] = None
    card: Optional[str] = None
    expiry: Optional[str] = None
    cvv: Optional[str] = None
    auto_submit: bool = False

    def to_dict(self) -> dict[str, Any]:
        return attrs.asdict(self)
