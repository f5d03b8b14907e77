"""Flight catalog entities (immutable reference data)"""

from typing import Any

import attrs

from src.service.booking.domain.enum.cabin_class import CabinClass


@attrs.frozen
class FlightClass:
    id: str
    name: CabinClass
    price: int
    features: tuple[str, ...] = ()
    baggage: str = ''
    seats_left: int = 0
    refundable: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            'id': self.id,
            'name': self.name.value,
            'price': self.price,
            'features': list(self.features),
            'baggage': self.baggage,
            'seats_left': self.seats_left,
            'refundable': self.refundable,
        }


@attrs.frozen
class Flight:
    id: str
    origin: str
    origin_code: str
    destination: str
    destination_code: str
    date: str
    departure: str
    arrival: str
    duration: str
    aircraft: str
    classes: tuple[FlightClass, ...]

    @property
    def route(self) -> str:
        return f'{self.origin_code} → {self.destination_code}'

    def find_class(self, class_id: str) -> FlightClass | None:
        return next((c for c in self.classes if c.id == class_id), None)

    def matches(self, *, origin: str | None = None, destination: str | None = None) -> bool:
        """Case-insensitive substring match on code or city, each side checked independently."""
        return _side_matches(origin, self.origin_code, self.origin) and _side_matches(
            destination, self.destination_code, self.destination
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            'id': self.id,
            'from': self.origin,
            'from_code': self.origin_code,
            'to': self.destination,
            'to_code': self.destination_code,
            'date': self.date,
            'departure': self.departure,
            'arrival': self.arrival,
            'duration': self.duration,
            'aircraft': self.aircraft,
            'classes': [c.to_dict() for c in self.classes],
        }


def _side_matches(query: str | None, code: str, name: str) -> bool:
    if not query:
        return True
    needle = query.lower()
    return needle in code.lower() or needle in name.lower()
