"""AgentAir flight catalog"""

from src.service.booking.domain.entity.flight_entity import Flight, FlightClass
from src.service.booking.domain.enum.cabin_class import CabinClass


_ECONOMY_FEATURES = ('Standard seat', '1 carry-on bag', 'In-flight Wi-Fi', 'Snacks & beverages')
_BUSINESS_FEATURES = (
    'Lie-flat seat',
    'Priority boarding',
    'Lounge access',
    'Gourmet multi-course meal',
)
_FIRST_FEATURES = (
    'Private suite',
    'Dedicated concierge',
    'Champagne & fine dining',
    'Limo transfer',
)


FLIGHTS: tuple[Flight, ...] = (
    Flight(
        id='AA101',
        origin='New York',
        origin_code='JFK',
        destination='Los Angeles',
        destination_code='LAX',
        date='2026-03-15',
        departure='08:00',
        arrival='11:30',
        duration='5h 30m',
        aircraft='Air Agentic A380',
        classes=(
            FlightClass(
                id='AA101-ECO',
                name=CabinClass.ECONOMY,
                price=299,
                features=_ECONOMY_FEATURES,
                baggage='23 kg checked bag (+$35)',
                seats_left=42,
                refundable=False,
            ),
            FlightClass(
                id='AA101-BIZ',
                name=CabinClass.BUSINESS,
                price=799,
                features=_BUSINESS_FEATURES,
                baggage='2 × 32 kg included',
                seats_left=8,
                refundable=True,
            ),
            FlightClass(
                id='AA101-FIRST',
                name=CabinClass.FIRST,
                price=1499,
                features=_FIRST_FEATURES,
                baggage='Unlimited',
                seats_left=3,
                refundable=True,
            ),
        ),
    ),
    Flight(
        id='AA205',
        origin='New York',
        origin_code='JFK',
        destination='Los Angeles',
        destination_code='LAX',
        date='2026-03-15',
        departure='14:15',
        arrival='17:45',
        duration='5h 30m',
        aircraft='Air Agentic B787',
        classes=(
            FlightClass(
                id='AA205-ECO',
                name=CabinClass.ECONOMY,
                price=259,
                features=_ECONOMY_FEATURES,
                baggage='23 kg checked bag (+$35)',
                seats_left=61,
                refundable=False,
            ),
            FlightClass(
                id='AA205-BIZ',
                name=CabinClass.BUSINESS,
                price=699,
                features=_BUSINESS_FEATURES,
                baggage='2 × 32 kg included',
                seats_left=12,
                refundable=True,
            ),
        ),
    ),
)
