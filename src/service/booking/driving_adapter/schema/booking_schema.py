from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class SelectedSeatResponse(BaseModel):
    label: str
    row: int
    column: str
    type: str


class BookingItemResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    flight_id: str
    route: str
    departure: str
    arrival: str
    class_name: str = Field(alias='class')
    class_id: str
    price_per_passenger: int
    passengers: int
    subtotal: int
    added_by_agent: bool
    seat: Optional[SelectedSeatResponse] = None


class CheckoutPrefillResponse(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    card: Optional[str] = None
    expiry: Optional[str] = None
    cvv: Optional[str] = None
    auto_submit: bool = False


class AgentActivityResponse(BaseModel):
    id: str
    tool: str
    message: str
    detail: Optional[str] = None
    timestamp: datetime


class BookingSnapshotResponse(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'items': [
                    {
                        'flight_id': 'AA101',
                        'route': 'JFK → LAX',
                        'departure': '08:00',
                        'arrival': '11:30',
                        'class': 'Economy',
                        'class_id': 'AA101-ECO',
                        'price_per_passenger': 299,
                        'passengers': 1,
                        'subtotal': 299,
                        'added_by_agent': True,
                        'seat': None,
                    }
                ],
                'total': 299,
                'count': 1,
                'has_searched': True,
                'seat_map_class_id': None,
                'checkout_open': False,
                'checkout_prefill': None,
                'consent_state': 'pending',
                'activities': [],
            }
        }
    )

    items: List[BookingItemResponse]
    total: int
    count: int
    has_searched: bool
    seat_map_class_id: Optional[str] = None
    checkout_open: bool
    checkout_prefill: Optional[CheckoutPrefillResponse] = None
    consent_state: str
    activities: List[AgentActivityResponse]


class SeatInfoResponse(SelectedSeatResponse):
    occupied: bool


class SeatMapResponse(BaseModel):
    class_id: str
    flight_id: str
    cabin_class: str
    left_columns: List[str]
    right_columns: List[str]
    rows: List[List[SeatInfoResponse]]
    available_seats: int
    selected_seat: Optional[str] = None
