"""
Agent Tool Parameter Schemas

One pydantic model per tool. ``model_validate`` is the validation step of
dispatch and ``model_json_schema`` is the input schema agents discover.
"""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from src.service.booking.domain.enum.seat_type import SeatType


class SearchFlightsParams(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    origin: Optional[str] = Field(
        default=None,
        alias='from',
        description="Departure airport code or city (e.g. 'JFK' or 'New York')",
    )
    destination: Optional[str] = Field(
        default=None,
        alias='to',
        description="Arrival airport code or city (e.g. 'LAX' or 'Los Angeles')",
    )


class AddToBookingParams(BaseModel):
    flight_id: str = Field(description="Flight ID (e.g. 'AA101')")
    class_id: str = Field(description="Class ID (e.g. 'AA101-ECO', 'AA101-BIZ', 'AA101-FIRST')")
    passengers: int = Field(default=1, ge=1, description='Number of passengers (default 1)')


class GetBookingParams(BaseModel):
    pass


class SelectSeatParams(BaseModel):
    class_id: str = Field(
        description=(
            "Class ID to select a seat for (e.g. 'AA101-BIZ'). The flight is added to the "
            'booking automatically if it is not already in it.'
        )
    )
    seat: Optional[str] = Field(
        default=None,
        description=(
            "Specific seat label (e.g. '3A', '22F'). If omitted, the best seat matching the "
            'preference is chosen.'
        ),
    )
    preference: Optional[SeatType] = Field(
        default=None,
        description='Seat type preference. Used when no specific seat label is given.',
    )


class CheckoutParams(BaseModel):
    passenger_name: Optional[str] = Field(default=None, description='Passenger full name')
    email: Optional[str] = Field(default=None, description='Passenger contact email')
    card_number: Optional[str] = Field(
        default=None,
        description="Card number (digits only, e.g. '4111111111111111'). Use dummy values for demos.",
    )
    expiry: Optional[str] = Field(default=None, description="Card expiry in MM/YY (e.g. '12/28')")
    cvv: Optional[str] = Field(default=None, description="Card CVV (3-4 digits, e.g. '123')")

    def provided_fields(self) -> list[str]:
        return [
            value
            for value in (self.passenger_name, self.email, self.card_number, self.expiry, self.cvv)
            if value
        ]


class GetConsentParams(BaseModel):
    pass


class AskConsentParams(BaseModel):
    decision: Literal['granted', 'denied'] = Field(
        description="The user's answer to the analytics consent question"
    )
