"""Tool Name Enum - names agents discover and invoke"""

from enum import StrEnum


class ToolName(StrEnum):
    SEARCH_FLIGHTS = 'search_flights'
    ADD_TO_BOOKING = 'add_to_booking'
    GET_BOOKING = 'get_booking'
    SELECT_SEAT = 'select_seat'
    CHECKOUT = 'checkout'
    GET_CONSENT = 'get_consent'
    ASK_CONSENT = 'ask_consent'
