"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.analytics.app.command import decide_consent_use_case
from src.service.analytics.app.query import get_consent_status_use_case
from src.service.booking.app.command import (
    clear_booking_use_case,
    dismiss_activity_use_case,
    remove_booking_item_use_case,
)
from src.service.booking.app.query import (
    get_booking_snapshot_use_case,
    get_seat_map_use_case,
    stream_booking_use_case,
)
from src.service.booking.driving_adapter.http_controller import tool_controller
from src.service.ordering.app.command import update_cart_use_case
from src.service.ordering.app.query import get_cart_use_case


WIRE_MODULES: list[ModuleType] = [
    get_booking_snapshot_use_case,
    get_seat_map_use_case,
    stream_booking_use_case,
    remove_booking_item_use_case,
    clear_booking_use_case,
    dismiss_activity_use_case,
    get_consent_status_use_case,
    decide_consent_use_case,
    get_cart_use_case,
    update_cart_use_case,
    tool_controller,
]
