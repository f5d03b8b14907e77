"""
Booking Tools

Handlers behind search_flights, add_to_booking, get_booking, select_seat and
checkout. Each handler resolves and checks everything first and raises a
platform exception before touching the store, so a failed call leaves the
booking exactly as it was.
"""

import re
from typing import Any, Optional

from src.platform.exception.exceptions import ConflictError, DomainError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.analytics.app.analytics_emitter import AnalyticsEmitter
from src.service.booking.domain.aggregate.booking_store import BookingStore
from src.service.booking.domain.entity.booking_item_entity import CheckoutPrefill
from src.service.booking.domain.enum.tool_name import ToolName
from src.service.booking.domain.seat_allocation_domain import SeatAllocationDomain
from src.service.booking.driving_adapter.agent_tool.tool_registry import ToolDefinition
from src.service.booking.driving_adapter.agent_tool.tool_schema import (
    AddToBookingParams,
    CheckoutParams,
    GetBookingParams,
    SearchFlightsParams,
    SelectSeatParams,
)
from src.service.shared_kernel.domain.enum.interaction_source import InteractionSource


AGENT_TOOL_USED = 'agent_tool_used'


def format_card_number(card_number: Optional[str]) -> Optional[str]:
    """'4111111111111111' -> '4111 1111 1111 1111'"""
    if not card_number:
        return None
    digits = re.sub(r'\D', '', card_number)
    if not digits:
        return None
    return ' '.join(digits[i : i + 4] for i in range(0, len(digits), 4))


def _plural(count: int, noun: str) -> str:
    return f'{count} {noun}{"" if count == 1 else "s"}'


class BookingTools:
    def __init__(
        self,
        *,
        store: BookingStore,
        seat_allocation: SeatAllocationDomain,
        emitter: AnalyticsEmitter,
        currency: str = 'USD',
        item_brand: str = 'Air Agentic',
    ) -> None:
        self.store = store
        self.seat_allocation = seat_allocation
        self.emitter = emitter
        self.currency = currency
        self.item_brand = item_brand

    def definitions(self) -> list[ToolDefinition]:
        return [
            ToolDefinition(
                name=ToolName.SEARCH_FLIGHTS,
                description=(
                    'Search for available AgentAir flights. Optionally filter by departure (from) '
                    'and arrival (to) airport code or city. Returns matching flights with their '
                    'booking classes and prices.'
                ),
                params_model=SearchFlightsParams,
                handler=self.search_flights,
            ),
            ToolDefinition(
                name=ToolName.ADD_TO_BOOKING,
                description=(
                    'Add a flight class to the current booking by flight ID and class ID. Use '
                    'search_flights first to discover available flight and class IDs.'
                ),
                params_model=AddToBookingParams,
                handler=self.add_to_booking,
            ),
            ToolDefinition(
                name=ToolName.GET_BOOKING,
                description=(
                    'Get the current booking summary including all selected flights, classes, '
                    'seats and the total price.'
                ),
                params_model=GetBookingParams,
                handler=self.get_booking,
            ),
            ToolDefinition(
                name=ToolName.SELECT_SEAT,
                description=(
                    "Select a seat for a flight class. Provide a seat label (e.g. '3A') or a "
                    "preference ('window', 'aisle', 'middle') and the best available seat is "
                    'picked. The class is added to the booking first if it is not in it yet.'
                ),
                params_model=SelectSeatParams,
                handler=self.select_seat,
            ),
            ToolDefinition(
                name=ToolName.CHECKOUT,
                description=(
                    'Open the checkout form, pre-filled with any of passenger_name, email, '
                    'card_number, expiry and cvv. When all five are given the form is submitted '
                    "automatically. Use dummy card values for demos (e.g. '4111111111111111', "
                    "'12/28', '123')."
                ),
                params_model=CheckoutParams,
                handler=self.checkout,
            ),
        ]

    # ---------- handlers ----------

    @Logger.io
    def search_flights(
        self, params: SearchFlightsParams, *, source: InteractionSource
    ) -> list[dict[str, Any]]:
        results = self.store.search(params.origin, params.destination)
        self.store.set_has_searched(True)

        self._record_activity(
            source,
            tool=ToolName.SEARCH_FLIGHTS,
            message='Agent searched for flights',
            detail=(
                f'{(params.origin or "Any").upper()} → {(params.destination or "Any").upper()}'
                f' · {_plural(len(results), "flight")} found'
            ),
        )

        payload: dict[str, Any] = {'tool_name': ToolName.SEARCH_FLIGHTS.value}
        if params.origin is not None:
            payload['from'] = params.origin
        if params.destination is not None:
            payload['to'] = params.destination
        payload['results_count'] = len(results)
        self.emitter.emit(AGENT_TOOL_USED, payload, source=source)

        return [flight.to_dict() for flight in results]

    @Logger.io
    def add_to_booking(
        self, params: AddToBookingParams, *, source: InteractionSource
    ) -> dict[str, Any]:
        flight = self.store.find_flight(params.flight_id)
        if flight is None:
            raise NotFoundError(f'Flight "{params.flight_id}" not found')
        flight_class = flight.find_class(params.class_id)
        if flight_class is None:
            raise NotFoundError(
                f'Class "{params.class_id}" not found on flight "{params.flight_id}"',
                detail={'available_classes': [c.id for c in flight.classes]},
            )

        already_booked = self.store.get_item(params.class_id) is not None
        self.store.set_has_searched(True)
        self.store.add_item(
            flight.id,
            flight_class.id,
            params.passengers,
            by_agent=source is InteractionSource.AGENT,
        )
        item = self.store.get_item(flight_class.id)
        passengers = item.passengers if item else params.passengers

        self._record_activity(
            source,
            tool=ToolName.ADD_TO_BOOKING,
            message=(
                'Agent found flight already in booking'
                if already_booked
                else 'Agent added flight to booking'
            ),
            detail=(
                f'{flight.route} · {flight_class.name} · ${flight_class.price:,}'
                f' · {passengers} pax'
            ),
        )

        if already_booked:
            self.emitter.emit(
                AGENT_TOOL_USED,
                {
                    'tool_name': ToolName.ADD_TO_BOOKING.value,
                    'class_id': flight_class.id,
                    'already_in_booking': True,
                },
                source=source,
            )
        else:
            self.emitter.emit_commerce(
                'add_to_cart',
                {
                    'currency': self.currency,
                    'value': flight_class.price * passengers,
                    'items': [
                        {
                            'item_id': flight_class.id,
                            'item_name': f'{flight.route} · {flight_class.name}',
                            'item_brand': self.item_brand,
                            'item_category': flight_class.name.value,
                            'price': flight_class.price,
                            'quantity': passengers,
                        }
                    ],
                },
                source=source,
            )

        return {
            'success': True,
            'already_in_booking': already_booked,
            'added': {
                'flight': flight.route,
                'class': flight_class.name.value,
                'class_id': flight_class.id,
                'price': flight_class.price,
                'passengers': passengers,
                'total': flight_class.price * passengers,
            },
        }

    @Logger.io
    def get_booking(self, params: GetBookingParams, *, source: InteractionSource) -> dict[str, Any]:
        count = self.store.count()
        total = self.store.total()

        self._record_activity(
            source,
            tool=ToolName.GET_BOOKING,
            message='Agent reviewed booking',
            detail='Booking is empty' if count == 0 else f'{_plural(count, "item")} · Total ${total:,}',
        )
        self.emitter.emit(
            AGENT_TOOL_USED,
            {'tool_name': ToolName.GET_BOOKING.value, 'booking_value': total, 'item_count': count},
            source=source,
        )

        return {'items': [item.to_dict() for item in self.store.items], 'total': total}

    @Logger.io
    def select_seat(self, params: SelectSeatParams, *, source: InteractionSource) -> dict[str, Any]:
        flight = self.store.find_flight_by_class(params.class_id)
        flight_class = flight.find_class(params.class_id) if flight else None
        if flight is None or flight_class is None:
            raise NotFoundError(f'Class "{params.class_id}" not found')

        result = self.seat_allocation.allocate(
            cabin_class=flight_class.name, label=params.seat, preference=params.preference
        )
        if not result.success or result.seat is None:
            raise DomainError(
                result.error_message or 'Seat selection failed',
                detail={'class_id': flight_class.id},
            )
        seat = result.seat.to_selected()

        existing = self.store.get_item(flight_class.id)
        unchanged = existing is not None and existing.seat == seat

        self.store.set_has_searched(True)
        if existing is None:
            self.store.add_item(
                flight.id,
                flight_class.id,
                1,
                by_agent=source is InteractionSource.AGENT,
                seat=seat,
            )
        else:
            self.store.select_seat(flight_class.id, seat)
        self.store.open_seat_map(flight_class.id)

        self._record_activity(
            source,
            tool=ToolName.SELECT_SEAT,
            message='Agent kept the selected seat' if unchanged else 'Agent selected a seat',
            detail=f'Seat {seat.label} · {seat.type} · {flight.route} {flight_class.name}',
        )
        self.emitter.emit(
            'seat_selected',
            {
                'seat_label': seat.label,
                'seat_type': seat.type.value,
                'class_id': flight_class.id,
                'flight_id': flight.id,
                'preference': params.preference.value if params.preference else None,
            },
            source=source,
        )

        return {
            'success': True,
            'unchanged': unchanged,
            'seat': {
                **seat.to_dict(),
                'flight': flight.route,
                'class': flight_class.name.value,
            },
        }

    @Logger.io
    def checkout(self, params: CheckoutParams, *, source: InteractionSource) -> dict[str, Any]:
        if self.store.count() == 0:
            raise ConflictError('No flights in booking. Add a flight first.')

        fields_provided = len(params.provided_fields())
        auto_submit = fields_provided == 5
        total = self.store.total()

        self.store.set_checkout_prefill(
            CheckoutPrefill(
                name=params.passenger_name,
                email=params.email,
                card=format_card_number(params.card_number),
                expiry=params.expiry,
                cvv=params.cvv,
                auto_submit=auto_submit,
            )
        )
        self.store.set_checkout_open(True)

        self._record_activity(
            source,
            tool=ToolName.CHECKOUT,
            message='Agent is completing payment' if auto_submit else 'Agent opened checkout',
            detail=(
                f'${total:,} · submitting…'
                if auto_submit
                else f'Pre-filled {_plural(fields_provided, "field")}'
            ),
        )
        # Only counts leave the core, never the field values
        self.emitter.emit(
            AGENT_TOOL_USED,
            {
                'tool_name': ToolName.CHECKOUT.value,
                'fields_provided': fields_provided,
                'booking_value': total,
            },
            source=source,
        )

        return {
            'success': True,
            'auto_submit': auto_submit,
            'message': (
                'All fields pre-filled in the checkout form. The user just needs to confirm payment.'
                if auto_submit
                else 'Checkout form opened with the available fields pre-filled. The user will complete the rest.'
            ),
            'booking_total': total,
        }

    def _record_activity(
        self, source: InteractionSource, *, tool: ToolName, message: str, detail: str
    ) -> None:
        if source is InteractionSource.AGENT:
            self.store.add_activity(tool=tool, message=message, detail=detail)
