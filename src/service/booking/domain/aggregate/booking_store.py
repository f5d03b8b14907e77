"""
Booking Store

Authoritative state for one booking session: the booking items, the UI
flags the presentation layer renders from, and the agent activity feed.
Agents (through the tool layer) and UI handlers mutate it through the same
methods; every effective change is broadcast to subscribers as an
immutable BookingSnapshot.
"""

from datetime import datetime, timezone
import itertools
from typing import Any, Callable, Optional, Sequence

import attrs

from src.platform.logging.loguru_io import Logger
from src.platform.scheduling.i_expiry_scheduler import IExpiryScheduler
from src.service.booking.domain.entity.agent_activity_entity import AgentActivity
from src.service.booking.domain.entity.booking_item_entity import BookingItem, CheckoutPrefill
from src.service.booking.domain.entity.flight_entity import Flight
from src.service.booking.domain.enum.tool_name import ToolName
from src.service.booking.domain.value_object.seat import SelectedSeat
from src.service.shared_kernel.domain.enum.consent_state import ConsentState


@attrs.frozen
class BookingSnapshot:
    items: tuple[BookingItem, ...]
    total: int
    count: int
    has_searched: bool
    seat_map_class_id: Optional[str]
    checkout_open: bool
    checkout_prefill: Optional[CheckoutPrefill]
    consent_state: ConsentState
    activities: tuple[AgentActivity, ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            'items': [item.to_dict() for item in self.items],
            'total': self.total,
            'count': self.count,
            'has_searched': self.has_searched,
            'seat_map_class_id': self.seat_map_class_id,
            'checkout_open': self.checkout_open,
            'checkout_prefill': self.checkout_prefill.to_dict() if self.checkout_prefill else None,
            'consent_state': self.consent_state.value,
            'activities': [activity.to_dict() for activity in self.activities],
        }


SnapshotListener = Callable[[BookingSnapshot], None]


class BookingStore:
    def __init__(
        self,
        *,
        flights: Sequence[Flight],
        expiry_scheduler: IExpiryScheduler,
        activity_ttl_seconds: float = 6.0,
        activity_limit: int = 10,
    ) -> None:
        self._flights: tuple[Flight, ...] = tuple(flights)
        self._expiry_scheduler = expiry_scheduler
        self._activity_ttl_seconds = activity_ttl_seconds
        self._activity_limit = activity_limit
        self._activity_counter = itertools.count(1)
        self._listeners: list[SnapshotListener] = []

        self._items: list[BookingItem] = []
        self._activities: list[AgentActivity] = []
        self._has_searched = False
        self._seat_map_class_id: Optional[str] = None
        self._checkout_open = False
        self._checkout_prefill: Optional[CheckoutPrefill] = None
        self._consent_state = ConsentState.PENDING

    # ---------- catalog ----------

    @property
    def flights(self) -> tuple[Flight, ...]:
        return self._flights

    def find_flight(self, flight_id: str) -> Optional[Flight]:
        return next((f for f in self._flights if f.id == flight_id), None)

    def find_flight_by_class(self, class_id: str) -> Optional[Flight]:
        return next((f for f in self._flights if f.find_class(class_id)), None)

    @Logger.io
    def search(self, origin: Optional[str] = None, destination: Optional[str] = None) -> list[Flight]:
        return [f for f in self._flights if f.matches(origin=origin, destination=destination)]

    # ---------- booking items ----------

    @property
    def items(self) -> tuple[BookingItem, ...]:
        return tuple(self._items)

    def get_item(self, class_id: str) -> Optional[BookingItem]:
        return next((i for i in self._items if i.class_id == class_id), None)

    @Logger.io
    def add_item(
        self,
        flight_id: str,
        class_id: str,
        passengers: int = 1,
        by_agent: bool = False,
        seat: Optional[SelectedSeat] = None,
    ) -> None:
        """
        Add a flight class to the booking.

        Unknown ids are ignored. A class already in the booking only takes a
        new seat; without a seat the call changes nothing (passengers are not
        bumped).
        """
        flight = self.find_flight(flight_id)
        if flight is None:
            return
        flight_class = flight.find_class(class_id)
        if flight_class is None:
            return

        existing = self.get_item(class_id)
        if existing is not None:
            if seat is None or existing.seat == seat:
                return
            existing.seat = seat
        else:
            self._items.append(
                BookingItem(
                    flight=flight,
                    flight_class=flight_class,
                    passengers=passengers,
                    added_by_agent=by_agent,
                    seat=seat,
                )
            )
        self._notify()

    @Logger.io
    def remove_item(self, class_id: str) -> None:
        remaining = [i for i in self._items if i.class_id != class_id]
        if len(remaining) == len(self._items):
            return
        self._items = remaining
        self._notify()

    @Logger.io
    def select_seat(self, class_id: str, seat: SelectedSeat) -> None:
        item = self.get_item(class_id)
        if item is None or item.seat == seat:
            return
        item.seat = seat
        self._notify()

    @Logger.io
    def clear(self) -> None:
        if not self._items:
            return
        self._items = []
        self._notify()

    def total(self) -> int:
        return sum(item.subtotal for item in self._items)

    def count(self) -> int:
        """Number of booked classes, not passengers"""
        return len(self._items)

    # ---------- UI flags ----------

    @property
    def has_searched(self) -> bool:
        return self._has_searched

    @property
    def seat_map_class_id(self) -> Optional[str]:
        return self._seat_map_class_id

    @property
    def checkout_open(self) -> bool:
        return self._checkout_open

    @property
    def checkout_prefill(self) -> Optional[CheckoutPrefill]:
        return self._checkout_prefill

    @property
    def consent_state(self) -> ConsentState:
        return self._consent_state

    def set_has_searched(self, value: bool) -> None:
        self._set('_has_searched', value)

    def open_seat_map(self, class_id: Optional[str]) -> None:
        self._set('_seat_map_class_id', class_id)

    def set_checkout_open(self, value: bool) -> None:
        self._set('_checkout_open', value)

    def set_checkout_prefill(self, prefill: Optional[CheckoutPrefill]) -> None:
        self._set('_checkout_prefill', prefill)

    def set_consent_state(self, state: ConsentState) -> None:
        self._set('_consent_state', state)

    def _set(self, attr: str, value: Any) -> None:
        if getattr(self, attr) == value:
            return
        setattr(self, attr, value)
        self._notify()

    # ---------- activity feed ----------

    @property
    def activities(self) -> tuple[AgentActivity, ...]:
        return tuple(self._activities)

    @Logger.io
    def add_activity(
        self, *, tool: ToolName, message: str, detail: Optional[str] = None
    ) -> AgentActivity:
        activity = AgentActivity(
            id=f'act-{next(self._activity_counter)}',
            tool=tool,
            message=message,
            detail=detail,
            timestamp=datetime.now(timezone.utc),
        )
        self._activities.insert(0, activity)

        # Records pushed past the cap leave now, their timers with them
        for evicted in self._activities[self._activity_limit :]:
            self._expiry_scheduler.cancel(key=evicted.id)
        del self._activities[self._activity_limit :]

        activity_id = activity.id
        self._expiry_scheduler.schedule(
            key=activity_id,
            delay=self._activity_ttl_seconds,
            callback=lambda: self.dismiss_activity(activity_id),
        )
        self._notify()
        return activity

    @Logger.io
    def dismiss_activity(self, activity_id: str) -> None:
        self._expiry_scheduler.cancel(key=activity_id)
        remaining = [a for a in self._activities if a.id != activity_id]
        if len(remaining) == len(self._activities):
            return
        self._activities = remaining
        self._notify()

    # ---------- change notification ----------

    def snapshot(self) -> BookingSnapshot:
        return BookingSnapshot(
            items=tuple(attrs.evolve(item) for item in self._items),
            total=self.total(),
            count=self.count(),
            has_searched=self._has_searched,
            seat_map_class_id=self._seat_map_class_id,
            checkout_open=self._checkout_open,
            checkout_prefill=self._checkout_prefill,
            consent_state=self._consent_state,
            activities=tuple(self._activities),
        )

    def subscribe(self, listener: SnapshotListener) -> Callable[[], None]:
        """Register a change listener; returns the matching unsubscribe callable"""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        if not self._listeners:
            return
        snapshot = self.snapshot()
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception as e:
                Logger.base.exception(f'📡 [BOOKING_STORE] Listener failed: {e}')
