"""
Unit tests for BookingStore

Test Coverage:
1. Item rules (silent no-op on unknown ids, one item per class, seat overwrite)
2. Totals and counts
3. Search matching
4. Activity feed (ordering, cap, expiry and dismissal)
5. Change notification
"""

import pytest

from src.service.booking.domain.enum.seat_type import SeatType
from src.service.booking.domain.enum.tool_name import ToolName
from src.service.booking.domain.value_object.seat import SelectedSeat
from src.service.shared_kernel.domain.enum.consent_state import ConsentState


pytestmark = pytest.mark.unit


WINDOW_3A = SelectedSeat(label='3A', row=3, column='A', type=SeatType.WINDOW)
AISLE_2B = SelectedSeat(label='2B', row=2, column='B', type=SeatType.AISLE)


class TestBookingItems:
    def test_add_item(self, booking_store):
        booking_store.add_item('AA101', 'AA101-ECO', 2, by_agent=True)

        item = booking_store.get_item('AA101-ECO')
        assert item is not None
        assert item.passengers == 2
        assert item.added_by_agent is True
        assert item.seat is None

    def test_unknown_ids_are_ignored(self, booking_store):
        booking_store.add_item('ZZ999', 'AA101-ECO')
        booking_store.add_item('AA101', 'AA205-ECO')  # class of another flight

        assert booking_store.items == ()

    def test_repeated_add_without_seat_keeps_one_item_and_passenger_count(self, booking_store):
        # Given
        booking_store.add_item('AA101', 'AA101-ECO', 1)

        # When
        booking_store.add_item('AA101', 'AA101-ECO', 2)

        # Then
        assert len(booking_store.items) == 1
        assert booking_store.get_item('AA101-ECO').passengers == 1

    def test_repeated_add_with_seat_overwrites_seat(self, booking_store):
        booking_store.add_item('AA101', 'AA101-BIZ', seat=WINDOW_3A)

        booking_store.add_item('AA101', 'AA101-BIZ', seat=AISLE_2B)

        assert len(booking_store.items) == 1
        assert booking_store.get_item('AA101-BIZ').seat == AISLE_2B

    def test_select_seat_on_missing_item_is_noop(self, booking_store):
        booking_store.select_seat('AA101-BIZ', WINDOW_3A)

        assert booking_store.items == ()

    def test_remove_and_clear(self, booking_store):
        booking_store.add_item('AA101', 'AA101-ECO')
        booking_store.add_item('AA205', 'AA205-BIZ')

        booking_store.remove_item('AA101-ECO')
        assert [item.class_id for item in booking_store.items] == ['AA205-BIZ']

        booking_store.clear()
        assert booking_store.items == ()

    def test_total_is_sum_of_price_times_passengers(self, booking_store):
        booking_store.add_item('AA101', 'AA101-ECO', 2)  # 299
        booking_store.add_item('AA101', 'AA101-FIRST', 1)  # 1499
        booking_store.add_item('AA205', 'AA205-BIZ', 3)  # 699

        assert booking_store.total() == 299 * 2 + 1499 + 699 * 3
        assert booking_store.total() == sum(
            item.flight_class.price * item.passengers for item in booking_store.items
        )
        assert booking_store.count() == 3

        booking_store.remove_item('AA101-FIRST')
        assert booking_store.total() == 299 * 2 + 699 * 3

    def test_snapshot_items_are_copies(self, booking_store):
        booking_store.add_item('AA101', 'AA101-BIZ')
        snapshot = booking_store.snapshot()

        booking_store.select_seat('AA101-BIZ', WINDOW_3A)

        assert snapshot.items[0].seat is None
        assert booking_store.get_item('AA101-BIZ').seat == WINDOW_3A


class TestSearch:
    @pytest.mark.parametrize(
        'origin,destination,expected',
        [
            (None, None, ['AA101', 'AA205']),
            ('', '', ['AA101', 'AA205']),
            ('jfk', None, ['AA101', 'AA205']),
            ('new york', 'los', ['AA101', 'AA205']),
            (None, 'lax', ['AA101', 'AA205']),
            ('LAX', None, []),
            ('JFK', 'SFO', []),
        ],
    )
    def test_search(self, booking_store, origin, destination, expected):
        results = booking_store.search(origin, destination)

        assert [flight.id for flight in results] == expected


class TestActivityFeed:
    def test_newest_first_with_sequential_ids(self, booking_store):
        booking_store.add_activity(tool=ToolName.SEARCH_FLIGHTS, message='first')
        booking_store.add_activity(tool=ToolName.GET_BOOKING, message='second')

        assert [a.id for a in booking_store.activities] == ['act-2', 'act-1']

    def test_feed_is_capped_and_evicted_timers_cancelled(self, booking_store, expiry_scheduler):
        for i in range(12):
            booking_store.add_activity(tool=ToolName.GET_BOOKING, message=f'call {i}')

        ids = [a.id for a in booking_store.activities]
        assert len(ids) == 10
        assert ids[0] == 'act-12'
        assert 'act-1' not in ids and 'act-2' not in ids
        assert expiry_scheduler.pending_keys() == set(ids)

    def test_each_activity_schedules_expiry(self, booking_store, expiry_scheduler):
        activity = booking_store.add_activity(tool=ToolName.CHECKOUT, message='checkout')

        delay, _ = expiry_scheduler.timers[activity.id]
        assert delay == 6.0

    def test_expiry_removes_activity(self, booking_store, expiry_scheduler):
        activity = booking_store.add_activity(tool=ToolName.CHECKOUT, message='checkout')

        expiry_scheduler.fire(activity.id)

        assert booking_store.activities == ()

    def test_dismiss_cancels_pending_expiry(self, booking_store, expiry_scheduler):
        activity = booking_store.add_activity(tool=ToolName.CHECKOUT, message='checkout')

        booking_store.dismiss_activity(activity.id)

        assert booking_store.activities == ()
        assert activity.id not in expiry_scheduler.pending_keys()

    def test_dismiss_unknown_id_is_noop(self, booking_store):
        booking_store.add_activity(tool=ToolName.CHECKOUT, message='checkout')

        booking_store.dismiss_activity('act-404')

        assert len(booking_store.activities) == 1


class TestChangeNotification:
    def test_listener_receives_snapshots_for_effective_changes(self, booking_store):
        snapshots = []
        booking_store.subscribe(snapshots.append)

        booking_store.add_item('AA101', 'AA101-ECO')
        booking_store.add_item('AA101', 'AA101-ECO')  # no-op
        booking_store.set_has_searched(True)
        booking_store.set_has_searched(True)  # no-op
        booking_store.set_consent_state(ConsentState.GRANTED)

        assert len(snapshots) == 3
        assert snapshots[0].count == 1
        assert snapshots[-1].has_searched is True
        assert snapshots[-1].consent_state is ConsentState.GRANTED

    def test_unsubscribe(self, booking_store):
        snapshots = []
        unsubscribe = booking_store.subscribe(snapshots.append)

        unsubscribe()
        booking_store.add_item('AA101', 'AA101-ECO')

        assert snapshots == []

    def test_failing_listener_does_not_block_others(self, booking_store):
        received = []

        def broken(_snapshot):
            raise RuntimeError('boom')

        booking_store.subscribe(broken)
        booking_store.subscribe(received.append)

        booking_store.add_item('AA101', 'AA101-ECO')

        assert len(received) == 1
        assert booking_store.count() == 1

    def test_snapshot_to_dict(self, booking_store):
        booking_store.add_item('AA101', 'AA101-ECO', 2, by_agent=True)

        data = booking_store.snapshot().to_dict()

        assert data['total'] == 598
        assert data['count'] == 1
        assert data['consent_state'] == 'pending'
        assert data['items'][0]['route'] == 'JFK → LAX'
        assert data['items'][0]['class'] == 'Economy'
