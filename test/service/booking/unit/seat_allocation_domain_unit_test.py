"""
Unit tests for the seat allocation domain

Occupancy is a pure function of the label, so the expected seats below are
fixed values:
    seat_label_hash('3A')  == 5859351    -> 51, free in Business (38) and First (15)
    seat_label_hash('20A') == 193360230  -> 30, occupied in Economy (rate 58)
    First 1A / 1B hash to 13 / 14        -> occupied (rate 15)
    Business row 1 is full; 2A (82) and 2B (81) are free
"""

import pytest

from src.service.booking.domain.enum.cabin_class import CabinClass
from src.service.booking.domain.enum.seat_type import SeatType
from src.service.booking.domain.seat_allocation_domain import (
    SEAT_LAYOUTS,
    SeatAllocationDomain,
    build_seat_layout,
    find_best_seat,
    find_seat_by_label,
    is_seat_occupied,
    seat_label_hash,
)


pytestmark = pytest.mark.unit


class TestSeatLabelHash:
    def test_known_values(self):
        assert seat_label_hash('3A') == 5859351
        assert seat_label_hash('20A') == 193360230

    def test_occupancy_threshold(self):
        # 5859351 % 100 == 51
        assert is_seat_occupied('3A', 52) is True
        assert is_seat_occupied('3A', 51) is False
        assert is_seat_occupied('20A', 58) is True

    def test_result_stays_in_signed_32_bit_range(self):
        for label in ('28F', '99Z', 'XXXXXXXXXXXXXXXXXXXX'):
            h = seat_label_hash(label)
            assert -(2**31) <= h < 2**31

    def test_occupancy_is_deterministic(self):
        first = [[seat.occupied for seat in row] for row in build_seat_layout(CabinClass.ECONOMY)]
        second = [[seat.occupied for seat in row] for row in build_seat_layout(CabinClass.ECONOMY)]
        assert first == second


class TestBuildSeatLayout:
    @pytest.mark.parametrize(
        'cabin_class,rows,columns',
        [
            (CabinClass.ECONOMY, 9, 6),
            (CabinClass.BUSINESS, 7, 4),
            (CabinClass.FIRST, 3, 2),
        ],
    )
    def test_grid_dimensions(self, cabin_class, rows, columns):
        grid = build_seat_layout(cabin_class)

        assert len(grid) == rows
        assert all(len(row) == columns for row in grid)

    def test_economy_labels_and_types(self):
        grid = build_seat_layout(CabinClass.ECONOMY)

        assert grid[0][0].label == '20A'
        assert grid[-1][-1].label == '28F'
        assert [seat.type for seat in grid[0]] == [
            SeatType.WINDOW,
            SeatType.MIDDLE,
            SeatType.AISLE,
            SeatType.AISLE,
            SeatType.MIDDLE,
            SeatType.WINDOW,
        ]
        assert grid[0][0].occupied is True  # 20A

    def test_aisle_split(self):
        layout = SEAT_LAYOUTS[CabinClass.BUSINESS]

        assert layout.left_columns == ('A', 'B')
        assert layout.right_columns == ('C', 'D')


class TestFindSeat:
    def test_find_by_label_is_case_insensitive(self):
        grid = build_seat_layout(CabinClass.BUSINESS)

        seat = find_seat_by_label(grid, ' 3a ')

        assert seat is not None
        assert seat.label == '3A'
        assert seat.type == SeatType.WINDOW

    def test_find_by_label_returns_none_for_occupied_seat(self):
        grid = build_seat_layout(CabinClass.FIRST)

        assert find_seat_by_label(grid, '1A') is None

    def test_find_by_label_returns_none_for_unknown_seat(self):
        grid = build_seat_layout(CabinClass.ECONOMY)

        assert find_seat_by_label(grid, '3A') is None

    def test_best_seat_prefers_type(self):
        grid = build_seat_layout(CabinClass.BUSINESS)

        assert find_best_seat(grid, SeatType.WINDOW).label == '2A'
        assert find_best_seat(grid, SeatType.AISLE).label == '2B'

    def test_best_seat_falls_back_to_first_free_seat(self):
        # Business has no middle seats
        grid = build_seat_layout(CabinClass.BUSINESS)

        assert find_best_seat(grid, SeatType.MIDDLE).label == '2A'

    def test_best_seat_none_when_cabin_full(self):
        grid = [[seat for seat in row if seat.occupied] for row in build_seat_layout(CabinClass.FIRST)]

        assert find_best_seat(grid, SeatType.WINDOW) is None

    def test_best_seat_is_never_occupied(self):
        for cabin_class in CabinClass:
            for seat_type in SeatType:
                seat = find_best_seat(build_seat_layout(cabin_class), seat_type)
                assert seat is not None
                assert seat.occupied is False


class TestSeatAllocationDomain:
    def setup_method(self):
        self.domain = SeatAllocationDomain()

    def test_label_takes_precedence_over_preference(self):
        result = self.domain.allocate(
            cabin_class=CabinClass.BUSINESS, label='3A', preference=SeatType.AISLE
        )

        assert result.success is True
        assert result.seat.label == '3A'

    def test_occupied_label_fails_with_message(self):
        result = self.domain.allocate(cabin_class=CabinClass.FIRST, label='1A')

        assert result.success is False
        assert result.error_message == 'Seat "1A" not found or is occupied'

    def test_defaults_to_window(self):
        result = self.domain.allocate(cabin_class=CabinClass.FIRST)

        assert result.success is True
        assert result.seat.label == '2A'
        assert result.seat.type == SeatType.WINDOW
