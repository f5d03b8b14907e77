"""
Seat Allocation Domain

Pure seat-map logic: every cabin class has a fixed layout and occupancy is
derived from the seat label alone, so the same map is rendered on every run
and every platform. No state, no infrastructure.
"""

from typing import Optional

import attrs

from src.platform.logging.loguru_io import Logger
from src.service.booking.domain.enum.cabin_class import CabinClass
from src.service.booking.domain.enum.seat_type import SeatType
from src.service.booking.domain.value_object.seat import SeatInfo


SeatGrid = list[list[SeatInfo]]

_HASH_SEED = 5381


@attrs.frozen
class SeatLayout:
    start_row: int
    end_row: int
    columns: tuple[str, ...]
    column_types: dict[str, SeatType]
    aisle_after: str
    occupancy_rate: int  # 0-100

    @property
    def left_columns(self) -> tuple[str, ...]:
        return self.columns[: self.columns.index(self.aisle_after) + 1]

    @property
    def right_columns(self) -> tuple[str, ...]:
        return self.columns[self.columns.index(self.aisle_after) + 1 :]


SEAT_LAYOUTS: dict[CabinClass, SeatLayout] = {
    CabinClass.ECONOMY: SeatLayout(
        start_row=20,
        end_row=28,
        columns=('A', 'B', 'C', 'D', 'E', 'F'),
        column_types={
            'A': SeatType.WINDOW,
            'B': SeatType.MIDDLE,
            'C': SeatType.AISLE,
            'D': SeatType.AISLE,
            'E': SeatType.MIDDLE,
            'F': SeatType.WINDOW,
        },
        aisle_after='C',
        occupancy_rate=58,
    ),
    CabinClass.BUSINESS: SeatLayout(
        start_row=1,
        end_row=7,
        columns=('A', 'B', 'C', 'D'),
        column_types={
            'A': SeatType.WINDOW,
            'B': SeatType.AISLE,
            'C': SeatType.AISLE,
            'D': SeatType.WINDOW,
        },
        aisle_after='B',
        occupancy_rate=38,
    ),
    CabinClass.FIRST: SeatLayout(
        start_row=1,
        end_row=3,
        columns=('A', 'B'),
        column_types={'A': SeatType.WINDOW, 'B': SeatType.WINDOW},
        aisle_after='A',
        occupancy_rate=15,
    ),
}


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value >= 0x80000000 else value


def seat_label_hash(label: str) -> int:
    """djb2-xor over the label, wrapped to a signed 32-bit integer after every step"""
    h = _HASH_SEED
    for char in label:
        h = _to_int32(_to_int32(_to_int32(h << 5) + h) ^ ord(char))
    return h


def is_seat_occupied(label: str, occupancy_rate: int) -> bool:
    return abs(seat_label_hash(label)) % 100 < occupancy_rate


def get_seat_layout(cabin_class: CabinClass) -> SeatLayout:
    return SEAT_LAYOUTS[cabin_class]


def build_seat_layout(cabin_class: CabinClass) -> SeatGrid:
    """Row-major grid of the cabin with derived occupancy"""
    layout = SEAT_LAYOUTS[cabin_class]
    return [
        [
            SeatInfo(
                label=f'{row}{column}',
                row=row,
                column=column,
                type=layout.column_types[column],
                occupied=is_seat_occupied(f'{row}{column}', layout.occupancy_rate),
            )
            for column in layout.columns
        ]
        for row in range(layout.start_row, layout.end_row + 1)
    ]


def find_best_seat(grid: SeatGrid, preferred_type: SeatType) -> Optional[SeatInfo]:
    """First free seat of the preferred type, else the first free seat, else None (cabin full)"""
    free_seats = [seat for row in grid for seat in row if not seat.occupied]
    preferred = next((seat for seat in free_seats if seat.type == preferred_type), None)
    if preferred:
        return preferred
    return free_seats[0] if free_seats else None


def find_seat_by_label(grid: SeatGrid, label: str) -> Optional[SeatInfo]:
    """Case-insensitive exact match; an occupied seat is never returned"""
    normalized = label.strip().upper()
    for row in grid:
        for seat in row:
            if seat.label.upper() == normalized:
                return None if seat.occupied else seat
    return None


@attrs.frozen
class SeatAllocationResult:
    success: bool
    seat: Optional[SeatInfo] = None
    error_message: Optional[str] = None

    @classmethod
    def success_result(cls, seat: SeatInfo) -> 'SeatAllocationResult':
        return cls(success=True, seat=seat)

    @classmethod
    def failure_result(cls, error: str) -> 'SeatAllocationResult':
        return cls(success=False, error_message=error)


class SeatAllocationDomain:
    """
    Seat allocation service

    An explicit label wins over a preference; with neither, the best window
    seat is picked.
    """

    @Logger.io
    def allocate(
        self,
        *,
        cabin_class: CabinClass,
        label: Optional[str] = None,
        preference: Optional[SeatType] = None,
    ) -> SeatAllocationResult:
        grid = build_seat_layout(cabin_class)

        if label:
            seat = find_seat_by_label(grid, label)
            if seat is None:
                Logger.base.info(f'💺 [SEAT_DOMAIN] {label} not found or occupied in {cabin_class}')
                return SeatAllocationResult.failure_result(
                    f'Seat "{label}" not found or is occupied'
                )
            return SeatAllocationResult.success_result(seat)

        seat = find_best_seat(grid, preference or SeatType.WINDOW)
        if seat is None:
            Logger.base.warning(f'💺 [SEAT_DOMAIN] {cabin_class} cabin is full')
            return SeatAllocationResult.failure_result('No available seats matching preference')
        return SeatAllocationResult.success_result(seat)
