"""
Seat Value Objects

SelectedSeat is what a booking item carries; SeatInfo is a cell of the
rendered seat map and adds the derived ``occupied`` flag.
"""

from typing import Any

import attrs

from src.service.booking.domain.enum.seat_type import SeatType


@attrs.frozen
class SelectedSeat:
    label: str
    row: int
    column: str
    type: SeatType

    def to_dict(self) -> dict[str, Any]:
        return {
            'label': self.label,
            'row': self.row,
            'column': self.column,
            'type': self.type.value,
        }


@attrs.frozen
class SeatInfo(SelectedSeat):
    occupied: bool = False

    def to_selected(self) -> SelectedSeat:
        return SelectedSeat(label=self.label, row=self.row, column=self.column, type=self.type)

    def to_dict(self) -> dict[str, Any]:
        return super().to_dict() | {'occupied': self.occupied}
