from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, List, Optional

from ..core.constants import MONTH_NAMES
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class ViewState:
    """The month the calendar shows; `month` is 0-based (0 = January)."""

    year: int
    month: int

    def __post_init__(self):
        if not 0 <= self.month <= 11:
            raise ValidationError(f"month must be in 0..11, got {self.month}; use ViewState.normalized")

    @classmethod
    def normalized(cls, year: int, month: int) -> "ViewState":
        """Fold any month value into 0..11, carrying into the year."""
        carry, month = divmod(int(month), 12)
        return cls(year=int(year) + carry, month=month)

    @classmethod
    def from_date(cls, d: date) -> "ViewState":
        return cls(year=d.year, month=d.month - 1)

    def shifted(self, delta_months: int) -> "ViewState":
        return ViewState.normalized(self.year, self.month + int(delta_months))

    @property
    def calendar_month(self) -> int:
        return self.month + 1

    @property
    def label(self) -> str:
        return f"{MONTH_NAMES[self.month]} {self.year}"


@dataclass
class DayCell:
    day: int
    weekday: int
    is_today: bool = False
    is_holiday: bool = False
    holiday_label: Optional[str] = None
    user_event: Optional[str] = None

    @property
    def has_event(self) -> bool:
        return self.user_event is not None

    @property
    def title(self) -> Optional[str]:
        """Tooltip text: a user event replaces the holiday label."""
        return self.user_event if self.user_event is not None else self.holiday_label

    @property
    def css_classes(self) -> List[str]:
        classes = []
        if self.is_today:
            classes.append("highlight")
        if self.is_holiday:
            classes.append("holiday")
        if self.has_event:
            classes.append("event-day")
        return classes

    def to_dict(self) -> dict[str, Any]:
        return {
            "day": self.day,
            "weekday": self.weekday,
            "isToday": self.is_today,
            "isHoliday": self.is_holiday,
            "holidayLabel": self.holiday_label,
            "userEvent": self.user_event,
            "title": self.title,
        }


@dataclass
class GridModel:
    """One rendered month.

    `rows` holds None for each leading blank; the last row is not padded.
    """

    view_state: ViewState
    leading_blanks: int
    days_in_month: int
    rows: List[List[Optional[DayCell]]] = field(default_factory=list)

    @property
    def label(self) -> str:
        return self.view_state.label

    @property
    def cells(self) -> List[Optional[DayCell]]:
        return [cell for row in self.rows for cell in row]

    @property
    def day_cells(self) -> List[DayCell]:
        return [cell for cell in self.cells if cell is not None]

    def cell(self, day: int) -> Optional[DayCell]:
        if 1 <= day <= self.days_in_month:
            return self.day_cells[day - 1]
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "year": self.view_state.year,
            "month": self.view_state.month,
            "label": self.label,
            "leadingBlanks": self.leading_blanks,
            "daysInMonth": self.days_in_month,
            "rows": [[c.to_dict() if c else None for c in row] for row in self.rows],
        }
