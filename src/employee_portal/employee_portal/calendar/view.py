from __future__ import annotations

import logging
from calendar import monthrange
from datetime import MAXYEAR, MINYEAR, date
from typing import Callable, List, Mapping, Optional

from ..common.datetime_utils import today_local
from ..core.constants import SUNDAY_LABEL
from ..core.exceptions import ValidationError
from .holidays import HOLIDAY_TABLE, HolidayKey, holiday_label
from .model import DayCell, GridModel, ViewState

logger = logging.getLogger(__name__)

Clock = Callable[[], date]
EventPrompt = Callable[[date], Optional[str]]


def sunday_first_weekday(d: date) -> int:
    """0 = Sunday .. 6 = Saturday."""
    return (d.weekday() + 1) % 7


def days_in_month(year: int, month: int) -> int:
    """`month` is 0-based."""
    return monthrange(year, month + 1)[1]


def event_prompt_text(d: date) -> str:
    return f"Add/View event for {d.day}-{d.month}-{d.year}:"


def render_month(
    view_state: ViewState,
    *,
    today: date,
    holidays: Mapping[HolidayKey, str] = HOLIDAY_TABLE,
) -> GridModel:
    """Build the day grid for `view_state`.

    A row is closed after the day where (first_weekday + day) % 7 == 0 and
    after the last day of the month, so only the final row can be short.
    """
    year, month = view_state.year, view_state.month
    if not MINYEAR <= year <= MAXYEAR:
        raise ValidationError(f"year must be between {MINYEAR} and {MAXYEAR}")
    first_weekday = sunday_first_weekday(date(year, month + 1, 1))
    last_date = days_in_month(year, month)
    is_current_month = today.year == year and today.month == month + 1

    rows: List[List[Optional[DayCell]]] = []
    row: List[Optional[DayCell]] = [None] * first_weekday

    for day in range(1, last_date + 1):
        weekday = (first_weekday + day - 1) % 7
        label = holiday_label(day, month + 1, holidays)
        if label is None and weekday == 0:
            label = SUNDAY_LABEL

        row.append(
            DayCell(
                day=day,
                weekday=weekday,
                is_today=is_current_month and today.day == day,
                is_holiday=label is not None,
                holiday_label=label,
            )
        )

        if (first_weekday + day) % 7 == 0 or day == last_date:
            rows.append(row)
            row = []

    return GridModel(view_state=view_state, leading_blanks=first_weekday, days_in_month=last_date, rows=rows)


class CalendarView:
    """Stateful month view: owns the ViewState and the grid currently shown.

    Every navigation re-renders from scratch, so user events entered on the
    previous grid are dropped.
    """

    def __init__(
        self,
        *,
        clock: Clock = today_local,
        prompt: Optional[EventPrompt] = None,
        holidays: Mapping[HolidayKey, str] = HOLIDAY_TABLE,
        state: Optional[ViewState] = None,
    ):
        self._clock = clock
        self._prompt = prompt
        self._holidays = holidays
        self._state = state or ViewState.from_date(clock())
        self._grid = self.render()

    @property
    def state(self) -> ViewState:
        return self._state

    @property
    def grid(self) -> GridModel:
        return self._grid

    def render(self, view_state: Optional[ViewState] = None) -> GridModel:
        state = self._state if view_state is None else view_state
        grid = render_month(state, today=self._clock(), holidays=self._holidays)
        self._state, self._grid = state, grid
        return grid

    def navigate(self, delta_months: int) -> ViewState:
        self.render(self._state.shifted(delta_months))
        return self._state

    def go_to_today(self) -> ViewState:
        self.render(ViewState.from_date(self._clock()))
        return self._state

    def on_cell_activate(self, day: int) -> bool:
        """Ask for event text for `day`; returns True when the cell changed."""
        cell = self._grid.cell(day)
        if cell is None:
            raise ValidationError(f"Day {day} is not in {self._state.label}")
        if self._prompt is None:
            return False

        text = self._prompt(date(self._state.year, self._state.calendar_month, day))
        if not text:
            return False

        cell.user_event = text
        logger.debug("Event added on %s %s", day, self._state.label)
        return True
