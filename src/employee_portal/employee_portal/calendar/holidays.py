"""Fixed-date holidays, keyed by (day, month) with a 1-based month."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional, Tuple

HolidayKey = Tuple[int, int]

HOLIDAY_TABLE: Mapping[HolidayKey, str] = MappingProxyType(
    {
        (1, 1): "New Year's Day",
        (23, 1): "Netaji Jayanti",
        (26, 1): "Republic Day",
        (15, 8): "Independence Day",
        (2, 10): "Gandhi Jayanti",
        (25, 12): "Christmas",
    }
)


def holiday_label(day: int, month: int, table: Mapping[HolidayKey, str] = HOLIDAY_TABLE) -> Optional[str]:
    """Label for a 1-based (day, month), or None when it is not a fixed holiday."""
    return table.get((day, month))
