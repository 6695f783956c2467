from __future__ import annotations

from datetime import date


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch it or inject their own clock.
    """
    return date.today()
