from datetime import date, datetime, timedelta
from typing import Optional

from weektask.entity import DAY_NAMES, Day, Week


def find_day(week: Week, name: str) -> Optional[Day]:
    """Case-insensitive lookup; the returned Day is the live one inside `week`."""
    target = name.lower()
    for day in week.days:
        if day.name.lower() == target:
            return day
    return None


def resolve_weekday(offset_days: int = 0, today: Optional[date] = None) -> str:
    """
    Return the canonical weekday name `offset_days` after the local date.

    Parameters
    ----------
    offset_days : int, optional
        Days to move forward from today.
            - 0  -> today
            - 1  -> tomorrow
    today : date, optional
        Reference date; defaults to the local system date.

    Returns
    -------
    str
        One of ``DAY_NAMES``, e.g. ``"Monday"``.
    """
    today = today or datetime.now().date()
    target = today + timedelta(days=offset_days)
    # weekday() is locale-independent, unlike strftime("%A")
    return DAY_NAMES[target.weekday()]
