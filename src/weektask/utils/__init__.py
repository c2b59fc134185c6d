from .calendar import find_day, resolve_weekday
from .render import render_day_list, render_table
from .store import DEFAULT_WEEK_FILE, WeekStore

__all__ = [
    "DEFAULT_WEEK_FILE",
    "WeekStore",
    "find_day",
    "render_day_list",
    "render_table",
    "resolve_weekday",
]
