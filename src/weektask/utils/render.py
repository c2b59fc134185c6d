from datetime import date
from typing import List, Optional

from weektask.entity import Day, Task, Week

from .calendar import find_day, resolve_weekday

DONE_GLYPH = "✅"
PENDING_GLYPH = "🔘"
# Space reserved next to a description for " <glyph>"
GLYPH_WIDTH = 2
COLUMN_GAP = 2


def status_glyph(task: Task) -> str:
    return DONE_GLYPH if task.done else PENDING_GLYPH


def format_cell(task: Task) -> str:
    return f"{task.description} {status_glyph(task)}"


def _projection(week: Week, name: str) -> List[Task]:
    day = find_day(week, name)
    return day.tasks if day else []


def render_table(week: Week, today: Optional[date] = None) -> List[str]:
    """
    Lay the week out as fixed-width text columns.

    Seven weekday columns are followed by "Today" and "Tomorrow", which are
    looked up from the same week rather than stored separately.
    """
    headers = [day.name for day in week.days] + ["Today", "Tomorrow"]
    columns: List[List[Task]] = [day.tasks for day in week.days]
    columns.append(_projection(week, resolve_weekday(0, today)))
    columns.append(_projection(week, resolve_weekday(1, today)))

    widths = [
        max([len(header)] + [len(task.description) + GLYPH_WIDTH for task in tasks])
        for header, tasks in zip(headers, columns)
    ]

    lines = [
        "".join(header.ljust(width + COLUMN_GAP) for header, width in zip(headers, widths)),
        "".join("-" * (width + COLUMN_GAP) for width in widths),
    ]

    row_count = max(len(tasks) for tasks in columns)
    for row in range(row_count):
        cells = []
        for tasks, width in zip(columns, widths):
            cell = format_cell(tasks[row]) if row < len(tasks) else ""
            cells.append(cell.ljust(width + COLUMN_GAP))
        lines.append("".join(cells))
    return lines


def render_day_list(day: Day, label: str) -> List[str]:
    lines = [f"📋 Tasks for {label} ({day.name})"]
    for number, task in enumerate(day.tasks, start=1):
        lines.append(f"{number}: {format_cell(task)}")
    return lines
