from datetime import date
from typing import Optional, Tuple

from loguru import logger

from weektask.entity import Day, Task, Week
from weektask.errors import InvalidDayError, InvalidIndexError
from weektask.utils import WeekStore, find_day, resolve_weekday


def _require_day(week: Week, name: str) -> Day:
    day = find_day(week, name)
    if day is None:
        raise InvalidDayError(name)
    return day


def _require_index(day: Day, index: int) -> int:
    """Turn a 1-based task number into a list position."""
    if index < 1 or index > len(day.tasks):
        raise InvalidIndexError(index)
    return index - 1


def add_task(store: WeekStore, day: str, text: str) -> Tuple[Day, Task]:
    week = store.load()
    target = _require_day(week, day)
    task = Task(description=text)
    target.tasks.append(task)
    store.save(week)
    logger.debug(f"Added task {len(target.tasks)} to {target.name}")
    return target, task


def list_week(store: WeekStore) -> Week:
    return store.load()


def complete_task(store: WeekStore, day: str, index: int) -> Tuple[Day, Task]:
    week = store.load()
    target = _require_day(week, day)
    task = target.tasks[_require_index(target, index)]
    task.done = True
    store.save(week)
    return target, task


def update_task(store: WeekStore, day: str, index: int, text: str) -> Tuple[Day, Task]:
    week = store.load()
    target = _require_day(week, day)
    task = target.tasks[_require_index(target, index)]
    task.description = text
    store.save(week)
    return target, task


def delete_task(store: WeekStore, day: str, index: int) -> Tuple[Day, Task]:
    """Remove a task; later tasks on that day move up one number."""
    week = store.load()
    target = _require_day(week, day)
    removed = target.tasks.pop(_require_index(target, index))
    store.save(week)
    return target, removed


def day_tasks(store: WeekStore, offset_days: int, today: Optional[date] = None) -> Day:
    """
    Tasks of the weekday `offset_days` from today (0 today, 1 tomorrow).
    Falls back to an empty day if the resolved name is not in the week.
    """
    name = resolve_weekday(offset_days, today)
    week = store.load()
    return find_day(week, name) or Day(name=name)


def clear_week(store: WeekStore) -> Week:
    week = store.load()
    for day in week.days:
        day.tasks.clear()
    store.save(week)
    logger.debug("Cleared every day")
    return week
