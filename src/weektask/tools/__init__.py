from .commands import (
    add_task,
    clear_week,
    complete_task,
    day_tasks,
    delete_task,
    list_week,
    update_task,
)

__all__ = [
    "add_task",
    "clear_week",
    "complete_task",
    "day_tasks",
    "delete_task",
    "list_week",
    "update_task",
]
