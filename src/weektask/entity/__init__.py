from .week import DAY_NAMES, Day, Task, Week

__all__ = ["DAY_NAMES", "Day", "Task", "Week"]
