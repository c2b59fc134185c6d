from typing import Dict, List

from pydantic import BaseModel, Field, model_validator

DAY_NAMES = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]


class Task(BaseModel):
    description: str
    done: bool = False


class Day(BaseModel):
    name: str
    tasks: List[Task] = Field(default_factory=list)


class Week(BaseModel):
    days: List[Day]

    @model_validator(mode="after")
    def canonical_days(self) -> "Week":
        """
        Each weekday must appear exactly once (names compared case-insensitively).
        The days are then put back in Monday..Sunday order with canonical names.
        """
        by_name: Dict[str, Day] = {}
        for day in self.days:
            key = day.name.lower()
            if key in by_name:
                raise ValueError(f"duplicate day: {day.name}")
            by_name[key] = day
        expected = {name.lower() for name in DAY_NAMES}
        if set(by_name) != expected:
            raise ValueError("a week holds exactly the seven weekdays")
        self.days = [
            Day(name=name, tasks=by_name[name.lower()].tasks) for name in DAY_NAMES
        ]
        return self

    @classmethod
    def fresh(cls) -> "Week":
        return cls(days=[Day(name=name) for name in DAY_NAMES])
