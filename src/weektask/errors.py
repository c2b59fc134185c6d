class WeekTaskError(Exception):
    pass


class ReportedError(WeekTaskError):
    """Bad user input. Shown to the user, nothing is saved, exit code stays 0."""


class InvalidDayError(ReportedError):
    def __init__(self, day: str):
        self.day = day
        super().__init__(f"Invalid day: {day}")


class InvalidIndexError(ReportedError):
    def __init__(self, index: int):
        self.index = index
        super().__init__("Invalid task number!")


class StoreError(WeekTaskError):
    """The week document could not be read or written."""
