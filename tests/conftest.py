from datetime import date, datetime

import pytest
from loguru import logger
from typer.testing import CliRunner

from weektask.utils import WeekStore

# 2024-01-07 is a Sunday, so "tomorrow" rolls over to Monday.
SUNDAY = date(2024, 1, 7)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("WEEKTASK_FILE", "WEEKTASK_LOG_LEVEL", "WEEKTASK_LOG_FILE", "WEEK_FILE"):
        monkeypatch.delenv(name, raising=False)
    yield
    logger.remove()


@pytest.fixture()
def week_path(tmp_path):
    return tmp_path / "week.json"


@pytest.fixture()
def store(week_path):
    return WeekStore(week_path)


@pytest.fixture()
def sunday():
    return SUNDAY


@pytest.fixture()
def frozen_sunday(monkeypatch):
    """Pin the local clock read by resolve_weekday() to SUNDAY at noon."""
    from weektask.utils import calendar

    class _SundayClock(datetime):
        @classmethod
        def now(cls, tz=None):
            return cls(SUNDAY.year, SUNDAY.month, SUNDAY.day, 12, 0, tzinfo=tz)

    monkeypatch.setattr(calendar, "datetime", _SundayClock)
    return SUNDAY


class WeekCLIRunner:
    """Runs the `week` app against one temp document."""

    def __init__(self, path):
        self.path = path
        self.runner = CliRunner()

    def invoke(self, args):
        from weektask.main import app

        return self.runner.invoke(app, ["--file", str(self.path), *args])


@pytest.fixture()
def cli(week_path):
    return WeekCLIRunner(week_path)
