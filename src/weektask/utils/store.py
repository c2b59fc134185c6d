import contextlib
import os
from pathlib import Path

from loguru import logger
from pydantic import ValidationError

from weektask.entity import Week
from weektask.errors import StoreError

DEFAULT_WEEK_FILE = Path("week.json")


class WeekStore:
    """
    Reads and writes the whole Week as one pretty-printed JSON document.

    A missing or unparseable document loads as a fresh empty week; only
    OS-level read/write failures raise StoreError.
    """

    def __init__(self, path: Path | str = DEFAULT_WEEK_FILE) -> None:
        self.path = Path(path)

    def load(self) -> Week:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug(f"No week document at {self.path}, starting fresh")
            return Week.fresh()
        except UnicodeDecodeError:
            logger.info(f"{self.path} is not valid UTF-8, starting fresh")
            return Week.fresh()
        except OSError as e:
            raise StoreError(f"Failed to read {self.path}: {e}") from e

        try:
            week = Week.model_validate_json(raw)
        except ValidationError as e:
            logger.info(
                f"{self.path} does not hold a week ({e.error_count()} errors), starting fresh"
            )
            return Week.fresh()

        logger.debug(f"Loaded {_task_count(week)} tasks from {self.path}")
        return week

    def save(self, week: Week) -> None:
        payload = week.model_dump_json(indent=2)
        try:
            # Write through symlinks: the temp file lands beside the real document.
            target = self.path.resolve()
        except (OSError, RuntimeError) as e:
            raise StoreError(f"Failed to write {self.path}: {e}") from e
        tmp_path = target.with_name(target.name + ".tmp")
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(payload, encoding="utf-8")
            os.replace(tmp_path, target)
        except OSError as e:
            with contextlib.suppress(OSError):
                tmp_path.unlink(missing_ok=True)
            raise StoreError(f"Failed to write {self.path}: {e}") from e
        logger.debug(f"Saved {_task_count(week)} tasks to {target}")


def _task_count(week: Week) -> int:
    return sum(len(day.tasks) for day in week.days)
