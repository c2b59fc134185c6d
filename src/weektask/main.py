from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Optional

import typer
from dotenv import load_dotenv
from loguru import logger
from rich.console import Console
from rich.markup import escape

from .config import Settings
from .errors import ReportedError, StoreError
from .logging_setup import setup_logging
from .tools import (
    add_task,
    clear_week,
    complete_task,
    day_tasks,
    delete_task,
    list_week,
    update_task,
)
from .utils import WeekStore, render_day_list, render_table

load_dotenv()

app = typer.Typer(
    name="week",
    help="Manage tasks for each day of the week",
    no_args_is_help=True,
    add_completion=False,
)
err_console = Console(stderr=True)


@app.callback()
def main(
    ctx: typer.Context,
    file: Optional[Path] = typer.Option(
        None, "--file", "-f", help="Week document (default: week.json or $WEEKTASK_FILE)"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
):
    overrides = {}
    if file is not None:
        overrides["week_file"] = file
    if verbose:
        overrides["log_level"] = "DEBUG"
    settings = Settings(**overrides)
    setup_logging(settings.log_level, settings.log_file)
    logger.debug(f"Using week document {settings.week_file}")
    ctx.obj = WeekStore(settings.week_file)


@contextmanager
def _handle_errors() -> Iterator[None]:
    try:
        yield
    except ReportedError as e:
        typer.secho(f"⚠️ {e}", fg=typer.colors.YELLOW)
    except StoreError as e:
        logger.opt(exception=e).debug("Aborting on storage failure")
        err_console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1) from e


def _echo_lines(lines: List[str]) -> None:
    for line in lines:
        typer.echo(line)


@app.command()
def add(ctx: typer.Context, day: str, task: str):
    """Add a task to a day."""
    with _handle_errors():
        target, added = add_task(ctx.obj, day, task)
        typer.secho(f"✅ Added task for {target.name}: {added.description}", fg=typer.colors.GREEN)


@app.command("list")
def list_(ctx: typer.Context):
    """Show the whole week as a table."""
    with _handle_errors():
        _echo_lines(render_table(list_week(ctx.obj)))


@app.command()
def done(ctx: typer.Context, day: str, index: int):
    """Mark task INDEX (1-based) of DAY as done."""
    with _handle_errors():
        target, _ = complete_task(ctx.obj, day, index)
        typer.secho(f"✅ Task {index} for {target.name} marked as done", fg=typer.colors.GREEN)


@app.command()
def update(ctx: typer.Context, day: str, index: int, new_task: str):
    """Replace the text of task INDEX of DAY."""
    with _handle_errors():
        target, _ = update_task(ctx.obj, day, index, new_task)
        typer.secho(f"✏️ Task {index} for {target.name} updated", fg=typer.colors.GREEN)


@app.command()
def delete(ctx: typer.Context, day: str, index: int):
    """Remove task INDEX of DAY."""
    with _handle_errors():
        target, removed = delete_task(ctx.obj, day, index)
        typer.secho(
            f"🗑️ Task '{removed.description}' for {target.name} deleted", fg=typer.colors.GREEN
        )


@app.command()
def today(ctx: typer.Context):
    """List today's tasks."""
    with _handle_errors():
        _echo_lines(render_day_list(day_tasks(ctx.obj, 0), "today"))


@app.command()
def tomorrow(ctx: typer.Context):
    """List tomorrow's tasks."""
    with _handle_errors():
        _echo_lines(render_day_list(day_tasks(ctx.obj, 1), "tomorrow"))


@app.command()
def clear(ctx: typer.Context):
    """Remove every task from every day."""
    with _handle_errors():
        clear_week(ctx.obj)
        typer.secho("🗑️ All tasks cleared!", fg=typer.colors.GREEN)


if __name__ == "__main__":
    app()
