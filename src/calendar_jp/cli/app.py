"""
Root Typer application for the calendar-jp CLI.

    calendar-jp holiday 2008-05-06
    calendar-jp year 2024 --json
    calendar-jp rules list --year 2019
    calendar-jp verify syukujitsu.csv --encoding cp932
"""

from __future__ import annotations

from pathlib import Path

import typer
from pydantic import ValidationError
from rich.markup import escape
from typer import Typer

from calendar_jp.core.errors import CalendarError, ConfigError
from calendar_jp.core.settings import CalendarSettings
from calendar_jp.holidays.schema import weekday_name
from calendar_jp.cli.rules import app as rules_app
from calendar_jp.cli.utils import (
    console,
    err_console,
    exit_with_error,
    make_calendar,
    output_json,
    output_rows,
    setup_logging,
)

app = Typer(
    name="calendar-jp",
    help="calendar-jp — Japanese public holidays from a declarative rule table.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


# ── Version callback ─────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        from calendar_jp import __version__

        typer.echo(f"calendar-jp {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    rules: Path | None = typer.Option(
        None,
        "--rules",
        "-r",
        help="JSON rule document to use instead of the packaged table.",
    ),
    version: bool | None = typer.Option(  # noqa: UP007
        None,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """calendar-jp CLI — look up holidays and inspect the rule table."""
    try:
        settings = CalendarSettings()
    except ValidationError as e:
        exit_with_error(
            ConfigError(f"Invalid CALENDAR_JP_ settings: {e.errors()[0]['msg']}", cause=e)
        )
    setup_logging(settings)
    ctx.obj = {"settings": settings, "rules_path": rules}


# ── Commands ─────────────────────────────────────────────────────────────


@app.command("holiday")
def holiday(
    ctx: typer.Context,
    day: str = typer.Argument(..., help="Date as YYYY-MM-DD"),
) -> None:
    """Show the holiday on a date."""
    calendar = make_calendar(ctx)
    title = calendar.get_holiday(day)
    if title is None:
        console.print(f"{escape(day)}: [dim]not a holiday[/dim]")
    else:
        console.print(f"{escape(day)}: [bold green]{escape(title)}[/bold green]")


@app.command("year")
def year_holidays(
    ctx: typer.Context,
    year: int = typer.Argument(..., help="Calendar year"),
    json_out: bool = typer.Option(False, "--json"),
) -> None:
    """List every holiday of a year."""
    calendar = make_calendar(ctx)
    if json_out:
        output_json(calendar.get_holiday_map(year))
        return
    rows = [
        {"date": day.ymd, "weekday": weekday_name(day.date.weekday()), "title": day.title}
        for day in calendar.holidays(year)
    ]
    output_rows(rows, title=f"Holidays {year}")


@app.command("verify")
def verify_reference(
    ctx: typer.Context,
    csv_path: Path = typer.Argument(..., help="Official holiday CSV (YYYY/M/D,name)"),
    encoding: str = typer.Option("utf-8", "--encoding", "-e", help="CSV encoding (official file: cp932)"),
    show: int = typer.Option(20, "--show", help="Mismatches to print"),
) -> None:
    """Cross-check an official holiday CSV against the rule table."""
    from calendar_jp.holidays.reference import read_reference_csv, verify

    calendar = make_calendar(ctx)
    try:
        references = read_reference_csv(csv_path, encoding=encoding)
    except CalendarError as e:
        exit_with_error(e)
    except (OSError, UnicodeDecodeError) as e:
        err_console.print(f"[bold red]Error:[/bold red] could not read {csv_path}: {e}")
        raise typer.Exit(code=1)

    result = verify(calendar, references)
    for mismatch in result.mismatches[:show]:
        console.print(
            f"  [red]✗[/red] {mismatch.date.isoformat()} "
            f"expected {mismatch.expected}, got {mismatch.actual}"
        )
    if len(result.mismatches) > show:
        console.print(f"  [dim]... {len(result.mismatches) - show} more[/dim]")

    console.print(
        f"Matched {result.matched} of {result.total}, "
        f"{len(result.mismatches)} mismatches"
    )
    if not result.ok:
        raise typer.Exit(code=1)


app.add_typer(rules_app, name="rules", help="Rule table inspection.")
