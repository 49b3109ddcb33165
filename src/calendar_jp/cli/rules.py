"""
CLI: ``calendar-jp rules`` — rule table inspection.
"""

from __future__ import annotations

import typer

from calendar_jp.cli.utils import make_calendar, output_rows

app = typer.Typer(no_args_is_help=True)

_COLUMNS = ["name", "title", "yearRange", "month", "date", "dateRange", "weekday", "logic"]


@app.command("list")
def list_rules(
    ctx: typer.Context,
    year: int | None = typer.Option(None, "--year", "-y", help="Only rules active in this year"),
    json_out: bool = typer.Option(False, "--json"),
) -> None:
    """List the rule table in precedence order."""
    calendar = make_calendar(ctx)
    rules = calendar.list_rules()
    if year is not None:
        rules = [rule for rule in rules if rule.applies_to_year(year)]
    output_rows(rules, as_json=json_out, title="Holiday rules", columns=_COLUMNS)
