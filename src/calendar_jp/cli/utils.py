"""
CLI utility helpers — calendar construction and output formatting.
"""

from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any

import typer
from rich.console import Console
from rich.table import Table

from calendar_jp.core.errors import CalendarError
from calendar_jp.core.logging import configure_logging
from calendar_jp.core.settings import CalendarSettings
from calendar_jp.holidays.calendar import CalendarJp

console = Console()
err_console = Console(stderr=True)


# ── Calendar helper ──────────────────────────────────────────────────────


def setup_logging(settings: CalendarSettings) -> None:
    configure_logging(level=settings.log_level, json_format=settings.json_logs)


def make_calendar(ctx: typer.Context) -> CalendarJp:
    """Build a calendar from settings, honouring the global ``--rules`` option."""
    settings: CalendarSettings = ctx.obj["settings"]
    rules_path: Path | None = ctx.obj.get("rules_path") or settings.rules_path
    try:
        return CalendarJp(rules_path=rules_path, cache_enabled=settings.cache_enabled)
    except CalendarError as e:
        exit_with_error(e)


def exit_with_error(error: CalendarError) -> None:
    err_console.print(f"[bold red]Error[/bold red] ({error.category.value}): {error.message}")
    context = error.context.to_dict()
    if context:
        err_console.print(
            json.dumps(context, ensure_ascii=False, default=str), style="dim", markup=False
        )
    raise typer.Exit(code=1)


# ── Output helpers ───────────────────────────────────────────────────────


def _to_dict(obj: Any) -> dict[str, Any]:
    """Convert dataclass / dict to plain dict."""
    if hasattr(obj, "to_dict"):
        return obj.to_dict()
    if hasattr(obj, "__dataclass_fields__"):
        return asdict(obj)
    if isinstance(obj, dict):
        return obj
    return {"value": str(obj)}


def output_json(payload: Any) -> None:
    typer.echo(json.dumps(payload, ensure_ascii=False, indent=2, default=str))


def output_rows(
    items: list,
    *,
    as_json: bool = False,
    title: str = "",
    columns: list[str] | None = None,
) -> None:
    """Render a list of records as a Rich table or JSON."""
    rows = [_to_dict(item) for item in items]

    if as_json:
        output_json(rows)
        return

    if not rows:
        console.print("[dim]No items.[/dim]")
        return

    columns = columns or list(rows[0])
    table = Table(title=title or None, show_lines=False, pad_edge=False)
    for col in columns:
        table.add_column(col, overflow="fold")
    for row in rows:
        table.add_row(*(_cell(row.get(col)) for col in columns))
    console.print(table)


def _cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, dict):
        return "–".join(str(v) for v in value.values())
    return str(value)
