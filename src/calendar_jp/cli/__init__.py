"""
CLI layer for calendar-jp.

Provides a Typer application whose commands delegate to
``calendar_jp.CalendarJp``. This package handles only terminal transport:
argument parsing, coloured output, and table formatting.

Entry point::

    calendar-jp --help
"""

from calendar_jp.cli.app import app

__all__ = ["app"]
