"""Typer CLI application for the terminal probes."""

import json
from dataclasses import replace
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape

from termprobe.config import ProbeSettings
from termprobe.errors import ConfigError, CursorQueryError, TerminalSizeError
from termprobe.logging import setup_logging
from termprobe.term.cursor import query_cursor_position
from termprobe.term.size import query_terminal_size


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="termprobe",
        help="Query terminal size and cursor position.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console()
    err_console = Console(stderr=True)

    @app.callback()
    def main(
        ctx: typer.Context,
        debug: Annotated[bool, typer.Option("--debug", help="Log probe internals to stderr")] = False,
    ) -> None:
        """Terminal introspection primitives."""
        try:
            settings = ProbeSettings.from_env()
        except ConfigError as exc:
            err_console.print(f"[red]Invalid configuration:[/] {escape(str(exc))}")
            raise typer.Exit(2)

        settings = settings.with_overrides(debug=debug or None)
        setup_logging(debug=settings.debug)
        ctx.obj = settings

    @app.command()
    def size(
        json_output: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
    ) -> None:
        """Show the terminal size of standard output."""
        try:
            result = query_terminal_size()
        except TerminalSizeError as exc:
            err_console.print(f"[red]{escape(str(exc))}[/]")
            raise typer.Exit(1)

        if json_output:
            data = {
                "rows": result.rows,
                "columns": result.columns,
                "x_pixels": result.x_pixels,
                "y_pixels": result.y_pixels,
            }
            print(json.dumps(data, indent=2))
        elif result.is_known:
            console.print(f"[bold]{result.rows}x{result.columns}[/]")
        else:
            console.print("[yellow]Terminal did not report its size[/]")

    @app.command()
    def cursor(
        ctx: typer.Context,
        timeout: Annotated[Optional[float], typer.Option("--timeout", "-t", min=0, help="Seconds to wait for the reply")] = None,
        json_output: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
    ) -> None:
        """Show the cursor position reported by the terminal."""
        settings: ProbeSettings = ctx.obj
        if timeout is not None:
            # --timeout 0 clears a deadline set in the environment
            settings = replace(settings, timeout=timeout or None)

        try:
            position = query_cursor_position(settings.timeout, capacity=settings.capacity)
        except CursorQueryError as exc:
            err_console.print(f"[red]Cursor query failed:[/] {escape(str(exc))}")
            raise typer.Exit(1)

        if json_output:
            print(json.dumps({"row": position.row, "column": position.column}, indent=2))
        else:
            console.print(f"[bold]{position.row};{position.column}[/]")

    return app
