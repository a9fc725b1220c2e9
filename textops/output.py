"""Stream output for the textops CLI.

Results go to stdout; status lines and errors go to stderr.
"""

from __future__ import annotations

import click
from rich.console import Console
from rich.markup import escape

from textops.errors import TextOpsError


def emit_result(result: str) -> None:
    """Write a successful result block to stdout."""
    click.echo(f"\nResult:\n{result}\n")


def emit_status(message: str) -> None:
    click.echo(message, err=True)


def emit_error(error: TextOpsError, *, prefix: str = "", no_color: bool = False) -> None:
    """Report ``error`` on stderr, styled with rich unless colour is disabled."""
    suggestion = error.suggestion.fix if error.suggestion else ""
    if no_color:
        click.echo(f"{prefix}{error.message}", err=True)
        if suggestion:
            click.echo(f"Suggestion: {suggestion}", err=True)
        return

    console = Console(stderr=True, highlight=False)
    console.print(f"[bold red]{escape(prefix)}[/bold red]{escape(error.message)}", soft_wrap=True)
    if suggestion:
        console.print(f"[bold blue]Suggestion:[/bold blue] {escape(suggestion)}", soft_wrap=True)
