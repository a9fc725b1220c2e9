"""Command-line entrypoint for textops."""

from __future__ import annotations

import logging
import sys
from typing import Annotated

import click
import typer

from textops import __version__
from textops.config import BorderStyle, RunConfig
from textops.errors import ErrorCategory, InputReadError, TextOpsError, UsageError
from textops.operations import OPERATIONS, lookup, names, run_operation
from textops.output import emit_error, emit_result, emit_status

logger = logging.getLogger(__name__)

_LOG_HANDLER_NAME = "textops-stderr"

_ERROR_PREFIXES = {
    ErrorCategory.OPERATION: "Error executing operation: ",
    ErrorCategory.INTERNAL: "Error executing operation: ",
    ErrorCategory.READ: "Error: ",
}


def _operations_epilog() -> str:
    lines = ["Operations:"]
    lines.extend(f"{op.name}: {op.help}" for op in OPERATIONS.values())
    return "\n\n".join(lines)


cli = typer.Typer(add_completion=False, help="Transform text read from standard input.")


def configure_logging(level: int) -> None:
    """Send textops log records to stderr at ``level``."""
    package_logger = logging.getLogger("textops")
    for handler in list(package_logger.handlers):
        if handler.get_name() == _LOG_HANDLER_NAME:
            package_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_LOG_HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    package_logger.addHandler(handler)
    package_logger.setLevel(level)


def read_input() -> str:
    """Read all of stdin as UTF-8 and strip surrounding whitespace."""
    stream = click.get_binary_stream("stdin")
    try:
        raw = stream.read()
    except OSError as exc:
        raise InputReadError(message=f"Failed to read standard input: {exc}", code="E1100") from exc

    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InputReadError(
            message=f"Standard input is not valid UTF-8: {exc}",
            code="E1101",
            details={"position": exc.start},
        ) from exc

    logger.debug("read %d bytes from stdin", len(raw))
    return text.strip()


def _version_callback(value: bool) -> None:
    if value:
        click.echo(f"textops {__version__}")
        raise typer.Exit()


@cli.command(epilog=_operations_epilog())
def run(
    operation: Annotated[
        str | None,
        typer.Argument(help="Operation to apply to standard input.", show_default=False),
    ] = None,
    border: Annotated[
        BorderStyle,
        typer.Option(help="Border glyphs for the csv table.", case_sensitive=False),
    ] = BorderStyle.SQUARE,
    verbose: Annotated[
        int,
        typer.Option("--verbose", "-v", count=True, help="Increase log verbosity (-v, -vv)."),
    ] = 0,
    no_color: Annotated[
        bool,
        typer.Option("--no-color", help="Disable styled error output."),
    ] = False,
    version: Annotated[
        bool,
        typer.Option("--version", callback=_version_callback, is_eager=True, help="Show the version and exit."),
    ] = False,
) -> None:
    """Read stdin, apply OPERATION and print the result."""
    config = RunConfig(border=border, verbosity=verbose, no_color=no_color)
    configure_logging(config.log_level)

    try:
        if operation is None:
            raise UsageError(
                "Usage: textops <operation>\n"
                f"Available operations: {', '.join(names())}"
            )
        emit_status(f"Selected operation: {operation}")
        lookup(operation)
        text = read_input()
        result = run_operation(operation, text, border=config.border)
    except TextOpsError as exc:
        logger.debug("%s failed: %s", operation, exc.to_dict())
        emit_error(exc, prefix=_ERROR_PREFIXES.get(exc.category, ""), no_color=config.no_color)
        raise SystemExit(exc.exit_code) from exc

    emit_result(result)


def main() -> None:
    cli(prog_name="textops")


if __name__ == "__main__":
    main()
