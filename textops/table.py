"""CSV-to-table rendering for the ``csv`` operation.

The first CSV record is the header and fixes the column set. Data rows
shorter than the header are padded with empty cells; longer rows are
rejected. Parsing is all-or-nothing: any malformed record aborts the
whole table.
"""

from __future__ import annotations

import csv
import io
import logging
import re
import sys

from rich import box
from rich.cells import cell_len
from rich.console import Console
from rich.table import Table
from rich.text import Text

from textops.config import BorderStyle
from textops.errors import CsvParseError, Suggestion

logger = logging.getLogger(__name__)

_BOXES: dict[BorderStyle, box.Box] = {
    BorderStyle.ASCII: box.ASCII_DOUBLE_HEAD,
    BorderStyle.SQUARE: box.SQUARE_DOUBLE_HEAD,
    BorderStyle.HEAVY: box.HEAVY_HEAD,
}

_QUOTING_HINT = Suggestion(
    action="fix_quoting",
    fix="Close every quoted field and escape literal quotes by doubling them.",
    example='name,quote\nAda,"She said ""hi"""',
)

_CONTROL_CHARS = re.compile(r"[\x00-\x08\x0e-\x1f\x7f-\x9f]")


def _lift_field_size_limit() -> None:
    # C long is 32 bits on some platforms
    limit = sys.maxsize
    while True:
        try:
            csv.field_size_limit(limit)
            return
        except OverflowError:
            limit //= 2


def parse_records(csv_text: str) -> tuple[list[str], list[list[str]]]:
    """Parse CSV text into ``(header, rows)``.

    Every row in the result has exactly ``len(header)`` fields.
    """
    if not csv_text.strip():
        raise CsvParseError(message="CSV input is empty", code="E3001")

    _lift_field_size_limit()
    reader = csv.reader(io.StringIO(csv_text, newline=""), strict=True)
    header: list[str] | None = None
    rows: list[list[str]] = []
    record_number = 0

    while True:
        try:
            record = next(reader)
        except StopIteration:
            break
        except csv.Error as exc:
            failed = record_number + 1
            logger.debug("malformed CSV record %d at line %d: %s", failed, reader.line_num, exc)
            what = "header" if header is None else f"record {failed}"
            raise CsvParseError(
                message=f"Malformed CSV {what} (line {reader.line_num}): {exc}",
                code="E3002",
                suggestion=_QUOTING_HINT,
                details={"record": failed, "line": reader.line_num},
            ) from exc

        if not record:
            continue
        record_number += 1

        if header is None:
            header = record
            continue

        if len(record) > len(header):
            raise CsvParseError(
                message=(
                    f"CSV record {record_number} has {len(record)} fields, "
                    f"but the header has {len(header)}"
                ),
                code="E3003",
                details={"record": record_number, "fields": len(record), "expected": len(header)},
            )
        rows.append(record + [""] * (len(header) - len(record)))

    if header is None:
        raise CsvParseError(message="CSV input is empty", code="E3001")

    logger.debug("parsed %d data rows with %d columns", len(rows), len(header))
    return header, rows


def _display(field: str) -> str:
    """Return ``field`` as shown in a cell.

    Line breaks become plain newlines, tabs become spaces and any other
    control character is shown as a ``\\xNN`` escape.
    """
    text = "\n".join(field.splitlines()).expandtabs(8)
    return _CONTROL_CHARS.sub(lambda match: f"\\x{ord(match.group()):02x}", text)


def _width(field: str) -> int:
    return max((cell_len(line) for line in field.split("\n")), default=0)


def render(csv_text: str, border: BorderStyle = BorderStyle.SQUARE) -> str:
    """Render CSV text as a fully ruled, column-aligned text table."""
    header, rows = parse_records(csv_text)

    header_cells = [_display(name) for name in header]
    body = [[_display(field) for field in row] for row in rows]

    widths = [_width(cell) for cell in header_cells]
    for row in body:
        widths = [max(current, _width(cell)) for current, cell in zip(widths, row)]

    table = Table(box=_BOXES[border], show_lines=True, highlight=False)
    for name in header_cells:
        table.add_column(Text(name), no_wrap=True)
    for row in body:
        table.add_row(*(Text(cell) for cell in row))

    # borders plus one space of padding on each side of every cell
    table_width = sum(widths) + 3 * len(widths) + 1
    buffer = io.StringIO()
    console = Console(
        file=buffer,
        width=table_width,
        color_system=None,
        force_terminal=False,
        force_jupyter=False,
        legacy_windows=False,
        markup=False,
        emoji=False,
        highlight=False,
    )
    console.print(table)
    return buffer.getvalue().rstrip("\n")
