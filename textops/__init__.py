"""textops — small text transformations over standard input."""

from __future__ import annotations

__version__ = "1.0.0"

from textops.config import BorderStyle, RunConfig  # noqa: E402
from textops.errors import (  # noqa: E402
    CsvParseError,
    InputReadError,
    OperationError,
    TextOpsError,
    UnknownOperationError,
    UsageError,
)
from textops.operations import OPERATIONS, Operation, lookup, names, register, run_operation  # noqa: E402
from textops.table import render  # noqa: E402

__all__ = [
    "OPERATIONS",
    "BorderStyle",
    "CsvParseError",
    "InputReadError",
    "Operation",
    "OperationError",
    "RunConfig",
    "TextOpsError",
    "UnknownOperationError",
    "UsageError",
    "lookup",
    "names",
    "register",
    "run_operation",
    "render",
]
