"""Central exit-code taxonomy for textops."""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Process exit codes used by the textops CLI.

    Every error class maps to a non-zero code so scripts can tell a
    missing argument apart from bad input or a failed transformation.
    """

    SUCCESS = 0
    USAGE_ERROR = 1
    INVALID_INPUT = 2
    INPUT_UNREADABLE = 20
    OPERATION_FAILED = 65
    INTERNAL_ERROR = 70
