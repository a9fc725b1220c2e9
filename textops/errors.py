"""textops error hierarchy and structured error models."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel

from textops.exit_codes import ExitCode


def _default_exit_code(category: ErrorCategory) -> ExitCode:
    mapping = {
        ErrorCategory.USAGE: ExitCode.USAGE_ERROR,
        ErrorCategory.INPUT: ExitCode.INVALID_INPUT,
        ErrorCategory.READ: ExitCode.INPUT_UNREADABLE,
        ErrorCategory.OPERATION: ExitCode.OPERATION_FAILED,
        ErrorCategory.INTERNAL: ExitCode.INTERNAL_ERROR,
    }
    return mapping[category]


class ErrorCategory(str, Enum):
    USAGE = "usage"
    INPUT = "input"
    READ = "read"
    OPERATION = "operation"
    INTERNAL = "internal"


class Suggestion(BaseModel):
    action: str
    fix: str
    example: str | None = None


class TextOpsError(Exception):
    """Base error raised by operations and the CLI dispatch."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory = ErrorCategory.OPERATION,
        suggestion: Suggestion | None = None,
        details: dict[str, Any] | None = None,
        exit_code: ExitCode | int | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.suggestion = suggestion
        self.details = details or {}
        resolved_exit_code = exit_code if exit_code is not None else _default_exit_code(category)
        self.exit_code = int(resolved_exit_code)

    def to_dict(self) -> dict[str, Any]:
        return {
            "message": self.message,
            "code": self.code,
            "category": self.category.value,
            "suggestion": self.suggestion.model_dump() if self.suggestion else None,
            "details": self.details,
        }


class UsageError(TextOpsError):
    """E1000: The command line is missing its operation argument."""

    def __init__(
        self,
        message: str,
        code: str = "E1000",
        suggestion: Suggestion | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message,
            code,
            category=ErrorCategory.USAGE,
            suggestion=suggestion,
            details=details,
        )


class UnknownOperationError(TextOpsError):
    """E1001: No operation is registered under the requested name."""

    def __init__(
        self,
        name: str,
        code: str = "E1001",
        suggestion: Suggestion | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            f"Unknown operation: {name}",
            code,
            category=ErrorCategory.INPUT,
            suggestion=suggestion,
            details={"operation": name, **(details or {})},
        )
        self.name = name


class InputReadError(TextOpsError):
    """E11xx: Standard input could not be read or decoded."""

    def __init__(
        self,
        message: str,
        code: str = "E1100",
        suggestion: Suggestion | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message,
            code,
            category=ErrorCategory.READ,
            suggestion=suggestion,
            details=details,
        )


class OperationError(TextOpsError):
    """E3xxx: A handler rejected its input."""

    def __init__(
        self,
        message: str,
        code: str = "E3000",
        suggestion: Suggestion | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message,
            code,
            category=ErrorCategory.OPERATION,
            suggestion=suggestion,
            details=details,
        )


class CsvParseError(OperationError):
    """The csv operation could not parse its input into a table."""


class InternalError(TextOpsError):
    """E5xxx: Uncaught exceptions raised inside a handler."""

    def __init__(
        self,
        message: str,
        code: str = "E5000",
        suggestion: Suggestion | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message,
            code,
            category=ErrorCategory.INTERNAL,
            suggestion=suggestion,
            details=details,
        )
