"""Operation registry for textops.

Each operation is a stateless :class:`Operation` subclass with a unique
``name`` and a single :meth:`Operation.apply` capability. The registry is
built once at import time and exposed read-only.
"""

from __future__ import annotations

import difflib
import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from types import MappingProxyType

from slugify import slugify

from textops.config import BorderStyle
from textops.errors import InternalError, Suggestion, TextOpsError, UnknownOperationError
from textops.table import render

logger = logging.getLogger(__name__)

VOWELS = frozenset("aeiouAEIOU")


class Operation(ABC):
    """Base class for all text operations."""

    name: str = ""
    help: str = ""

    @abstractmethod
    def apply(self, text: str) -> str:
        """Transform ``text``; raise a :class:`TextOpsError` on bad input."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


class Lowercase(Operation):
    name = "lowercase"
    help = "Convert every character to lowercase."

    def apply(self, text: str) -> str:
        return text.lower()


class Uppercase(Operation):
    name = "uppercase"
    help = "Convert every character to uppercase."

    def apply(self, text: str) -> str:
        return text.upper()


class TrimSpaces(Operation):
    name = "trimspaces"
    help = "Remove every space character (tabs and newlines are kept)."

    def apply(self, text: str) -> str:
        return text.replace(" ", "")


class Slugify(Operation):
    name = "slugify"
    help = "Transliterate to ASCII and convert to a hyphen-separated lowercase slug."

    def apply(self, text: str) -> str:
        return slugify(text)


class Reverse(Operation):
    name = "reverse"
    help = "Reverse the order of the characters."

    def apply(self, text: str) -> str:
        return text[::-1]


class NoVowels(Operation):
    name = "novowels"
    help = "Remove the vowels a, e, i, o and u in either case."

    def apply(self, text: str) -> str:
        return "".join(ch for ch in text if ch not in VOWELS)


class Csv(Operation):
    name = "csv"
    help = "Render CSV (first record is the header) as a bordered table."

    def __init__(self, border: BorderStyle = BorderStyle.SQUARE) -> None:
        self.border = border

    def apply(self, text: str) -> str:
        return render(text, border=self.border)


def register() -> tuple[Operation, ...]:
    """Return the operations in help-text order."""
    return (
        Lowercase(),
        Uppercase(),
        TrimSpaces(),
        Slugify(),
        Reverse(),
        NoVowels(),
        Csv(),
    )


OPERATIONS: Mapping[str, Operation] = MappingProxyType({op.name: op for op in register()})


def names() -> list[str]:
    return list(OPERATIONS)


def lookup(name: str) -> Operation:
    """Return the operation registered as ``name``."""
    operation = OPERATIONS.get(name)
    if operation is not None:
        return operation

    close = difflib.get_close_matches(name, names(), n=3)
    candidates = close + [n for n in names() if n not in close]
    raise UnknownOperationError(
        name,
        suggestion=Suggestion(
            action="choose_operation",
            fix=f"Use one of: {', '.join(candidates)}",
            example=f"textops {candidates[0]}",
        ),
    )


def run_operation(name: str, text: str, *, border: BorderStyle = BorderStyle.SQUARE) -> str:
    """Trim ``text`` and apply the operation registered as ``name``.

    ``border`` only affects the ``csv`` operation.
    """
    operation = lookup(name)
    if isinstance(operation, Csv) and operation.border != border:
        operation = Csv(border=border)

    logger.info("applying %s to %d characters", operation.name, len(text.strip()))
    try:
        return operation.apply(text.strip())
    except TextOpsError:
        raise
    except Exception as exc:
        raise InternalError(
            message=f"Operation '{name}' failed unexpectedly: {exc}",
            details={"operation": name, "exception": type(exc).__name__},
        ) from exc
