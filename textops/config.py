"""Per-invocation configuration for textops.

There are no configuration files and no environment variables: every
setting comes from a command-line option and is validated here.
"""

from __future__ import annotations

import logging
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class BorderStyle(str, Enum):
    ASCII = "ascii"
    SQUARE = "square"
    HEAVY = "heavy"


class RunConfig(BaseModel):
    """Resolved settings for a single CLI invocation."""

    model_config = ConfigDict(frozen=True)

    border: BorderStyle = BorderStyle.SQUARE
    verbosity: int = Field(default=0, ge=0)
    no_color: bool = False

    @property
    def log_level(self) -> int:
        if self.verbosity >= 2:
            return logging.DEBUG
        if self.verbosity == 1:
            return logging.INFO
        return logging.WARNING
