"""Run-time settings collected from the command line"""

from __future__ import annotations

from enum import Enum
from typing import Any, TextIO

from pydantic import BaseModel, ConfigDict


class ColorMode(str, Enum):
    """When to wrap output lines in ANSI color codes"""

    ALWAYS = "always"
    NEVER = "never"
    AUTO = "auto"  # only when stdout is a terminal


class DiffSettings(BaseModel):
    """Options for a single comparison run"""

    model_config = ConfigDict(frozen=True)

    color: ColorMode = ColorMode.ALWAYS
    encoding: str = "utf-8"
    verbose: bool = False

    @classmethod
    def from_args(cls, args: Any) -> "DiffSettings":
        """Build settings from a parsed argparse namespace"""
        color = ColorMode.NEVER if getattr(args, "no_color", False) else args.color
        return cls(color=color, encoding=args.encoding, verbose=args.verbose)

    def use_color(self, stream: TextIO) -> bool:
        if self.color == ColorMode.AUTO:
            isatty = getattr(stream, "isatty", None)
            return bool(isatty and isatty())
        return self.color == ColorMode.ALWAYS
