"""
Line Sequencer - Split text into lines that keep their terminators
"""

from __future__ import annotations

import re
from collections.abc import Iterable

# \r\n must be tried before the bare characters so it counts as one terminator
_LINE_PATTERN = re.compile(r"[^\r\n]*(?:\r\n|\r|\n)|[^\r\n]+\Z")
_TERMINATOR_PATTERN = re.compile(r"(?:\r\n|\r|\n)\Z")


def sequence(text: str) -> list[str]:
    """Split text into lines, each carrying its own terminator.

    Empty text gives an empty list. A trailing terminator does not add an
    empty final element, and a missing one does not drop the last line, so
    ``join_lines(sequence(text)) == text`` always holds.
    """
    return _LINE_PATTERN.findall(text)


def join_lines(lines: Iterable[str]) -> str:
    """Inverse of sequence()"""
    return "".join(lines)


def strip_terminator(line: str) -> str:
    """Remove one trailing line terminator, if present"""
    return _TERMINATOR_PATTERN.sub("", line, count=1)
