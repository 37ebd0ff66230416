"""
Renderer - Turn an edit script into annotated terminal lines
"""

from __future__ import annotations

from filediff.models.diff import EditScript, SegmentKind
from filediff.services.line_sequencer import strip_terminator

ANSI_RESET = "\x1b[0m"
ANSI_GREEN = "\x1b[32m"
ANSI_RED = "\x1b[31m"

NO_DIFFERENCES_MESSAGE = "No differences found between files."


class TerminalRenderer:
    """Render changed lines with an origin prefix and optional ANSI color"""

    COLORS = {
        SegmentKind.ADDED: ANSI_GREEN,
        SegmentKind.REMOVED: ANSI_RED,
    }

    def __init__(self, color: bool = True):
        self.color = color

    def render(self, script: EditScript, filename_a: str, filename_b: str) -> list[str]:
        """Render one output line per changed line in the script.

        Removed lines are tagged ``[-<filename_a>]`` and added lines
        ``[+<filename_b>]``. Unchanged segments are skipped; a script without
        changes renders as a single message line.
        """
        changes = script.changes
        if not changes:
            return [NO_DIFFERENCES_MESSAGE]

        output = []
        for segment in changes:
            if segment.kind == SegmentKind.ADDED:
                prefix = f"[+{filename_b}] "
            else:
                prefix = f"[-{filename_a}] "

            for line in segment.lines:
                output.append(self._paint(segment.kind, prefix + strip_terminator(line)))

        return output

    def _paint(self, kind: SegmentKind, text: str) -> str:
        if not self.color:
            return text
        return f"{self.COLORS[kind]}{text}{ANSI_RESET}"
