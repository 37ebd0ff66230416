"""Services module - Diffing and presentation logic"""

from .line_sequencer import join_lines, sequence, strip_terminator
from .diff_engine import diff
from .file_reader import FileDiffError, FileReadError, SourceText, read_pair, read_text_file
from .renderer import NO_DIFFERENCES_MESSAGE, TerminalRenderer
from .comparator import ComparisonResult, compare_files, run_comparison

__all__ = [
    "sequence",
    "join_lines",
    "strip_terminator",
    "diff",
    "FileDiffError",
    "FileReadError",
    "SourceText",
    "read_pair",
    "read_text_file",
    "NO_DIFFERENCES_MESSAGE",
    "TerminalRenderer",
    "ComparisonResult",
    "compare_files",
    "run_comparison",
]
