"""
Comparator Service - Read, sequence, diff and render two files
"""

from __future__ import annotations

import asyncio
import sys
from typing import TextIO

from pydantic import BaseModel

from filediff.models.diff import EditScript
from filediff.models.settings import DiffSettings
from filediff.services import diff_engine
from filediff.services.file_reader import read_pair
from filediff.services.line_sequencer import sequence
from filediff.services.renderer import TerminalRenderer


class ComparisonResult(BaseModel):
    """Outcome of comparing two files"""

    filename_a: str
    filename_b: str
    script: EditScript
    output: list[str]


async def compare_files(
    file1: str,
    file2: str,
    settings: DiffSettings | None = None,
    stream: TextIO | None = None,
) -> ComparisonResult:
    """Compare two files and render their changed lines.

    Nothing is diffed unless both files were read successfully.
    """
    settings = settings or DiffSettings()
    stream = stream or sys.stdout

    _trace(settings, f"Reading {file1} and {file2}...")
    source_a, source_b = await read_pair(file1, file2, settings.encoding, settings.verbose)

    lines_a = sequence(source_a.content)
    lines_b = sequence(source_b.content)
    _trace(settings, f"Comparing {len(lines_a)} lines against {len(lines_b)} lines")

    script = diff_engine.diff(lines_a, lines_b)
    stats = script.stats
    _trace(settings, f"+{stats.added} -{stats.removed} ({stats.unchanged} unchanged)")

    renderer = TerminalRenderer(color=settings.use_color(stream))
    return ComparisonResult(
        filename_a=source_a.filename,
        filename_b=source_b.filename,
        script=script,
        output=renderer.render(script, source_a.filename, source_b.filename),
    )


def run_comparison(
    file1: str,
    file2: str,
    settings: DiffSettings | None = None,
    stream: TextIO | None = None,
) -> ComparisonResult:
    """Synchronous entry point: compare and write the output to ``stream``"""
    stream = stream or sys.stdout
    result = asyncio.run(compare_files(file1, file2, settings, stream))

    for line in result.output:
        stream.write(line + "\n")
    stream.flush()

    return result


def _trace(settings: DiffSettings, message: str) -> None:
    if settings.verbose:
        print(f"[FileDiff] {message}", file=sys.stderr)
