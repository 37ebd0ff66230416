"""
File Reader - Load the two source files concurrently
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

from pydantic import BaseModel


class FileDiffError(Exception):
    """Base error for filediff"""


class FileReadError(FileDiffError):
    """A source file could not be read or decoded"""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(reason)


class SourceText(BaseModel):
    """Content of one input file"""

    path: str  # absolute path
    filename: str  # basename, used in output prefixes
    content: str


def read_text_file(path: str, encoding: str = "utf-8", verbose: bool = False) -> SourceText:
    """Read a file as text, keeping its line terminators untouched"""
    try:
        absolute_path = Path(path).resolve()
        # newline="" disables universal newlines so \r\n survives the read
        with open(absolute_path, encoding=encoding, newline="") as f:
            content = f.read()
    except (OSError, UnicodeDecodeError, LookupError) as e:
        reason = e.strerror if isinstance(e, OSError) and e.strerror else str(e)
        print(f'Error reading file "{path}": {reason}', file=sys.stderr)
        raise FileReadError(path, reason) from e

    if verbose:
        print(f"[FileReader] Read {len(content)} characters from {absolute_path}", file=sys.stderr)

    return SourceText(
        path=str(absolute_path),
        filename=absolute_path.name,
        content=content,
    )


async def read_pair(
    path_a: str,
    path_b: str,
    encoding: str = "utf-8",
    verbose: bool = False,
) -> tuple[SourceText, SourceText]:
    """Read both files concurrently; fail fast if either read fails.

    When one read fails the other is cancelled. If both have failed by the
    time the first failure is seen, the error for ``path_a`` wins.
    """
    task_a = asyncio.ensure_future(asyncio.to_thread(read_text_file, path_a, encoding, verbose))
    task_b = asyncio.ensure_future(asyncio.to_thread(read_text_file, path_b, encoding, verbose))
    tasks = (task_a, task_b)

    done, pending = await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)

    failed = [t for t in tasks if t in done and t.exception() is not None]
    if failed:
        for task in pending:
            task.cancel()
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)
        raise failed[0].exception()

    return task_a.result(), task_b.result()
