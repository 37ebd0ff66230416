"""
Diff Engine - Compute a minimal line-level edit script between two sequences

Uses the linear-space variant of Myers' O(ND) algorithm ("An O(ND)
Difference Algorithm and Its Variations", 1986): a forward and a reverse
search meet in the middle of the edit graph, the problem is split there, and
each half is solved the same way. A shortest edit script keeps a longest
common subsequence of lines, so every line outside it is reported as added
or removed.
"""

from __future__ import annotations

from collections.abc import Sequence
from itertools import groupby

from filediff.models.diff import DiffSegment, EditScript, SegmentKind

# A single edit operation: (kind, line)
Op = tuple[SegmentKind, str]


def diff(a: Sequence[str], b: Sequence[str]) -> EditScript:
    """Compute the edit script turning ``a`` into ``b``.

    Common leading lines are matched first, then common trailing lines, and
    whatever remains is bisected. Inside each block of changed lines the
    removals come before the additions, so a given pair of inputs always
    yields the same script.
    """
    a = list(a)
    b = list(b)

    # A line missing from the other side can never be matched; leaving it out
    # of the search keeps mostly rewritten files cheap to compare.
    in_a, in_b = set(a), set(b)
    a_index = [i for i, line in enumerate(a) if line in in_b]
    b_index = [j for j, line in enumerate(b) if line in in_a]

    pairs: list[tuple[int, int]] = []
    _match([a[i] for i in a_index], [b[j] for j in b_index], 0, 0, pairs)

    ops: list[Op] = []
    i = j = 0
    for fi, fj in pairs:
        ai, bj = a_index[fi], b_index[fj]
        ops.extend((SegmentKind.REMOVED, line) for line in a[i:ai])
        ops.extend((SegmentKind.ADDED, line) for line in b[j:bj])
        ops.append((SegmentKind.UNCHANGED, a[ai]))
        i, j = ai + 1, bj + 1
    ops.extend((SegmentKind.REMOVED, line) for line in a[i:])
    ops.extend((SegmentKind.ADDED, line) for line in b[j:])

    return EditScript(segments=tuple(_coalesce(ops)))


def _match(
    a: list[str],
    b: list[str],
    a_offset: int,
    b_offset: int,
    pairs: list[tuple[int, int]],
) -> None:
    """Append the (index in a, index in b) pairs of a longest common subsequence"""
    n, m = len(a), len(b)

    prefix = 0
    while prefix < n and prefix < m and a[prefix] == b[prefix]:
        prefix += 1
    suffix = 0
    while suffix < n - prefix and suffix < m - prefix and a[n - 1 - suffix] == b[m - 1 - suffix]:
        suffix += 1

    pairs.extend((a_offset + k, b_offset + k) for k in range(prefix))

    # Bisection needs the first and the last lines of both halves to differ
    mid_a = a[prefix:n - suffix]
    mid_b = b[prefix:m - suffix]
    if mid_a and mid_b and not set(mid_a).isdisjoint(mid_b):
        split = _bisect(mid_a, mid_b)
        if split is not None:
            x, y = split
            _match(mid_a[:x], mid_b[:y], a_offset + prefix, b_offset + prefix, pairs)
            _match(mid_a[x:], mid_b[y:], a_offset + prefix + x, b_offset + prefix + y, pairs)

    pairs.extend((a_offset + n - suffix + k, b_offset + m - suffix + k) for k in range(suffix))


def _bisect(a: list[str], b: list[str]) -> tuple[int, int] | None:
    """Find the point where the forward and reverse searches overlap.

    Both frontiers are flat lists indexed by ``offset + k`` for diagonal
    ``k = x - y``; the reverse search counts x and y from the end of the
    sequences. Diagonals whose paths ran off the edit graph are dropped from
    the scan. Returns None when the sequences share no line.
    """
    n, m = len(a), len(b)
    max_d = (n + m + 1) // 2
    offset = max_d
    size = 2 * max_d + 2
    forward = [-1] * size
    reverse = [-1] * size
    forward[offset + 1] = 0
    reverse[offset + 1] = 0

    delta = n - m
    # With an odd delta the paths can only meet while extending forward
    front = delta % 2 != 0

    k1_start = k1_end = k2_start = k2_end = 0
    for d in range(max_d):
        for k1 in range(-d + k1_start, d + 1 - k1_end, 2):
            k1_offset = offset + k1
            if k1 == -d or (k1 != d and forward[k1_offset - 1] < forward[k1_offset + 1]):
                x1 = forward[k1_offset + 1]  # step down: insertion from b
            else:
                x1 = forward[k1_offset - 1] + 1  # step right: deletion from a
            y1 = x1 - k1
            while x1 < n and y1 < m and a[x1] == b[y1]:
                x1 += 1
                y1 += 1
            forward[k1_offset] = x1

            if x1 > n:
                k1_end += 2  # ran off the right edge
            elif y1 > m:
                k1_start += 2  # ran off the bottom edge
            elif front:
                k2_offset = offset + delta - k1
                if 0 <= k2_offset < size and reverse[k2_offset] != -1:
                    if x1 >= n - reverse[k2_offset]:
                        return x1, y1

        for k2 in range(-d + k2_start, d + 1 - k2_end, 2):
            k2_offset = offset + k2
            if k2 == -d or (k2 != d and reverse[k2_offset - 1] < reverse[k2_offset + 1]):
                x2 = reverse[k2_offset + 1]
            else:
                x2 = reverse[k2_offset - 1] + 1
            y2 = x2 - k2
            while x2 < n and y2 < m and a[n - x2 - 1] == b[m - y2 - 1]:
                x2 += 1
                y2 += 1
            reverse[k2_offset] = x2

            if x2 > n:
                k2_end += 2
            elif y2 > m:
                k2_start += 2
            elif not front:
                k1_offset = offset + delta - k2
                if 0 <= k1_offset < size and forward[k1_offset] != -1:
                    x1 = forward[k1_offset]
                    y1 = x1 - (delta - k2)
                    if x1 >= n - x2:
                        return x1, y1

    return None


def _coalesce(ops: list[Op]) -> list[DiffSegment]:
    return [
        DiffSegment(kind=kind, lines=tuple(line for _, line in group))
        for kind, group in groupby(ops, key=lambda op: op[0])
    ]
