"""Edit scripts between two element sequences.

The script is a longest-common-subsequence alignment expressed as hunks. Only
``==`` is used on elements, so unhashable values are fine. Common prefix and
suffix are trimmed first. The remaining middle is split Hirschberg style until
the pieces are small enough for a full dynamic programming table, so memory
stays linear while time is quadratic in the size of the changed region only.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Literal, Sequence, Tuple, TypeVar

E = TypeVar("E")

HunkKind = Literal["unchanged", "deletion", "insertion"]

UNCHANGED: HunkKind = "unchanged"
DELETION: HunkKind = "deletion"
INSERTION: HunkKind = "insertion"


@dataclass(frozen=True, slots=True)
class Hunk:
    """A run of elements sharing one edit kind."""

    kind: HunkKind
    elements: Tuple[object, ...]

    @property
    def source_length(self) -> int:
        return 0 if self.kind == INSERTION else len(self.elements)

    @property
    def target_length(self) -> int:
        return 0 if self.kind == DELETION else len(self.elements)


EditScript = List[Hunk]


def compute_edit_script(source: Iterable[E], target: Iterable[E]) -> EditScript:
    """Return hunks turning ``source`` into ``target``.

    Within a changed region deletions come before insertions, and adjacent
    hunks of the same kind are merged.
    """

    src = tuple(source)
    tgt = tuple(target)
    prefix = _matching_prefix_length(src, tgt)
    suffix = _matching_suffix_length(src[prefix:], tgt[prefix:])

    steps: list[tuple[HunkKind, object]] = [(UNCHANGED, e) for e in src[:prefix]]
    steps.extend(
        _align(src[prefix : len(src) - suffix], tgt[prefix : len(tgt) - suffix])
    )
    steps.extend((UNCHANGED, e) for e in src[len(src) - suffix :])
    return _group(steps)


def apply_edit_script(script: Sequence[Hunk]) -> Tuple[tuple, tuple]:
    """Rebuild the ``(source, target)`` pair described by ``script``."""

    source: list[object] = []
    target: list[object] = []
    for hunk in script:
        if hunk.kind != INSERTION:
            source.extend(hunk.elements)
        if hunk.kind != DELETION:
            target.extend(hunk.elements)
    return tuple(source), tuple(target)


def _matching_prefix_length(left: Sequence[E], right: Sequence[E]) -> int:
    limit = min(len(left), len(right))
    index = 0
    while index < limit and left[index] == right[index]:
        index += 1
    return index


def _matching_suffix_length(left: Sequence[E], right: Sequence[E]) -> int:
    limit = min(len(left), len(right))
    count = 0
    while count < limit and left[-1 - count] == right[-1 - count]:
        count += 1
    return count


# Below this many table cells the full table is cheap enough to build.
_TABLE_CELLS = 4096


def _align(
    source: Sequence[E], target: Sequence[E]
) -> Iterator[tuple[HunkKind, object]]:
    """Hirschberg split: linear memory, quadratic time over the middle."""

    n, m = len(source), len(target)
    if not n or not m:
        yield from ((DELETION, e) for e in source)
        yield from ((INSERTION, e) for e in target)
        return
    if n == 1 or n * m <= _TABLE_CELLS:
        yield from _align_table(source, target)
        return

    mid = n // 2
    forward = _lcs_row(source[:mid], target)
    backward = _lcs_row(source[mid:][::-1], target[::-1])
    split = max(range(m + 1), key=lambda j: forward[j] + backward[m - j])
    yield from _align(source[:mid], target[:split])
    yield from _align(source[mid:], target[split:])


def _lcs_row(source: Sequence[E], target: Sequence[E]) -> list[int]:
    # row[j] is the LCS length of source and target[:j]
    row = [0] * (len(target) + 1)
    for item in source:
        diagonal = 0
        for j, other in enumerate(target, 1):
            above = row[j]
            if item == other:
                row[j] = diagonal + 1
            elif row[j - 1] > above:
                row[j] = row[j - 1]
            diagonal = above
    return row


def _align_table(
    source: Sequence[E], target: Sequence[E]
) -> Iterator[tuple[HunkKind, object]]:
    n, m = len(source), len(target)

    # table[i][j] holds the LCS length of source[i:] and target[j:]
    table = [[0] * (m + 1) for _ in range(n + 1)]
    for i in range(n - 1, -1, -1):
        row, below = table[i], table[i + 1]
        item = source[i]
        for j in range(m - 1, -1, -1):
            if item == target[j]:
                row[j] = below[j + 1] + 1
            else:
                row[j] = max(below[j], row[j + 1])

    i = j = 0
    while i < n and j < m:
        if source[i] == target[j]:
            yield UNCHANGED, source[i]
            i += 1
            j += 1
        elif table[i + 1][j] >= table[i][j + 1]:
            yield DELETION, source[i]
            i += 1
        else:
            yield INSERTION, target[j]
            j += 1
    yield from ((DELETION, e) for e in source[i:])
    yield from ((INSERTION, e) for e in target[j:])


def _group(steps: Iterable[tuple[HunkKind, object]]) -> EditScript:
    # Each changed region is emitted deletions first, whatever order the
    # alignment produced its steps in.
    hunks: EditScript = []
    runs: dict[HunkKind, list[object]] = {UNCHANGED: [], DELETION: [], INSERTION: []}
    for kind, element in steps:
        if kind == UNCHANGED:
            _flush(hunks, runs, DELETION, INSERTION)
        else:
            _flush(hunks, runs, UNCHANGED)
        runs[kind].append(element)
    _flush(hunks, runs, UNCHANGED, DELETION, INSERTION)
    return hunks


def _flush(
    hunks: EditScript, runs: dict[HunkKind, list[object]], *kinds: HunkKind
) -> None:
    for kind in kinds:
        if runs[kind]:
            hunks.append(Hunk(kind=kind, elements=tuple(runs[kind])))
            runs[kind] = []


__all__ = [
    "DELETION",
    "EditScript",
    "Hunk",
    "HunkKind",
    "INSERTION",
    "UNCHANGED",
    "apply_edit_script",
    "compute_edit_script",
]
