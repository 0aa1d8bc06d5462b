"""Carry a selected index across an edit script."""

from __future__ import annotations

from typing import Sequence

from .diff import DELETION, INSERTION, Hunk
from .validation import clamp


def remap_index(script: Sequence[Hunk], index: int) -> int:
    """Return where the element at ``index`` of the source lives in the target.

    The walk stops once the source cursor has passed ``index``. Deleted source
    elements ahead of the tracked one pull it left; inserted elements met while
    the cursor is at or before it push it right. When the tracked element was
    itself deleted, the result lands on whatever now follows the gap, clamped
    to the last target element.
    """

    cursor = 0
    tracked = index
    for hunk in script:
        for _ in hunk.elements:
            if cursor > index:
                return _bounded(script, tracked)
            if hunk.kind == INSERTION:
                tracked += 1
            elif hunk.kind == DELETION:
                if cursor < index:
                    tracked -= 1
                cursor += 1
            else:
                if cursor == index:
                    return _bounded(script, tracked)
                cursor += 1
    return _bounded(script, tracked)


def _bounded(script: Sequence[Hunk], tracked: int) -> int:
    target_length = sum(hunk.target_length for hunk in script)
    return clamp(0, max(target_length - 1, 0), tracked)


__all__ = ["remap_index"]
