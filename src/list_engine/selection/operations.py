"""Navigation and mutation verbs over ``ListState`` snapshots.

Every function is pure: it takes a snapshot and returns a new, fully valid
one (or the same object when nothing changes). Out-of-range positions are
either clamped or ignored, never reported.
"""

from __future__ import annotations

from dataclasses import replace as _with
from typing import Iterable, Optional, Tuple, TypeVar

from list_engine.runtime.telemetry import span

from .diff import compute_edit_script
from .remap import remap_index
from .state import ListState
from .validation import clamp

E = TypeVar("E")

LOGGER_NAME = "list_engine.selection"


def move_by(delta: int, state: ListState[E]) -> ListState[E]:
    if state.selected is None:
        return state
    target = clamp(0, state.length - 1, state.selected + delta)
    return _with(state, selected=target)


def move_up(state: ListState[E]) -> ListState[E]:
    """Move the selection one element towards the start."""

    return move_by(-1, state)


def move_down(state: ListState[E]) -> ListState[E]:
    """Move the selection one element towards the end."""

    return move_by(1, state)


def move_to(pos: int, state: ListState[E]) -> ListState[E]:
    """Select ``pos``, clamped into range.

    A negative ``pos`` is turned into ``length - pos``, which always exceeds
    the last index, so every negative position selects the last element.
    """

    length = state.length
    if length == 0:
        return _with(state, selected=None)
    target = length - pos if pos < 0 else pos
    return _with(state, selected=clamp(0, length - 1, target))


def insert(pos: int, element: E, state: ListState[E]) -> ListState[E]:
    """Splice ``element`` in at ``pos`` (clamped to ``0..length``).

    An insertion strictly before the selection shifts it right. An insertion
    exactly at the selection keeps the index, so the new element is selected.
    """

    with span(
        "list::insert",
        logger_name=LOGGER_NAME,
        component="list",
        metadata={"list": state.name, "pos": pos},
    ):
        elements = state.elements
        safe_pos = clamp(0, len(elements), pos)
        if state.selected is None:
            selected = 0
        elif safe_pos < state.selected:
            selected = state.selected + 1
        else:
            selected = state.selected
        updated = elements[:safe_pos] + (element,) + elements[safe_pos:]
        return ListState(name=state.name, elements=updated, selected=selected)


def remove(pos: int, state: ListState[E]) -> ListState[E]:
    """Drop the element at ``pos``; invalid positions leave ``state`` as is."""

    elements = state.elements
    if not elements or pos != clamp(0, len(elements) - 1, pos):
        return state

    with span(
        "list::remove",
        logger_name=LOGGER_NAME,
        component="list",
        metadata={"list": state.name, "pos": pos},
    ):
        current = 0 if state.selected is None else state.selected
        if pos == 0:
            selected = 0
        elif pos == current:
            selected = pos - 1
        elif pos < current:
            selected = current - 1
        else:
            selected = current
        updated = elements[:pos] + elements[pos + 1 :]
        return ListState(
            name=state.name,
            elements=updated,
            selected=selected if updated else None,
        )


def replace(new_elements: Iterable[E], state: ListState[E]) -> ListState[E]:
    """Swap in ``new_elements`` while keeping the same logical element selected.

    The old and new contents are aligned with an edit script and the current
    selection is carried across it. Identical content returns ``state``
    untouched.
    """

    updated = tuple(new_elements)
    if updated == state.elements:
        return state

    with span(
        "list::replace",
        logger_name=LOGGER_NAME,
        component="list",
        metadata={"list": state.name},
    ) as handle:
        if not updated:
            selected: Optional[int] = None
        elif not state.elements:
            selected = 0
        else:
            current = 0 if state.selected is None else state.selected
            script = compute_edit_script(state.elements, updated)
            selected = remap_index(script, current)
            handle.add_metadata("hunks", len(script))
            handle.add_metadata("from", current)
            handle.add_metadata("to", selected)
        return ListState(name=state.name, elements=updated, selected=selected)


def selected_element(state: ListState[E]) -> Optional[Tuple[int, E]]:
    if state.selected is None:
        return None
    return state.selected, state.elements[state.selected]


__all__ = [
    "insert",
    "move_by",
    "move_down",
    "move_to",
    "move_up",
    "remove",
    "replace",
    "selected_element",
]
