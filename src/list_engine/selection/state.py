"""Immutable list snapshot: elements, selection and scroll-region name."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterable, Optional, Tuple, TypeVar

from .validation import ensure_selection

E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class ListState(Generic[E]):
    """One fully valid snapshot of a selectable list.

    Operations never mutate a snapshot; they return a new one. ``elements``
    accepts any iterable and is stored as a tuple.
    """

    name: str
    elements: Tuple[E, ...] = ()
    selected: Optional[int] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "elements", tuple(self.elements))
        ensure_selection(len(self.elements), self.selected)

    @property
    def length(self) -> int:
        return len(self.elements)

    @property
    def is_empty(self) -> bool:
        return not self.elements


def list_state(name: str, elements: Iterable[E] = ()) -> ListState[E]:
    """Build a list with the first element selected (or nothing, if empty)."""

    items = tuple(elements)
    return ListState(name=name, elements=items, selected=0 if items else None)
