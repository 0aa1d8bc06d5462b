"""Turn a list snapshot into a host-neutral visual tree.

The tree only says *what* to draw: one item per element, which item is
selected, which item must stay visible, and which style names apply. Hosts
(see ``list_engine.adapters.textual``) turn it into real widgets.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Optional, Tuple, TypeVar

from list_engine.selection import ListState

E = TypeVar("E")
W = TypeVar("W")

ATTR_SEPARATOR = "."


def attr_name(*parts: str) -> str:
    """Join style name parts into one hierarchical attribute name."""

    return ATTR_SEPARATOR.join(part for part in parts if part)


LIST_ATTR = attr_name("list")
LIST_SELECTED_ATTR = attr_name(LIST_ATTR, "selected")


@dataclass(frozen=True, slots=True)
class ListItem(Generic[W]):
    index: int
    content: W
    selected: bool = False
    visible: bool = False
    attr: Optional[str] = None


@dataclass(frozen=True, slots=True)
class ListView(Generic[W]):
    """Vertical scroll region ``name`` holding one item per element."""

    name: str
    items: Tuple[ListItem[W], ...]
    attr: str = LIST_ATTR

    @property
    def visible_item(self) -> Optional[ListItem[W]]:
        for item in self.items:
            if item.visible:
                return item
        return None


def render(state: ListState[E], draw_element: Callable[[bool, E], W]) -> ListView[W]:
    items = []
    for index, element in enumerate(state.elements):
        is_selected = index == state.selected
        items.append(
            ListItem(
                index=index,
                content=draw_element(is_selected, element),
                selected=is_selected,
                visible=is_selected,
                attr=LIST_SELECTED_ATTR if is_selected else None,
            )
        )
    return ListView(name=state.name, items=tuple(items))


__all__ = [
    "LIST_ATTR",
    "LIST_SELECTED_ATTR",
    "ListItem",
    "ListView",
    "attr_name",
    "render",
]
