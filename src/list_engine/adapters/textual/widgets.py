"""Textual widgets built from a rendered ``ListView``."""

from __future__ import annotations

import re
from typing import Iterable, List

try:
    from textual.containers import VerticalScroll
    from textual.content import Content
    from textual.widget import Widget
    from textual.widgets import Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use list_engine.adapters.textual"
    ) from exc

from list_engine.render import ATTR_SEPARATOR, ListView

_UNSAFE_ID_CHARS = re.compile(r"[^A-Za-z0-9_-]+")


def css_class(attr: str) -> str:
    """Map a dotted attribute name (``list.selected``) to a CSS class."""

    return attr.replace(ATTR_SEPARATOR, "--")


def scroll_region_id(name: str) -> str:
    cleaned = _UNSAFE_ID_CHARS.sub("-", name).strip("-")
    return f"list-{cleaned or 'default'}"


def item_content(is_selected: bool, element: object) -> Content:
    """Plain item text; brackets in elements are never read as markup."""

    marker = "> " if is_selected else "  "
    return Content(f"{marker}{element}")


def draw_text(is_selected: bool, element: object) -> Static:
    return Static(item_content(is_selected, element), markup=False)


class ListScroll(VerticalScroll, can_focus=False):
    """Scroll region for a list; up/down belong to the list, not the scroller."""

    DEFAULT_CSS = """
    ListScroll {
        height: 1fr;
    }

    ListScroll > .list--selected {
        background: $accent;
        color: $text;
    }
    """


def build_item_widgets(view: ListView[Widget]) -> List[Widget]:
    widgets: List[Widget] = []
    for item in view.items:
        widget = item.content
        if item.attr:
            widget.add_class(css_class(item.attr))
        widgets.append(widget)
    return widgets


def visible_widget(view: ListView[Widget]) -> Widget | None:
    item = view.visible_item
    return item.content if item is not None else None


def build_list_widget(
    view: ListView[Widget], *, extra_classes: Iterable[str] = ()
) -> ListScroll:
    classes = " ".join((css_class(view.attr), *extra_classes))
    return ListScroll(
        *build_item_widgets(view),
        id=scroll_region_id(view.name),
        classes=classes,
    )


__all__ = [
    "ListScroll",
    "build_item_widgets",
    "build_list_widget",
    "css_class",
    "draw_text",
    "item_content",
    "scroll_region_id",
    "visible_widget",
]
