"""Textual host adapter: controller hooks and widget builders."""

from .controller import TextualListAdapter, TextualUIHooks
from .widgets import (
    ListScroll,
    build_item_widgets,
    build_list_widget,
    css_class,
    draw_text,
    item_content,
    scroll_region_id,
    visible_widget,
)

__all__ = [
    "ListScroll",
    "TextualListAdapter",
    "TextualUIHooks",
    "build_item_widgets",
    "build_list_widget",
    "css_class",
    "draw_text",
    "item_content",
    "scroll_region_id",
    "visible_widget",
]
