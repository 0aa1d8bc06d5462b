"""Default key handling for lists."""

from .models import KeyInput, ListAction
from .defaults import (
    DEFAULT_KEYMAP,
    MOVE_DOWN,
    MOVE_UP,
    handle_key,
    is_handled,
    resolve_key,
)

__all__ = [
    "KeyInput",
    "ListAction",
    "DEFAULT_KEYMAP",
    "MOVE_UP",
    "MOVE_DOWN",
    "handle_key",
    "is_handled",
    "resolve_key",
]
