"""The two key behaviours a list handles on its own: up and down."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional, TypeVar

from list_engine.selection import ListState, move_down, move_up

from .models import KeyInput, ListAction

E = TypeVar("E")

MOVE_UP = ListAction(
    id="list.move_up",
    handler=move_up,
    description="Move the selection up",
)
MOVE_DOWN = ListAction(
    id="list.move_down",
    handler=move_down,
    description="Move the selection down",
)

DEFAULT_KEYMAP: Mapping[str, ListAction] = MappingProxyType(
    {
        "UP": MOVE_UP,
        "DOWN": MOVE_DOWN,
    }
)


def resolve_key(
    key: KeyInput, keymap: Mapping[str, ListAction] = DEFAULT_KEYMAP
) -> Optional[ListAction]:
    return keymap.get(key.token)


def is_handled(key: KeyInput, keymap: Mapping[str, ListAction] = DEFAULT_KEYMAP) -> bool:
    """Whether the list consumes ``key``; everything else belongs to the host."""

    return resolve_key(key, keymap) is not None


def handle_key(
    key: KeyInput,
    state: ListState[E],
    keymap: Mapping[str, ListAction] = DEFAULT_KEYMAP,
) -> ListState[E]:
    action = resolve_key(key, keymap)
    if action is None:
        return state
    return action(state)


__all__ = [
    "DEFAULT_KEYMAP",
    "MOVE_DOWN",
    "MOVE_UP",
    "handle_key",
    "is_handled",
    "resolve_key",
]
