"""List snapshots, edit scripts and selection-preserving operations."""

from .diff import (
    DELETION,
    INSERTION,
    UNCHANGED,
    EditScript,
    Hunk,
    apply_edit_script,
    compute_edit_script,
)
from .operations import (
    insert,
    move_by,
    move_down,
    move_to,
    move_up,
    remove,
    replace,
    selected_element,
)
from .remap import remap_index
from .state import ListState, list_state
from .sync import ListMirror, ListSync, mirror
from .validation import ListStateError, clamp, ensure_selection

__all__ = [
    "DELETION",
    "INSERTION",
    "UNCHANGED",
    "EditScript",
    "Hunk",
    "ListMirror",
    "ListState",
    "ListStateError",
    "ListSync",
    "apply_edit_script",
    "clamp",
    "compute_edit_script",
    "ensure_selection",
    "insert",
    "list_state",
    "mirror",
    "move_by",
    "move_down",
    "move_to",
    "move_up",
    "remap_index",
    "remove",
    "replace",
    "selected_element",
]
