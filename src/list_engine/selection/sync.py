"""Adapter boundary types for syncing list snapshots with host widgets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Protocol, Tuple

from .state import E, ListState


@dataclass(slots=True)
class ListMirror:
    """Host-friendly snapshot describing what a list currently shows."""

    name: str
    lines: Tuple[str, ...]
    selected: Optional[int]

    @property
    def selected_line(self) -> Optional[str]:
        if self.selected is None:
            return None
        return self.lines[self.selected]


def mirror(
    state: ListState[E],
    *,
    format_element: Callable[[E], str] = str,
) -> ListMirror:
    return ListMirror(
        name=state.name,
        lines=tuple(format_element(element) for element in state.elements),
        selected=state.selected,
    )


class ListSync(Protocol):
    """Protocol describing how adapters exchange data with the list layer."""

    def pull_list(self) -> ListMirror:
        """Return the latest snapshot that the host should render."""
        ...

    def push_host_replace(self, elements: Iterable[object]) -> ListMirror:
        """Replace the contents from the host side (e.g. a refreshed data feed)."""
        ...
