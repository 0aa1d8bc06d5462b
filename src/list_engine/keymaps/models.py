"""Key events and the actions they trigger on a list."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from list_engine.selection import ListState


@dataclass(frozen=True, slots=True)
class KeyInput:
    """Normalized key event handed over by the host event loop."""

    key: str
    modifiers: Tuple[str, ...] = ()
    text: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("key cannot be empty")
        values = tuple(m.strip().upper() for m in self.modifiers if m.strip())
        object.__setattr__(self, "modifiers", tuple(sorted(dict.fromkeys(values))))

    @property
    def token(self) -> str:
        if self.modifiers:
            modifier = "+".join(self.modifiers)
            return f"{modifier}+{self.key}"
        return self.key


@dataclass(frozen=True, slots=True)
class ListAction:
    """Named list transformation bound to a key."""

    id: str
    handler: Callable[[ListState], ListState]
    description: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("ListAction id cannot be empty")
        if not callable(self.handler):
            raise TypeError("handler must be callable")

    def __call__(self, state: ListState) -> ListState:
        return self.handler(state)


__all__ = ["KeyInput", "ListAction"]
