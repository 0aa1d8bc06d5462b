"""Validation helpers shared across list operations."""

from __future__ import annotations

from typing import Optional


class ListStateError(RuntimeError):
    """Raised when a list snapshot is built with an inconsistent selection."""

    def __init__(
        self, message: str, *, selected: Optional[int] = None, length: int = 0
    ) -> None:
        super().__init__(message)
        self.selected = selected
        self.length = length


def clamp(low: int, high: int, value: int) -> int:
    return max(low, min(high, value))


def ensure_selection(length: int, selected: Optional[int]) -> Optional[int]:
    if length == 0:
        if selected is not None:
            raise ListStateError(
                "Empty list cannot have a selection", selected=selected, length=length
            )
        return None
    if selected is None:
        raise ListStateError(
            "Non-empty list requires a selection", selected=selected, length=length
        )
    if selected < 0 or selected >= length:
        raise ListStateError(
            "Selection out of range", selected=selected, length=length
        )
    return selected
