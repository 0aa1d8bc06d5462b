"""UI-agnostic selectable list engine for terminal interfaces."""

__all__ = [
    "adapters",
    "keymaps",
    "render",
    "runtime",
    "selection",
]

__version__ = "0.1.0"
