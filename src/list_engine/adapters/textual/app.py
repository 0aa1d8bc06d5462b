"""Executable Textual app that hosts a selectable list."""

from __future__ import annotations

import argparse
import os
import random
from pathlib import Path
from typing import List, Optional, Sequence

try:
    from textual import events
    from textual.app import App, ComposeResult
    from textual.widgets import Footer, Header, Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use list_engine.adapters.textual.app"
    ) from exc

from list_engine.render import ListView
from list_engine.selection import ListMirror, ListState, list_state

from .controller import TextualListAdapter, TextualUIHooks
from .widgets import ListScroll, build_item_widgets, build_list_widget, draw_text

# Textual key names the list understands, translated to engine key names.
_NAMED_KEYS = {"up": "UP", "down": "DOWN"}


class ListEngineApp(App[None]):
    """Minimal Textual UI around one list."""

    CSS = """
	Screen {
		layout: vertical;
	}

	ListScroll {
		border: round $accent;
		padding: 0 1;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("a", "insert_item", "Insert"),
        ("d", "remove_item", "Remove"),
        ("s", "shuffle", "Shuffle"),
        ("r", "reverse", "Reverse"),
        ("ctrl+c", "quit", "Quit"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, state: ListState[str], *, seed: int | None = None) -> None:
        super().__init__()
        self._initial_state = state
        self._random = random.Random(seed)
        self._inserted = 0
        self.adapter: TextualListAdapter[str] | None = None
        self._list_widget: ListScroll | None = None
        self._status_widget: Static | None = None

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        # Items are mounted by the adapter once it pushes its first snapshot.
        self._list_widget = build_list_widget(
            ListView(name=self._initial_state.name, items=())
        )
        yield self._list_widget
        self._status_widget = Static("", id="status-line")
        yield self._status_widget
        yield Footer()

    def on_mount(self) -> None:
        hooks = TextualUIHooks(
            update_list=self._update_list,
            update_status=self._update_status,
        )
        self.adapter = TextualListAdapter(
            self._initial_state, hooks, draw_element=draw_text
        )

    def on_key(self, event: events.Key) -> None:
        if not self.adapter:
            return
        key = _NAMED_KEYS.get(event.key)
        if key is None:
            return
        if self.adapter.handle_textual_key(key):
            event.stop()

    def action_insert_item(self) -> None:
        if not self.adapter:
            return
        self._inserted += 1
        selected = self.adapter.state.selected
        pos = 0 if selected is None else selected + 1
        self.adapter.insert_element(pos, f"New item {self._inserted}")

    def action_remove_item(self) -> None:
        if self.adapter:
            self.adapter.remove_selected()

    def action_shuffle(self) -> None:
        if not self.adapter:
            return
        elements = list(self.adapter.state.elements)
        self._random.shuffle(elements)
        self.adapter.replace_elements(elements)

    def action_reverse(self) -> None:
        if self.adapter:
            self.adapter.replace_elements(reversed(self.adapter.state.elements))

    def _update_list(self, mirror: ListMirror, view: ListView) -> None:
        if self._list_widget is not None:
            self._list_widget.border_title = f"{mirror.name} ({len(mirror.lines)})"
        self.call_later(self._rebuild_list, view)

    async def _rebuild_list(self, view: ListView) -> None:
        if self._list_widget is None:
            return
        container = self._list_widget
        await container.remove_children()
        widgets = build_item_widgets(view)
        await container.mount_all(widgets)
        item = view.visible_item
        if item is not None:
            container.call_after_refresh(item.content.scroll_visible, animate=False)

    def _update_status(self, status: str) -> None:
        if self._status_widget:
            self._status_widget.update(status)


def _env_int(key: str, fallback: int) -> int:
    value = os.environ.get(key)
    if value is None:
        return fallback
    try:
        return int(value)
    except ValueError:
        return fallback


def _load_elements(args: argparse.Namespace) -> List[str]:
    if args.file:
        text = Path(args.file).read_text(encoding="utf-8")
        return [line for line in text.splitlines() if line.strip()]
    return [f"Item {n}" for n in range(1, args.items + 1)]


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the list engine Textual demo.")
    parser.add_argument(
        "--name",
        default=os.environ.get("LIST_ENGINE_DEMO_NAME", "demo"),
        help="Name of the list scroll region (default: demo)",
    )
    parser.add_argument(
        "--items",
        type=int,
        default=_env_int("LIST_ENGINE_DEMO_ITEMS", 30),
        help="Number of generated items when no file is given (default: 30)",
    )
    parser.add_argument(
        "--file",
        default=None,
        help="Read list elements from a file, one per non-empty line",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the shuffle action",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    state = list_state(args.name, _load_elements(args))
    app = ListEngineApp(state, seed=args.seed)
    app.run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
