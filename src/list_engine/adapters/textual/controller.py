"""Adapter that owns the current list snapshot and reports changes to UI hooks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, Iterable, Mapping, Optional, TypeVar

from list_engine.keymaps import DEFAULT_KEYMAP, KeyInput, ListAction, resolve_key
from list_engine.render import ListView, render
from list_engine.runtime import telemetry
from list_engine.selection import (
    ListMirror,
    ListState,
    insert,
    mirror,
    remove,
    replace,
    selected_element,
)

E = TypeVar("E")


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


def _draw_plain(is_selected: bool, element: object) -> str:
    del is_selected
    return str(element)


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_list: Callable[[ListMirror, ListView[Any]], None]
    update_status: Callable[[str], None] = _noop
    # Optional realtime log callback a host may use to surface debug lines
    log: Callable[[str], None] = _noop


class TextualListAdapter(Generic[E]):
    """Single writer for a list: applies keys and mutations, then refreshes."""

    def __init__(
        self,
        state: ListState[E],
        hooks: TextualUIHooks,
        *,
        draw_element: Callable[[bool, E], Any] = _draw_plain,
        format_element: Callable[[E], str] = str,
        keymap: Mapping[str, ListAction] | None = None,
    ) -> None:
        self._state = state
        self.hooks = hooks
        self.draw_element = draw_element
        self.format_element = format_element
        self.keymap = DEFAULT_KEYMAP if keymap is None else keymap
        self.logger = telemetry.get_logger("list_engine.adapters.textual")
        self._refresh_list()

    @property
    def state(self) -> ListState[E]:
        return self._state

    def handle_textual_key(
        self,
        key: str,
        *,
        text: Optional[str] = None,
        modifiers: Iterable[str] = (),
    ) -> bool:
        """Apply the list's own behaviour for ``key``.

        Returns ``False`` when the list does not handle the key, so the host
        can route it elsewhere.
        """

        key_input = KeyInput(key=key, text=text, modifiers=tuple(modifiers))
        self._log_state("key ->", key=key_input.token, text=text)
        action = resolve_key(key_input, self.keymap)
        if action is None:
            return False
        self._apply(action(self._state), action.id)
        return True

    def insert_element(self, pos: int, element: E) -> ListState[E]:
        return self._apply(insert(pos, element, self._state), "insert")

    def remove_at(self, pos: int) -> ListState[E]:
        return self._apply(remove(pos, self._state), "remove")

    def remove_selected(self) -> ListState[E]:
        if self._state.selected is None:
            return self._state
        return self.remove_at(self._state.selected)

    def replace_elements(self, elements: Iterable[E]) -> ListState[E]:
        return self._apply(replace(elements, self._state), "replace")

    def view(self) -> ListView[Any]:
        return render(self._state, self.draw_element)

    def pull_list(self) -> ListMirror:
        return mirror(self._state, format_element=self.format_element)

    def push_host_replace(self, elements: Iterable[E]) -> ListMirror:
        self.replace_elements(elements)
        return self.pull_list()

    def _apply(self, new_state: ListState[E], label: str) -> ListState[E]:
        if new_state is self._state or new_state == self._state:
            self._log_state("unchanged <-", action=label)
            return self._state
        self._state = new_state
        self._log_state("state <-", action=label)
        telemetry.record_event(
            "list.update",
            level="debug",
            data={
                "list": new_state.name,
                "action": label,
                "length": new_state.length,
                "selected": new_state.selected,
            },
        )
        self.hooks.update_status(self._status_text(label))
        self._refresh_list()
        return new_state

    def _status_text(self, label: str) -> str:
        current = selected_element(self._state)
        if current is None:
            return f"{label}: empty"
        index, element = current
        return f"{label}: {index + 1}/{self._state.length} {self.format_element(element)}"

    def _refresh_list(self) -> None:
        self.hooks.update_list(self.pull_list(), self.view())

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot: Dict[str, object] = {
            "list": self._state.name,
            "length": self._state.length,
            "selected": self._state.selected,
        }
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        line = " ".join([prefix, *(f"{key}={value!r}" for key, value in snapshot.items())])
        self.logger.debug(line)
        self.hooks.log(line)


__all__ = ["TextualListAdapter", "TextualUIHooks"]
