"""A minimal multicast event with numbered listeners."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

ListenerID = int


class Event:
    """Holds callbacks and calls each of them when the event is invoked."""

    def __init__(self) -> None:
        self._callbacks: dict[ListenerID, Callable[..., Any]] = {}
        self._next_id: ListenerID = 0

    def add_listener(self, callback: Callable[..., Any]) -> ListenerID:
        """Register ``callback`` and return the identifier it was given."""
        listener_id = self._next_id
        self._next_id += 1
        self._callbacks[listener_id] = callback
        return listener_id

    def remove_listener(self, listener_id: ListenerID) -> bool:
        """Remove a listener; return whether one was registered under that id."""
        return self._callbacks.pop(listener_id, None) is not None

    def remove_all_listeners(self) -> None:
        """Forget every registered listener."""
        self._callbacks.clear()

    def invoke(self, *args: Any) -> None:
        """Call every listener with ``args``."""
        for callback in list(self._callbacks.values()):
            callback(*args)

    def __len__(self) -> int:
        return len(self._callbacks)