"""Dispatcher handing work to the GLib main loop."""

from typing import Any, Callable

from gi.repository import GLib


class GLibDispatcher:
    """Runs callbacks from the GLib main loop via ``GLib.idle_add``.

    Idle sources of equal priority run in the order they were added, which
    keeps each channel FIFO.
    """

    def __init__(self, priority: int = GLib.PRIORITY_DEFAULT_IDLE):
        self.priority = priority

    def dispatch(self, callback: Callable[..., Any], *args: Any) -> None:
        def run_once():
            callback(*args)
            return False  # Don't repeat

        GLib.idle_add(run_once, priority=self.priority)
