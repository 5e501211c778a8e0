"""Pytest configuration and shared fixtures."""

import threading
import time
from pathlib import Path

import pytest


class QueuedDispatcher:
    """Collects dispatched callbacks until the test drains them."""

    def __init__(self):
        self.pending = []
        self._condition = threading.Condition()

    def dispatch(self, callback, *args):
        with self._condition:
            self.pending.append((callback, args))
            self._condition.notify_all()

    def drain(self, channel=None):
        """Run pending callbacks in order, optionally only those of one channel."""
        ran = 0
        while True:
            with self._condition:
                index = next(
                    (
                        i
                        for i, (callback, _) in enumerate(self.pending)
                        if channel is None or getattr(callback, "__self__", None) is channel
                    ),
                    None,
                )
                if index is None:
                    return ran
                callback, args = self.pending.pop(index)
            callback(*args)
            ran += 1

    def wait_for_pending(self, count, timeout=2.0):
        deadline = time.monotonic() + timeout
        with self._condition:
            while len(self.pending) < count:
                remaining = deadline - time.monotonic()
                if remaining <= 0:
                    return False
                self._condition.wait(remaining)
        return True


class RecordingView:
    def __init__(self):
        self.events = []
        self.listeners = {}
        self._next_handle = 0

    def notify_inserted(self, index):
        self.events.append(("inserted", index))

    def notify_range_inserted(self, start, count):
        self.events.append(("range_inserted", start, count))

    def notify_changed(self, index):
        self.events.append(("changed", index))

    def notify_removed(self, index):
        self.events.append(("removed", index))

    def notify_reset(self):
        self.events.append(("reset",))

    def add_scroll_listener(self, listener):
        self._next_handle += 1
        self.listeners[self._next_handle] = listener
        return self._next_handle

    def remove_scroll_listener(self, handle):
        del self.listeners[handle]

    def scroll_to(self, last_visible_index):
        for listener in list(self.listeners.values()):
            listener(last_visible_index)


class RecordingPlaceholder:
    def __init__(self):
        self.calls = []

    def show_placeholder(self):
        self.calls.append("show")

    def hide_placeholder(self):
        self.calls.append("hide")


class ScriptedSource:
    """Page source answering each call with the next scripted page.

    A scripted exception instance is raised instead of returned.
    """

    def __init__(self, *pages):
        self.pages = list(pages)
        self.calls = []

    def fetch_page(self, position, page_size):
        self.calls.append((position, page_size))
        page = self.pages.pop(0) if self.pages else []
        if isinstance(page, Exception):
            raise page
        return page


class DeferredRunner:
    """Background runner that holds work until the test runs it."""

    def __init__(self):
        self.pending = []

    def __call__(self, work):
        self.pending.append(work)

    def run_next(self):
        self.pending.pop(0)()


def run_inline(work):
    work()


def make_items(start, stop):
    return [{"id": i, "content": f"item {i}"} for i in range(start, stop)]


@pytest.fixture
def dispatcher() -> QueuedDispatcher:
    return QueuedDispatcher()


@pytest.fixture
def view() -> RecordingView:
    return RecordingView()


@pytest.fixture
def placeholder() -> RecordingPlaceholder:
    return RecordingPlaceholder()


@pytest.fixture
def deferred_runner() -> DeferredRunner:
    return DeferredRunner()


@pytest.fixture
def inline_runner():
    return run_inline


@pytest.fixture
def scripted_source():
    return ScriptedSource


@pytest.fixture
def items():
    return make_items


@pytest.fixture
def temp_config_path(tmp_path: Path) -> Path:
    return tmp_path / "pagedlist.yml"
