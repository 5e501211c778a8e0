"""Protocol definitions for dependency injection."""

from typing import Any, Awaitable, Callable, Hashable, Protocol, Sequence, Union

ScrollListener = Callable[[int], None]


class ListViewPort(Protocol):
    def notify_inserted(self, index: int) -> None: ...

    def notify_range_inserted(self, start: int, count: int) -> None: ...

    def notify_changed(self, index: int) -> None: ...

    def notify_removed(self, index: int) -> None: ...

    def notify_reset(self) -> None: ...

    def add_scroll_listener(self, listener: ScrollListener) -> Hashable: ...

    def remove_scroll_listener(self, handle: Hashable) -> None: ...


class ScrollSourcePort(Protocol):
    def add_scroll_listener(self, listener: ScrollListener) -> Hashable: ...

    def remove_scroll_listener(self, handle: Hashable) -> None: ...


class PlaceholderPort(Protocol):
    def show_placeholder(self) -> None: ...

    def hide_placeholder(self) -> None: ...


class PageSource(Protocol):
    def fetch_page(
        self, position: int, page_size: int
    ) -> Union[Sequence[Any], Awaitable[Sequence[Any]]]: ...


class DispatcherPort(Protocol):
    def dispatch(self, callback: Callable[..., Any], *args: Any) -> None: ...
