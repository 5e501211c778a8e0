"""Page loading state for infinite scroll."""

import asyncio
import inspect
import logging
import threading
from typing import TYPE_CHECKING, Any, Callable, List, Optional

from pagedlist.models import LoadingState

if TYPE_CHECKING:
    from pagedlist.core.protocols import PageSource, PlaceholderPort
    from pagedlist.services.channel import Channel

logger = logging.getLogger("PagedList.PageLoader")

BackgroundRunner = Callable[[Callable[[], None]], None]


def run_in_thread(work: Callable[[], None]) -> None:
    threading.Thread(target=work, daemon=True).start()


class PageLoader:
    """Fetches consecutive pages from a page source.

    The loader tracks where the next page starts and whether the source is
    exhausted. ``fetch_next_page`` runs the source off the presentation
    thread and reports through the channels of the list manager it is bound
    to: ``LOADING`` first, then either the fetched batch followed by
    ``DONE``, or ``ERROR``.
    """

    def __init__(
        self,
        source: "PageSource",
        page_size: int = 0,
        offset: int = 0,
        placeholder: Optional["PlaceholderPort"] = None,
        run_in_background: Optional[BackgroundRunner] = None,
    ):
        """Initialize PageLoader.

        Args:
            source: Object with ``fetch_page(position, page_size)``, or a
                callable with the same signature. May be a coroutine function.
            page_size: Number of items requested per page
            offset: Position of the first item requested
            placeholder: Empty-state collaborator
            run_in_background: Runs a fetch off the presentation thread.
                Defaults to a daemon thread per fetch.
        """
        _check_not_negative(offset=offset, page_size=page_size)
        self.source = source
        self._fetch_page = getattr(source, "fetch_page", source)
        self._offset = offset
        self._page_size = page_size
        self._placeholder = placeholder
        self._run_in_background = run_in_background or run_in_thread

        self._current_position = offset
        self._reached_end = False
        self._first_load = True

        self._epoch = 0
        self._in_flight_epoch: Optional[int] = None
        self._lock = threading.Lock()

        self._items_channel: Optional["Channel"] = None
        self._loading_state_channel: Optional["Channel"] = None

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def page_size(self) -> int:
        return self._page_size

    @property
    def current_position(self) -> int:
        return self._current_position

    @property
    def reached_end(self) -> bool:
        return self._reached_end

    @property
    def placeholder(self) -> Optional["PlaceholderPort"]:
        return self._placeholder

    @property
    def is_loading(self) -> bool:
        return self._in_flight_epoch == self._epoch

    @property
    def is_connected(self) -> bool:
        return self._items_channel is not None

    def configure(
        self,
        offset: Optional[int] = None,
        page_size: Optional[int] = None,
        placeholder: Optional["PlaceholderPort"] = None,
    ) -> None:
        """Update any of offset, page size and placeholder.

        Only the first call carrying an offset moves the current position;
        later ones keep an ongoing pagination where it is.
        """
        _check_not_negative(offset=offset, page_size=page_size)
        if offset is not None:
            self._offset = offset
            if self._first_load:
                self._current_position = offset
                self._first_load = False
        if page_size is not None:
            self._page_size = page_size
        if placeholder is not None:
            self._placeholder = placeholder

    def connect(self, items_channel: "Channel", loading_state_channel: "Channel") -> None:
        self._items_channel = items_channel
        self._loading_state_channel = loading_state_channel

    def disconnect(self) -> None:
        self._items_channel = None
        self._loading_state_channel = None

    def fetch_next_page(self) -> bool:
        """Start fetching the page at the current position.

        Returns:
            True if a fetch was started, False if one is already running
        """
        with self._lock:
            if self.is_loading:
                logger.debug("Fetch already in progress, ignoring request")
                return False
            epoch = self._epoch
            self._in_flight_epoch = epoch

        position, page_size = self._current_position, self._page_size
        logger.info(f"Fetching page at position {position} (page size {page_size})")
        self._emit_loading_state(LoadingState.LOADING)
        self._run_in_background(lambda: self._fetch(epoch, position, page_size))
        return True

    def _fetch(self, epoch: int, position: int, page_size: int) -> None:
        try:
            items = self._call_source(position, page_size)
        except Exception as e:
            if self._finish(epoch):
                logger.exception(f"Error fetching page at position {position}: {e}")
                self._emit_loading_state(LoadingState.ERROR)
            return

        # Position moves before the batch is seen, so a scroll reacting to it
        # requests the following page
        if not self._finish(epoch, items_loaded=len(items)):
            logger.debug(f"Dropping {len(items)} items fetched before reset")
            return
        self._emit_items(items)
        if self._epoch == epoch:
            self._emit_loading_state(LoadingState.DONE)

    def _call_source(self, position: int, page_size: int) -> List[Any]:
        result = self._fetch_page(position, page_size)
        if inspect.isawaitable(result):
            # Coroutine sources get their own loop on the worker thread
            loop = asyncio.new_event_loop()
            try:
                result = loop.run_until_complete(result)
            finally:
                loop.close()
        return list(result or [])

    def _finish(self, epoch: int, items_loaded: Optional[int] = None) -> bool:
        """Advance past the fetched items and clear the in-flight marker.

        Returns False, changing nothing, if the epoch has ended meanwhile.
        """
        with self._lock:
            if epoch != self._epoch:
                return False
            if items_loaded is not None:
                self._advance(items_loaded)
            self._in_flight_epoch = None
            return True

    def advance_position(self, items_loaded: int) -> None:
        with self._lock:
            self._advance(items_loaded)

    def _advance(self, items_loaded: int) -> None:
        if items_loaded < self._page_size:
            self._reached_end = True
        self._current_position += items_loaded

    def reset_position(self) -> None:
        with self._lock:
            self._epoch += 1
            self._current_position = self._offset
            self._reached_end = False

    def show_placeholder(self) -> None:
        if self._placeholder is not None:
            self._placeholder.show_placeholder()

    def hide_placeholder(self) -> None:
        if self._placeholder is not None:
            self._placeholder.hide_placeholder()

    def _emit_items(self, items: List[Any]) -> None:
        channel = self._items_channel
        if channel is None:
            logger.debug(f"Loader not connected, dropping {len(items)} items")
            return
        channel.emit(items)

    def _emit_loading_state(self, state: LoadingState) -> None:
        channel = self._loading_state_channel
        if channel is None:
            logger.debug(f"Loader not connected, dropping state {state.name}")
            return
        channel.emit(state)


def _check_not_negative(**values: Optional[int]) -> None:
    for name, value in values.items():
        if value is not None and value < 0:
            raise ValueError(f"{name} must not be negative, got {value}")
