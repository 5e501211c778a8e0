"""Manages the entries of an infinitely scrolling list."""

import logging
from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    Hashable,
    Iterable,
    Iterator,
    List,
    Optional,
    Set,
    Tuple,
)

from pagedlist.models import FooterEntry, ItemEntry, ListEntry, LoadingState
from pagedlist.services.channel import Channel, SubscriptionGroup

if TYPE_CHECKING:
    from pagedlist.core.protocols import DispatcherPort, ListViewPort

    from .page_loader import PageLoader

logger = logging.getLogger("PagedList.PaginatedListManager")


class PaginatedListManager:
    """Owns the list entries, the trailing footer and the loading state.

    Items and loading states produced by the page loader arrive through two
    channels and are applied on the presentation thread. Every public
    method must be called from that thread as well.
    """

    def __init__(
        self,
        dispatcher: "DispatcherPort",
        load_on_attach: bool = True,
        key_func: Callable[[Any], Hashable] = id,
    ):
        """Initialize PaginatedListManager.

        Args:
            dispatcher: Delivers channel values on the presentation thread
            load_on_attach: Fetch the first page when a view is attached
            key_func: Maps an item to the key used to reject duplicates.
                The default ``id`` compares object identity, so two row
                objects built separately for the same record are both kept.
                Pass a business key such as ``lambda item: item["id"]``
                when pages are rebuilt from storage.
        """
        self.dispatcher = dispatcher
        self.load_on_attach = load_on_attach
        self.key_func = key_func

        self._entries: List[ListEntry] = []
        self._keys: Set[Hashable] = set()
        self._loading_state = LoadingState.DONE
        self._has_footer = False
        self._placeholder_visible: Optional[bool] = None

        self._page_loader: Optional["PageLoader"] = None
        self._view: Optional["ListViewPort"] = None
        self._scroll_handle: Optional[Hashable] = None
        self._disposed = False

        self.items_channel: Channel[List[Any]] = Channel(dispatcher, "items")
        self.loading_state_channel: Channel[LoadingState] = Channel(
            dispatcher, "loading-state"
        )
        self._subscriptions = SubscriptionGroup()
        self._init_paging()

    def _init_paging(self) -> None:
        if self._subscriptions:
            return
        self._subscriptions.add(self.items_channel.subscribe(self.add_items))
        self._subscriptions.add(
            self.loading_state_channel.subscribe(self._update_loading_state)
        )

    # Inspection

    @property
    def loading_state(self) -> LoadingState:
        return self._loading_state

    @property
    def has_footer(self) -> bool:
        return self._has_footer

    @property
    def page_loader(self) -> Optional["PageLoader"]:
        return self._page_loader

    @property
    def view(self) -> Optional["ListViewPort"]:
        return self._view

    @property
    def is_attached(self) -> bool:
        return self._view is not None

    @property
    def is_disposed(self) -> bool:
        return self._disposed

    @property
    def entries(self) -> Tuple[ListEntry, ...]:
        return tuple(self._entries)

    @property
    def size(self) -> int:
        """Number of entries, footer included."""
        return len(self._entries)

    @property
    def item_count(self) -> int:
        """Number of items, footer excluded."""
        return len(self._entries) - self._footer_slots()

    def payloads(self) -> List[Any]:
        return [entry.payload for entry in self._entries if not entry.is_footer]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[ListEntry]:
        return iter(tuple(self._entries))

    def get_item(self, position: int) -> Optional[ListEntry]:
        if 0 <= position < len(self._entries):
            return self._entries[position]
        return None

    # View lifecycle

    def attach_to(self, view: "ListViewPort") -> None:
        if self._disposed:
            logger.warning("Cannot attach a disposed list manager")
            return
        if self._view is not None:
            self.detach()

        self._view = view
        self._scroll_handle = view.add_scroll_listener(self.on_scroll_position_changed)
        self._init_paging()
        logger.info("Attached to view")

        if self.load_on_attach and self._page_loader is not None:
            self._page_loader.fetch_next_page()

    def detach(self) -> None:
        if self._view is not None and self._scroll_handle is not None:
            self._view.remove_scroll_listener(self._scroll_handle)
        self._view = None
        self._scroll_handle = None
        self._subscriptions.dispose()

    def dispose(self) -> None:
        """Detach and drop any loader output still on its way."""
        if self._disposed:
            return
        self.detach()
        self.set_page_loader(None)
        self._disposed = True
        logger.info("List manager disposed")

    def set_page_loader(self, loader: Optional["PageLoader"]) -> None:
        if self._page_loader is not None and self._page_loader is not loader:
            self._page_loader.disconnect()
        self._page_loader = loader
        if loader is None:
            logger.info("Page loader unbound")
            return
        loader.connect(self.items_channel, self.loading_state_channel)
        logger.info("Page loader bound")

    def on_scroll_position_changed(self, last_visible_index: int) -> None:
        if self._disposed or last_visible_index != len(self._entries) - 1:
            return

        loader = self._page_loader
        if loader is None or loader.reached_end:
            self._update_loading_state(LoadingState.DONE)
            return

        logger.debug("Scrolled to the last entry, loading more...")
        self._update_loading_state(LoadingState.LOADING)
        loader.fetch_next_page()

    def clear_and_reload(self) -> None:
        logger.info("Clearing list and reloading from the first page")
        self._entries.clear()
        self._keys.clear()
        self._has_footer = False
        self._loading_state = LoadingState.DONE
        self._notify_reset()

        # Output of fetches from before the reset is still queued; drop it
        if self._subscriptions:
            self._subscriptions.dispose()
            self._init_paging()

        loader = self._page_loader
        if loader is not None:
            loader.reset_position()
            loader.fetch_next_page()

    # Mutation

    def add_item(self, item: Any) -> bool:
        key = self.key_func(item)
        if key in self._keys:
            logger.debug("Item already present, not adding")
            return False

        position = self.item_count
        self._entries.insert(position, ItemEntry(item))
        self._keys.add(key)
        self._notify_inserted(position)
        self._update_placeholder()
        return True

    def add_items(self, items: Iterable[Any]) -> bool:
        new_items = []
        new_keys = set()
        for item in items:
            key = self.key_func(item)
            if key in self._keys or key in new_keys:
                continue
            new_keys.add(key)
            new_items.append(item)

        if not new_items:
            logger.debug("No new items in batch")
            return False

        start = self.item_count
        self._entries[start:start] = [ItemEntry(item) for item in new_items]
        self._keys.update(new_keys)
        self._notify_range_inserted(start, len(new_items))
        self._update_placeholder()
        return True

    def insert_item(self, item: Any, position: int) -> bool:
        if not 0 <= position <= self.item_count:
            logger.debug(f"Insert position {position} out of range")
            return False
        key = self.key_func(item)
        if key in self._keys:
            logger.debug("Item already present, not inserting")
            return False

        self._entries.insert(position, ItemEntry(item))
        self._keys.add(key)
        self._notify_inserted(position)
        self._update_placeholder()
        return True

    def remove_item_at(self, position: int) -> bool:
        if self._loading_state is not LoadingState.DONE:
            logger.debug(f"Not removing item at {position} while {self._loading_state.name}")
            return False
        if not 0 <= position < len(self._entries):
            logger.debug(f"Remove position {position} out of range")
            return False

        entry = self._entries.pop(position)
        if not entry.is_footer:
            self._keys.discard(self.key_func(entry.payload))
        self._notify_removed(position)
        self._update_placeholder()
        return True

    # Footer

    def _update_loading_state(self, state: LoadingState) -> None:
        if state.shows_footer:
            self._has_footer = True
            self._put_footer(FooterEntry(state))
        elif self._has_footer:
            self._has_footer = False
            footer_position = len(self._entries) - 1
            if footer_position >= 0 and self._entries[footer_position].is_footer:
                self._entries.pop(footer_position)
                self._notify_removed(footer_position)

        self._loading_state = state
        if state is LoadingState.DONE:
            self._update_placeholder()

    def _put_footer(self, footer: FooterEntry) -> None:
        footer_position = len(self._entries) - 1
        if footer_position >= 0 and self._entries[footer_position].is_footer:
            self._entries[footer_position] = footer
            self._notify_changed(footer_position)
        else:
            # Normally ERROR replaces a LOADING footer; place one if none is there
            self._entries.append(footer)
            self._notify_inserted(len(self._entries) - 1)

    def _footer_slots(self) -> int:
        if self._entries and self._entries[-1].is_footer:
            return 1
        return 0

    def _update_placeholder(self) -> None:
        loader = self._page_loader
        if loader is None:
            return
        if self.item_count > 0:
            visible = False
        elif self._loading_state is LoadingState.DONE:
            visible = True
        else:
            return

        if visible == self._placeholder_visible:
            return
        self._placeholder_visible = visible
        if visible:
            loader.show_placeholder()
        else:
            loader.hide_placeholder()

    # View notifications

    def _notify_inserted(self, index: int) -> None:
        if self._view is not None:
            self._view.notify_inserted(index)

    def _notify_range_inserted(self, start: int, count: int) -> None:
        if self._view is not None:
            self._view.notify_range_inserted(start, count)

    def _notify_changed(self, index: int) -> None:
        if self._view is not None:
            self._view.notify_changed(index)

    def _notify_removed(self, index: int) -> None:
        if self._view is not None:
            self._view.notify_removed(index)

    def _notify_reset(self) -> None:
        if self._view is not None:
            self._view.notify_reset()
