"""Mirrors a paginated list into a Gio.ListStore for GTK list widgets."""

import logging
from typing import TYPE_CHECKING, Hashable, Optional

import gi

gi.require_version("Gtk", "4.0")
from gi.repository import Gio, GObject

from pagedlist.models import ListEntry, LoadingState

if TYPE_CHECKING:
    from pagedlist.core.protocols import ScrollListener, ScrollSourcePort
    from pagedlist.managers import PaginatedListManager

logger = logging.getLogger("PagedList.ListStoreView")


class EntryObject(GObject.Object):
    """GObject wrapper so list entries can live in a Gio.ListStore."""

    __gtype_name__ = "PagedListEntryObject"

    def __init__(self, entry: ListEntry):
        super().__init__()
        self.entry = entry

    @GObject.Property(type=bool, default=False)
    def is_footer(self):
        return self.entry.is_footer

    @property
    def loading_state(self) -> Optional[LoadingState]:
        return self.entry.state if self.entry.is_footer else None

    @property
    def payload(self):
        return None if self.entry.is_footer else self.entry.payload


class ListStoreView:
    """List view port backed by a Gio.ListStore.

    Hand ``store`` to a Gtk.ListView or Gtk.GridView; the footer shows up as
    an ``EntryObject`` whose ``is_footer`` is set. Scroll events come from
    the optional scroll source.
    """

    def __init__(self, scroll_source: Optional["ScrollSourcePort"] = None):
        self.store = Gio.ListStore(item_type=EntryObject)
        self.scroll_source = scroll_source
        self._manager: Optional["PaginatedListManager"] = None

    def bind(self, manager: "PaginatedListManager") -> None:
        """Use ``manager`` as the source of entries and copy its contents."""
        self._manager = manager
        self.notify_reset()

    def notify_inserted(self, index: int) -> None:
        self.store.insert(index, self._wrap(index))

    def notify_range_inserted(self, start: int, count: int) -> None:
        self.store.splice(start, 0, [self._wrap(i) for i in range(start, start + count)])

    def notify_changed(self, index: int) -> None:
        self.store.splice(index, 1, [self._wrap(index)])

    def notify_removed(self, index: int) -> None:
        self.store.remove(index)

    def notify_reset(self) -> None:
        count = len(self._manager) if self._manager is not None else 0
        self.store.splice(
            0, self.store.get_n_items(), [self._wrap(i) for i in range(count)]
        )

    def add_scroll_listener(self, listener: "ScrollListener") -> Optional[Hashable]:
        if self.scroll_source is None:
            logger.debug("No scroll source, infinite scroll disabled")
            return None
        return self.scroll_source.add_scroll_listener(listener)

    def remove_scroll_listener(self, handle: Optional[Hashable]) -> None:
        if self.scroll_source is not None and handle is not None:
            self.scroll_source.remove_scroll_listener(handle)

    def _wrap(self, index: int) -> EntryObject:
        if self._manager is None:
            raise RuntimeError("ListStoreView.bind() must be called first")
        return EntryObject(self._manager.get_item(index))
