"""Scroll events from a Gtk.Adjustment for infinite scrolling."""

from typing import Callable

import gi

gi.require_version("Gtk", "4.0")
from gi.repository import Gtk

from pagedlist.core.protocols import ScrollListener


class AdjustmentScrollSource:
    """Reports the last entry as visible when scrolled near the bottom."""

    def __init__(
        self,
        adjustment: Gtk.Adjustment,
        get_item_count: Callable[[], int],
        threshold: int = 50,
    ):
        """Initialize AdjustmentScrollSource.

        Args:
            adjustment: Vertical adjustment of the scrolled window
            get_item_count: Returns the number of entries in the list
            threshold: Distance in pixels from the bottom that counts as the end
        """
        self.adjustment = adjustment
        self.get_item_count = get_item_count
        self.threshold = threshold

    def add_scroll_listener(self, listener: ScrollListener) -> int:
        return self.adjustment.connect("value-changed", self._on_value_changed, listener)

    def remove_scroll_listener(self, handle: int) -> None:
        self.adjustment.disconnect(handle)

    def is_near_bottom(self) -> bool:
        adjustment = self.adjustment
        return (
            adjustment.get_upper()
            - adjustment.get_page_size()
            - adjustment.get_value()
            < self.threshold
        )

    def _on_value_changed(self, adjustment, listener: ScrollListener) -> None:
        if self.is_near_bottom():
            listener(self.get_item_count() - 1)
