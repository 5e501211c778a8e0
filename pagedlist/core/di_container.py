"""Dependency injection container."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

from pagedlist.config import PagingSettings, SettingsManager
from pagedlist.core.protocols import DispatcherPort, PageSource, PlaceholderPort
from pagedlist.managers import PageLoader, PaginatedListManager

if TYPE_CHECKING:
    from pagedlist.views.adjustment_scroll_source import AdjustmentScrollSource


@dataclass
class PagingContainer:
    settings: PagingSettings
    dispatcher: DispatcherPort

    _controller: Optional[PaginatedListManager] = field(
        default=None, init=False, repr=False
    )

    @property
    def controller(self) -> PaginatedListManager:
        if self._controller is None:
            self._controller = PaginatedListManager(
                self.dispatcher,
                load_on_attach=self.settings.load_on_attach,
            )
        return self._controller

    def create_loader(
        self,
        source: PageSource,
        placeholder: Optional[PlaceholderPort] = None,
    ) -> PageLoader:
        loader = PageLoader(source)
        loader.configure(
            offset=self.settings.offset,
            page_size=self.settings.page_size,
            placeholder=placeholder,
        )
        self.controller.set_page_loader(loader)
        return loader

    def create_scroll_source(self, adjustment) -> "AdjustmentScrollSource":
        """Scroll source over a Gtk.Adjustment, sized by the controller."""
        from pagedlist.views.adjustment_scroll_source import AdjustmentScrollSource

        return AdjustmentScrollSource(
            adjustment,
            lambda: len(self.controller),
            threshold=self.settings.scroll_threshold,
        )

    @classmethod
    def create(
        cls,
        settings: Optional[PagingSettings] = None,
        dispatcher: Optional[DispatcherPort] = None,
    ) -> "PagingContainer":
        if dispatcher is None:
            from pagedlist.services.glib_dispatcher import GLibDispatcher

            dispatcher = GLibDispatcher()
        return cls(
            settings=settings or SettingsManager().settings.paging,
            dispatcher=dispatcher,
        )
