"""Paginated list controller for infinitely scrolling views."""

from .managers import PageLoader, PaginatedListManager
from .models import FooterEntry, ItemEntry, ListEntry, LoadingState

__all__ = [
    "PaginatedListManager",
    "PageLoader",
    "LoadingState",
    "ListEntry",
    "ItemEntry",
    "FooterEntry",
]
