"""Data model for paginated lists."""

from .list_entry import FooterEntry, ItemEntry, ListEntry
from .loading_state import LoadingState

__all__ = ["LoadingState", "ListEntry", "ItemEntry", "FooterEntry"]
