"""Manager classes for paginated list state."""

from .page_loader import PageLoader
from .paginated_list_manager import PaginatedListManager

__all__ = ["PageLoader", "PaginatedListManager"]
