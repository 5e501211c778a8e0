"""Core interfaces and dependency injection."""

from .di_container import PagingContainer
from .protocols import (
    DispatcherPort,
    ListViewPort,
    PageSource,
    PlaceholderPort,
    ScrollListener,
    ScrollSourcePort,
)

__all__ = [
    "PagingContainer",
    "DispatcherPort",
    "ListViewPort",
    "PageSource",
    "PlaceholderPort",
    "ScrollListener",
    "ScrollSourcePort",
]
