"""Entries held by a paginated list.

A list slot is either an application item or the trailing footer that
reflects the current loading state.
"""

from dataclasses import dataclass
from typing import Any, Union

from .loading_state import LoadingState


@dataclass(frozen=True, eq=False)
class ItemEntry:
    payload: Any

    is_footer = False


@dataclass(frozen=True)
class FooterEntry:
    state: LoadingState

    is_footer = True

    def __post_init__(self):
        if self.state is LoadingState.DONE:
            raise ValueError("footer cannot represent a finished load")


ListEntry = Union[ItemEntry, FooterEntry]
