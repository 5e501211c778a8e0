"""Loading state of a paginated list."""

from enum import Enum


class LoadingState(Enum):
    DONE = "done"
    LOADING = "loading"
    ERROR = "error"

    @property
    def shows_footer(self) -> bool:
        return self is not LoadingState.DONE
