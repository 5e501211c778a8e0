"""Single-subscriber channels delivering values on the presentation thread."""

import logging
import threading
from typing import TYPE_CHECKING, Any, Callable, Generic, List, Optional, TypeVar

if TYPE_CHECKING:
    from pagedlist.core.protocols import DispatcherPort

logger = logging.getLogger("PagedList.Channel")

T = TypeVar("T")


class Subscription:
    """Handle tying a subscriber to a channel until disposed."""

    def __init__(self, channel: "Channel", callback: Callable[[Any], None]):
        self._channel = channel
        self.callback = callback
        self._disposed = False

    @property
    def disposed(self) -> bool:
        return self._disposed

    def dispose(self) -> None:
        if self._disposed:
            return
        self._disposed = True
        self._channel._unsubscribe(self)


class SubscriptionGroup:
    """Owns several subscriptions and releases them together."""

    def __init__(self):
        self._subscriptions: List[Subscription] = []

    def add(self, subscription: Subscription) -> Subscription:
        self._subscriptions.append(subscription)
        return subscription

    def dispose(self) -> None:
        subscriptions, self._subscriptions = self._subscriptions, []
        for subscription in subscriptions:
            subscription.dispose()

    def __len__(self) -> int:
        return len(self._subscriptions)

    def __bool__(self) -> bool:
        return bool(self._subscriptions)


class Channel(Generic[T]):
    """FIFO channel with a single active subscriber.

    ``emit`` may be called from any thread. Each value is handed to the
    dispatcher, which runs the delivery on the presentation thread in
    emission order. A value whose delivery runs after the subscription was
    disposed is dropped.
    """

    def __init__(self, dispatcher: "DispatcherPort", name: str = "channel"):
        self.dispatcher = dispatcher
        self.name = name
        self._subscription: Optional[Subscription] = None
        self._lock = threading.Lock()

    @property
    def has_subscriber(self) -> bool:
        return self._subscription is not None

    def subscribe(self, callback: Callable[[T], None]) -> Subscription:
        subscription = Subscription(self, callback)
        with self._lock:
            previous = self._subscription
            self._subscription = subscription
        if previous is not None:
            logger.debug(f"[{self.name}] Replacing existing subscriber")
            previous._disposed = True
        return subscription

    def emit(self, value: T) -> None:
        with self._lock:
            subscription = self._subscription
        if subscription is None:
            logger.debug(f"[{self.name}] No subscriber, dropping {value!r}")
            return
        self.dispatcher.dispatch(self._deliver, subscription, value)

    def _deliver(self, subscription: Subscription, value: T) -> None:
        if subscription.disposed:
            logger.debug(f"[{self.name}] Subscription disposed, dropping {value!r}")
            return
        subscription.callback(value)

    def _unsubscribe(self, subscription: Subscription) -> None:
        with self._lock:
            if self._subscription is subscription:
                self._subscription = None
