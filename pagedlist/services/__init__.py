"""Delivery services shared by the list manager and page loaders."""

from .channel import Channel, Subscription, SubscriptionGroup
from .dispatchers import AsyncioDispatcher

__all__ = ["Channel", "Subscription", "SubscriptionGroup", "AsyncioDispatcher"]
