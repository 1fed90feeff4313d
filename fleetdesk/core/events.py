"""
In-process publish/subscribe channel.

Carries session lifecycle events (login, logout, user updates) to whoever
needs them without a global singleton. One subscriber raising never stops
delivery to the others.
"""
from collections import defaultdict
from typing import Any, Callable
import logging

logger = logging.getLogger(__name__)

Subscriber = Callable[[Any], None]


class EventChannel:
    """Topic-based synchronous event channel."""

    def __init__(self) -> None:
        self._subscribers: dict[str, list[Subscriber]] = defaultdict(list)

    def subscribe(self, topic: str, callback: Subscriber) -> Callable[[], None]:
        """
        Register a callback for a topic.

        Returns:
            A function that removes the subscription; calling it twice is harmless
        """
        self._subscribers[topic].append(callback)

        def unsubscribe() -> None:
            callbacks = self._subscribers.get(topic, [])
            if callback in callbacks:
                callbacks.remove(callback)

        return unsubscribe

    def publish(self, topic: str, payload: Any = None) -> int:
        """
        Deliver a payload to every subscriber of a topic, in subscription order.

        Returns:
            Number of subscribers that handled the event without raising
        """
        delivered = 0
        for callback in list(self._subscribers.get(topic, [])):
            try:
                callback(payload)
                delivered += 1
            except Exception as e:
                logger.error(f"Subscriber {callback!r} failed on {topic!r}: {e}")
        return delivered

    def subscriber_count(self, topic: str) -> int:
        return len(self._subscribers.get(topic, []))
