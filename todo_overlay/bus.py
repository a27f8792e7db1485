import logging
from collections import defaultdict
from collections.abc import Callable
from typing import Any, TypeVar

from todo_overlay.messages import (
    TOPIC_FRAME_RENDERED,
    TOPIC_LIST_CHANGED,
    FrameRendered,
    ListChanged,
)

T = TypeVar("T")
Handler = Callable[[T], None]

logger = logging.getLogger(__name__)


class EventBus:
    """
    Synchronous topic dispatcher.

    All publishing happens on the host's frame thread, so handlers run
    serially in subscription order and no locking is needed.
    """

    def __init__(self) -> None:
        self._subscribers: dict[str, list[Handler[Any]]] = defaultdict(list)

    def subscribe(self, topic: str, handler: Handler[T]) -> None:
        self._subscribers[topic].append(handler)  # type: ignore[arg-type]

    def unsubscribe(self, topic: str, handler: Handler[T]) -> None:
        handlers = self._subscribers.get(topic)
        if not handlers:
            return
        try:
            handlers.remove(handler)  # type: ignore[arg-type]
        except ValueError:
            logger.debug("Handler %r was not subscribed to %s", handler, topic)

    def subscriber_count(self, topic: str) -> int:
        return len(self._subscribers.get(topic, []))

    def publish(self, topic: str, message: T) -> None:
        # Copy so a handler may unsubscribe while being dispatched
        handlers = list(self._subscribers.get(topic, []))
        for handler in handlers:
            handler(message)

    def publish_list_changed(self, message: ListChanged) -> None:
        self.publish(TOPIC_LIST_CHANGED, message)

    def publish_frame(self, message: FrameRendered) -> None:
        self.publish(TOPIC_FRAME_RENDERED, message)
