import logging
from collections.abc import Iterable

from todo_overlay.bus import EventBus
from todo_overlay.messages import ListChanged, ListItem

logger = logging.getLogger(__name__)


class TodoList:
    """
    Observable ordered list of to-do items.

    Readers get an immutable snapshot; every change publishes the new
    snapshot on the bus.
    """

    def __init__(self, bus: EventBus, items: Iterable[ListItem] = ()) -> None:
        self.bus = bus
        self._items: tuple[ListItem, ...] = tuple(items)

    @property
    def items(self) -> tuple[ListItem, ...]:
        return self._items

    def __len__(self) -> int:
        return len(self._items)

    def set_items(self, items: Iterable[ListItem]) -> None:
        self._items = tuple(items)
        logger.debug("List changed: %d items", len(self._items))
        self.bus.publish_list_changed(ListChanged(self._items, source=self))
