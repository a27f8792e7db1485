"""Тесты для шины событий и источника списка."""

from todo_overlay.bus import EventBus
from todo_overlay.messages import TOPIC_LIST_CHANGED, ListChanged, ListItem
from todo_overlay.todo_list import TodoList


def test_publish_calls_handlers_in_order() -> None:
    """Обработчики вызываются в порядке подписки."""
    bus = EventBus()
    calls: list[str] = []

    bus.subscribe("topic", lambda msg: calls.append(f"first {msg}"))
    bus.subscribe("topic", lambda msg: calls.append(f"second {msg}"))
    bus.publish("topic", 1)

    assert calls == ["first 1", "second 1"]


def test_publish_without_subscribers() -> None:
    """Публикация без подписчиков ничего не делает."""
    EventBus().publish("nobody", object())


def test_unsubscribe_stops_delivery() -> None:
    """После отписки обработчик не вызывается."""
    bus = EventBus()
    calls: list[int] = []

    def handler(msg: int) -> None:
        calls.append(msg)

    bus.subscribe("topic", handler)
    bus.publish("topic", 1)
    bus.unsubscribe("topic", handler)
    bus.publish("topic", 2)

    assert calls == [1]
    assert bus.subscriber_count("topic") == 0


def test_unsubscribe_unknown_handler_is_noop() -> None:
    """Отписка неизвестного обработчика не падает."""
    bus = EventBus()
    bus.subscribe("topic", lambda msg: None)

    bus.unsubscribe("topic", print)
    bus.unsubscribe("other", print)

    assert bus.subscriber_count("topic") == 1


def test_handler_can_unsubscribe_during_dispatch() -> None:
    """Обработчик может отписаться во время рассылки."""
    bus = EventBus()
    calls: list[str] = []

    def once(msg: str) -> None:
        calls.append(f"once {msg}")
        bus.unsubscribe("topic", once)

    bus.subscribe("topic", once)
    bus.subscribe("topic", lambda msg: calls.append(f"always {msg}"))
    bus.publish("topic", "a")
    bus.publish("topic", "b")

    assert calls == ["once a", "always a", "always b"]


def test_todo_list_publishes_snapshot() -> None:
    """Список публикует новый снимок при изменении."""
    bus = EventBus()
    received: list[ListChanged] = []
    bus.subscribe(TOPIC_LIST_CHANGED, received.append)
    todo_list = TodoList(bus, [ListItem("Water the crops")])

    todo_list.set_items([ListItem("Buy 5 parsnips"), ListItem("Pet the cat")])

    assert len(received) == 1
    assert [item.text for item in received[0].items] == ["Buy 5 parsnips", "Pet the cat"]
    assert todo_list.items == received[0].items
    assert len(todo_list) == 2


def test_todo_list_snapshot_is_immutable() -> None:
    """Снимок списка не зависит от исходной коллекции."""
    source = [ListItem("Water the crops")]
    todo_list = TodoList(EventBus(), source)

    source.append(ListItem("Buy 5 parsnips"))

    assert isinstance(todo_list.items, tuple)
    assert len(todo_list.items) == 1
