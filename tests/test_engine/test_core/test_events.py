import pytest
from enum import Enum, auto
from beast_engine.core.events import Event

class MockEvent(Enum):
    TEST_EVENT = auto()
    OTHER_EVENT = auto()

def test_event_bus_subscribe_publish(event_bus):
    received = []
    def handler(event):
        received.append(event)

    event_bus.subscribe(MockEvent.TEST_EVENT, handler)
    event = event_bus.publish(MockEvent.TEST_EVENT, data="test")

    assert received == [event]
    assert received[0].type == MockEvent.TEST_EVENT
    assert received[0]["data"] == "test"

def test_event_bus_unsubscribe(event_bus):
    received = []
    def handler(event):
        received.append(event)

    event_bus.subscribe(MockEvent.TEST_EVENT, handler)
    event_bus.unsubscribe(MockEvent.TEST_EVENT, handler)
    event_bus.publish(MockEvent.TEST_EVENT)

    assert len(received) == 0
    assert not event_bus.has_subscribers(MockEvent.TEST_EVENT)

def test_handlers_called_in_subscription_order(event_bus):
    order = []

    event_bus.subscribe(MockEvent.TEST_EVENT, lambda e: order.append("first"), weak=False)
    event_bus.subscribe(MockEvent.TEST_EVENT, lambda e: order.append("second"), weak=False)

    event_bus.publish(MockEvent.TEST_EVENT)

    assert order == ["first", "second"]

def test_publish_without_subscribers(event_bus):
    event = event_bus.publish(MockEvent.OTHER_EVENT, value=1)
    assert event["value"] == 1

def test_weak_handler_removed_when_owner_deleted(event_bus):
    class Listener:
        def __init__(self):
            self.count = 0

        def on_event(self, event):
            self.count += 1

    listener = Listener()
    event_bus.subscribe(MockEvent.TEST_EVENT, listener.on_event)
    assert event_bus.has_subscribers(MockEvent.TEST_EVENT)

    del listener
    event_bus.publish(MockEvent.TEST_EVENT)

    assert not event_bus.has_subscribers(MockEvent.TEST_EVENT)

def test_events_published_during_dispatch_are_queued(event_bus):
    order = []

    def first(event):
        order.append("first:start")
        event_bus.publish(MockEvent.OTHER_EVENT)
        order.append("first:end")

    def second(event):
        order.append("other")

    event_bus.subscribe(MockEvent.TEST_EVENT, first)
    event_bus.subscribe(MockEvent.OTHER_EVENT, second)

    event_bus.publish(MockEvent.TEST_EVENT)

    assert order == ["first:start", "first:end", "other"]

def test_handler_error_does_not_stop_dispatch(event_bus, caplog):
    received = []

    def broken(event):
        raise RuntimeError("boom")

    event_bus.subscribe(MockEvent.TEST_EVENT, broken)
    event_bus.subscribe(MockEvent.TEST_EVENT, received.append, weak=False)

    event_bus.publish(MockEvent.TEST_EVENT)
    event_bus.publish(MockEvent.TEST_EVENT)

    assert len(received) == 2
    assert "Error in event handler" in caplog.text

def test_event_missing_key():
    event = Event(type=MockEvent.TEST_EVENT, data={"a": 1})
    assert event["a"] == 1
    with pytest.raises(KeyError):
        event["missing"]
