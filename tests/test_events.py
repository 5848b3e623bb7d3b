"""
Tests for EventEmitter.
"""
import pytest

from spirited.events import EventEmitter, EventType


def test_emitter_initialization():
    emitter = EventEmitter()

    assert emitter.get_subscription_count() == 0


def test_subscribe_and_publish(recorder):
    """Listeners receive the published positional arguments."""
    emitter = EventEmitter()

    sub_id = emitter.on("custom", recorder)
    called = emitter.publish("custom", 1, "two")

    assert sub_id is not None
    assert called == 1
    assert recorder.calls == [(1, "two")]


def test_unsubscribe(recorder):
    emitter = EventEmitter()
    sub_id = emitter.on(EventType.TICK, recorder)

    emitter.publish(EventType.TICK, "first")
    emitter.unsubscribe(sub_id)
    emitter.publish(EventType.TICK, "second")

    assert recorder.calls == [("first",)]
    assert emitter.get_subscription_count() == 0


def test_unsubscribe_unknown_id_is_harmless():
    emitter = EventEmitter()

    emitter.unsubscribe("nope")

    assert emitter.get_subscription_count() == 0


def test_priority_ordering():
    """Higher priority listeners run first; ties keep subscription order."""
    emitter = EventEmitter()
    call_order = []

    emitter.subscribe("evt", lambda: call_order.append("low"), priority=10)
    emitter.subscribe("evt", lambda: call_order.append("high"), priority=90)
    emitter.subscribe("evt", lambda: call_order.append("normal-1"))
    emitter.subscribe("evt", lambda: call_order.append("normal-2"))

    emitter.publish("evt")

    assert call_order == ["high", "normal-1", "normal-2", "low"]


def test_once(recorder):
    emitter = EventEmitter()
    emitter.once(EventType.END, recorder)

    emitter.publish(EventType.END)
    emitter.publish(EventType.END)

    assert recorder.calls == [()]
    assert emitter.get_subscriptions_for_type(EventType.END) == 0


def test_listener_unsubscribed_during_publish_is_skipped(recorder):
    """A listener removed by an earlier listener in the same publish is not called."""
    emitter = EventEmitter()
    ids = {}

    emitter.subscribe("evt", lambda: emitter.unsubscribe(ids["second"]), priority=90)
    ids["second"] = emitter.on("evt", recorder)

    emitter.publish("evt")

    assert recorder.calls == []


def test_chaining_helpers(recorder):
    emitter = EventEmitter()

    result = emitter.on_tick(recorder).on_complete(recorder)

    assert result is emitter
    assert emitter.get_subscriptions_for_type(EventType.TICK) == 1
    assert emitter.get_subscriptions_for_type(EventType.END) == 1


def test_remove_all_listeners(recorder):
    emitter = EventEmitter()
    emitter.on_tick(recorder).on_complete(recorder)

    emitter.remove_all_listeners()
    emitter.publish(EventType.TICK, 1)

    assert recorder.calls == []
    assert emitter.get_subscription_count() == 0


def test_listener_exceptions_propagate():
    emitter = EventEmitter()

    def handler():
        raise ValueError("boom")

    emitter.on("evt", handler)

    with pytest.raises(ValueError):
        emitter.publish("evt")


def test_invalid_subscriptions():
    emitter = EventEmitter()

    with pytest.raises(ValueError):
        emitter.on("evt", "not callable")

    with pytest.raises(ValueError):
        emitter.on("", lambda: None)
