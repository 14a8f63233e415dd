import pytest

from lookangles.events import LOCATION_CHANGED, SATELLITES_UPDATED, EventBus


def test_publish_calls_subscribers_in_order():
    bus = EventBus()
    calls = []
    bus.subscribe(SATELLITES_UPDATED, lambda p: calls.append(("a", p)))
    bus.subscribe(SATELLITES_UPDATED, lambda p: calls.append(("b", p)))

    bus.publish(SATELLITES_UPDATED, [1, 2])

    assert calls == [("a", [1, 2]), ("b", [1, 2])]


def test_publish_only_reaches_matching_event():
    bus = EventBus()
    seen = []
    bus.subscribe(LOCATION_CHANGED, seen.append)

    bus.publish(SATELLITES_UPDATED, "ignored")
    bus.publish(LOCATION_CHANGED, "here")

    assert seen == ["here"]


def test_publish_without_subscribers_is_noop():
    EventBus().publish("nobody_listens")


def test_unsubscribe():
    bus = EventBus()
    seen = []
    callback = seen.append
    bus.subscribe(LOCATION_CHANGED, callback)
    bus.unsubscribe(LOCATION_CHANGED, callback)
    bus.publish(LOCATION_CHANGED, 1)
    assert seen == []


def test_unsubscribe_unknown_pair_is_ignored():
    bus = EventBus()
    bus.unsubscribe("never_registered", print)


def test_subscriber_added_during_publish_waits_for_next_event():
    bus = EventBus()
    late = []

    def register_late(_):
        bus.subscribe(LOCATION_CHANGED, late.append)

    bus.subscribe(LOCATION_CHANGED, register_late)
    bus.publish(LOCATION_CHANGED, 1)
    assert late == []
    bus.publish(LOCATION_CHANGED, 2)
    assert late == [2]


def test_subscriber_error_propagates():
    bus = EventBus()

    def boom(_):
        raise RuntimeError("subscriber failed")

    bus.subscribe(SATELLITES_UPDATED, boom)
    with pytest.raises(RuntimeError, match="subscriber failed"):
        bus.publish(SATELLITES_UPDATED)
