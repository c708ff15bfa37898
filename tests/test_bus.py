import logging

from countermodel.app import SnapshotBus


def test_publish_reaches_every_subscriber_in_order():
    bus = SnapshotBus()
    first, second = [], []
    bus.subscribe(first.append)
    bus.subscribe(second.append)

    for value in (1, 2, 3):
        bus.publish(value)

    assert first == [1, 2, 3]
    assert second == [1, 2, 3]
    assert bus.subscriber_count == 2


def test_publish_from_inside_a_handler_keeps_order():
    bus = SnapshotBus()
    seen_by_late = []

    def republisher(value):
        if value == 1:
            bus.publish(2)

    bus.subscribe(republisher)
    bus.subscribe(seen_by_late.append)
    bus.publish(1)

    # The nested publish is delivered only after 1 reached everyone
    assert seen_by_late == [1, 2]


def test_failing_handler_does_not_block_others(caplog):
    bus = SnapshotBus()
    received = []

    def broken(value):
        raise ValueError("bad handler")

    bus.subscribe(broken)
    bus.subscribe(received.append)

    with caplog.at_level(logging.ERROR):
        bus.publish("snapshot")

    assert received == ["snapshot"]
    assert "raised" in caplog.text


def test_unsubscribe_and_clear():
    bus = SnapshotBus()
    received = []
    bus.subscribe(received.append)
    bus.unsubscribe(received.append)
    bus.unsubscribe(received.append)
    bus.publish(1)
    assert received == []

    bus.subscribe(received.append)
    bus.clear_subscribers()
    assert bus.subscriber_count == 0


def test_is_pending_only_while_queued():
    bus = SnapshotBus()
    snapshot = object()
    seen = []

    def check(value):
        if value == "first":
            bus.publish(snapshot)
        seen.append((value, bus.is_pending(snapshot)))

    bus.subscribe(check)
    bus.publish("first")

    assert seen == [("first", True), (snapshot, False)]
    assert not bus.is_pending(snapshot)
