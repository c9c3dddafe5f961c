"""Unit tests for the outbound event queue (garden/events.py)"""
from garden.events import EventQueue
from garden.models.events import LevelUp, Toast


def test_drain_returns_events_in_order():
    queue = EventQueue()
    queue.emit(LevelUp(new_level=2))
    queue.emit(Toast(message="Level Up! Welcome to Level 2 🌟"))

    events = queue.drain()

    assert [e.kind for e in events] == ["level_up", "toast"]
    assert len(queue) == 0
    assert queue.drain() == []


def test_subscribers_called_on_emit():
    """Test subscribers see each event as it is emitted"""
    queue = EventQueue()
    seen = []
    queue.subscribe(seen.append)
    queue.subscribe(seen.append)  # duplicate ignored

    queue.emit(Toast(message="hi"))

    assert [e.message for e in seen] == ["hi"]
    assert len(queue) == 0


def test_unsubscribe():
    queue = EventQueue()
    seen = []
    queue.subscribe(seen.append)
    queue.unsubscribe(seen.append)

    queue.emit(Toast(message="hi"))

    assert seen == []


def test_failing_subscriber_does_not_block_others(caplog):
    """Test an exception in one handler is logged and the rest still run"""
    queue = EventQueue()
    seen = []

    def broken(event):
        raise RuntimeError("render failed")

    queue.subscribe(broken)
    queue.subscribe(seen.append)

    queue.emit(LevelUp(new_level=3))

    assert [e.new_level for e in seen] == [3]
    assert "render failed" in caplog.text
    assert len(queue) == 0


def test_events_queue_again_after_last_unsubscribe():
    """Test pending events resume once nobody is subscribed"""
    queue = EventQueue()
    seen = []
    queue.subscribe(seen.append)
    queue.emit(Toast(message="delivered"))
    queue.unsubscribe(seen.append)

    queue.emit(Toast(message="queued"))

    assert [e.message for e in seen] == ["delivered"]
    assert [e.message for e in queue.drain()] == ["queued"]
