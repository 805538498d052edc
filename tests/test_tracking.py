from __future__ import annotations

import threading

import numpy as np

from interviewer.bus.bus import EventBus
from interviewer.perception.sampler import FrameSampler
from interviewer.perception.schemas import Frame
from interviewer.perception.tracking.notifier import PHONE_DETECTED_TOPIC, DetectionTracker

from fakes import FakeClock, rgba_frame, striped


class _ListSource:
    def __init__(self, frames: list[Frame | None]) -> None:
        self.frames = list(frames)
        self.released = False

    def read(self) -> Frame | None:
        return self.frames.pop(0) if self.frames else None

    def release(self) -> None:
        self.released = True


def _phone_frame() -> Frame:
    return rgba_frame(striped([10, 30, 50]))


def _empty_frame() -> Frame:
    return rgba_frame(np.zeros((100, 100), dtype=np.uint8))


def test_only_rising_edge_notifies():
    tracker = DetectionTracker(clock=FakeClock())

    assert tracker.update(False) is False
    assert tracker.update(True) is True
    assert tracker.update(True) is False
    assert tracker.update(False) is False
    assert tracker.update(True) is True
    assert tracker.alerts == 2


def test_last_present_follows_every_update():
    tracker = DetectionTracker(clock=FakeClock())
    tracker.update(True)
    assert tracker.last_present is True
    tracker.update(False)
    assert tracker.last_present is False


def test_alert_stays_visible_for_window():
    clock = FakeClock(100.0)
    tracker = DetectionTracker(alert_duration=5.0, clock=clock)

    assert tracker.alert_visible() is False
    tracker.update(True)
    clock.now = 104.9
    assert tracker.alert_visible() is True
    clock.now = 105.0
    assert tracker.alert_visible() is False


def test_sustained_detection_does_not_extend_alert():
    clock = FakeClock()
    tracker = DetectionTracker(alert_duration=5.0, clock=clock)
    tracker.update(True)
    clock.now = 4.0
    tracker.update(True)
    clock.now = 6.0
    assert tracker.alert_visible() is False


def test_rising_edge_publishes_on_bus():
    bus = EventBus()
    received: list[dict[str, object]] = []
    bus.subscribe(PHONE_DETECTED_TOPIC, received.append)
    tracker = DetectionTracker(source="session-1", bus=bus, clock=FakeClock(12.0))

    tracker.update(True)
    tracker.update(True)

    assert received == [{"source": "session-1", "at": 12.0}]


def test_sampler_tick_skips_missing_and_empty_frames():
    source = _ListSource([None, Frame.from_rgba(b"", 0, 0)])
    sampler = FrameSampler(source, DetectionTracker(clock=FakeClock()))

    assert sampler.tick() is None
    assert sampler.tick() is None


def test_sampler_tick_reports_transitions():
    source = _ListSource([_empty_frame(), _phone_frame(), _phone_frame()])
    tracker = DetectionTracker(clock=FakeClock())
    sampler = FrameSampler(source, tracker)

    first = sampler.tick()
    second = sampler.tick()
    third = sampler.tick()

    assert (first.present, first.notify) == (False, False)
    assert (second.present, second.notify, second.alert_visible) == (True, True, True)
    assert (third.present, third.notify) == (True, False)
    assert tracker.last_present is True


def test_sampler_thread_runs_until_stopped():
    source = _ListSource([_phone_frame()])
    seen = threading.Event()
    sampler = FrameSampler(
        source,
        DetectionTracker(),
        interval=0.01,
        listener=lambda frame, result: seen.set(),
    )

    sampler.start()
    try:
        assert seen.wait(timeout=5)
        assert sampler.running
    finally:
        sampler.stop()

    assert not sampler.running
    assert source.released


def test_failing_subscriber_does_not_block_others():
    bus = EventBus()
    received: list[dict[str, object]] = []

    def broken(message: dict[str, object]) -> None:
        raise RuntimeError("listener crashed")

    bus.subscribe(PHONE_DETECTED_TOPIC, broken)
    bus.subscribe(PHONE_DETECTED_TOPIC, received.append)

    bus.publish(PHONE_DETECTED_TOPIC, {"source": "s"})

    assert received == [{"source": "s"}]


def test_rising_edge_survives_failing_subscriber():
    bus = EventBus()

    def broken(message: dict[str, object]) -> None:
        raise RuntimeError("listener crashed")

    bus.subscribe(PHONE_DETECTED_TOPIC, broken)
    tracker = DetectionTracker(bus=bus, clock=FakeClock())

    assert tracker.update(True) is True
    assert tracker.alert_visible() is True
    assert tracker.alerts == 1


def test_concurrent_updates_notify_once():
    tracker = DetectionTracker(clock=FakeClock())
    start = threading.Barrier(8)
    results: list[bool] = []
    lock = threading.Lock()

    def worker() -> None:
        start.wait()
        notified = tracker.update(True)
        with lock:
            results.append(notified)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert results.count(True) == 1
    assert tracker.alerts == 1
