"""Watch a local webcam and log phone alerts."""

from __future__ import annotations

import argparse
import logging
import threading

import cv2
import numpy as np

from interviewer.bus.bus import EventBus
from interviewer.gateway.app.deps import get_detector, get_settings
from interviewer.perception.capture.source import CameraSource
from interviewer.perception.sampler import FrameSampler
from interviewer.perception.schemas import Frame
from interviewer.perception.service import PerceptionService, ProctoringResult
from interviewer.perception.tracking.notifier import PHONE_DETECTED_TOPIC, DetectionTracker

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--device", type=int, default=0)
    parser.add_argument("--interval", type=float, default=settings.detection_interval_seconds)
    parser.add_argument("--show", action="store_true", help="display the annotated frame")
    args = parser.parse_args()

    bus = EventBus()
    bus.subscribe(PHONE_DETECTED_TOPIC, lambda message: logger.warning("Mobile phone detected in camera view! %s", message))

    source = CameraSource(device_id=args.device)
    if not source.open():
        raise SystemExit(1)

    service = PerceptionService(detector=get_detector(settings))
    tracker = DetectionTracker(source=f"camera-{args.device}", alert_duration=settings.alert_duration_seconds, bus=bus)

    latest: dict[str, np.ndarray] = {}
    lock = threading.Lock()

    def remember(frame: Frame, result: ProctoringResult) -> None:
        image = cv2.cvtColor(np.ascontiguousarray(frame.pixels), cv2.COLOR_RGBA2BGR)
        with lock:
            latest["image"] = service.annotate(image, result.alert_visible)

    sampler = FrameSampler(source, tracker, service=service, interval=args.interval, listener=remember)
    sampler.start()
    try:
        if not args.show:
            threading.Event().wait()
        while True:
            with lock:
                image = latest.get("image")
            if image is not None:
                cv2.imshow("interviewer", image)
            if cv2.waitKey(100) & 0xFF == ord("q"):
                break
    except KeyboardInterrupt:
        pass
    finally:
        sampler.stop()
        cv2.destroyAllWindows()
        logger.info("Stopped after %d phone alert(s)", tracker.alerts)


if __name__ == "__main__":
    main()
