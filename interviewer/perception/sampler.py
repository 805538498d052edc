"""Periodic frame sampler driving the phone detector."""

from __future__ import annotations

import logging
import threading
from typing import Callable, Optional, Protocol

from .schemas import Frame
from .service import PerceptionService, ProctoringResult
from .tracking.notifier import DetectionTracker

logger = logging.getLogger(__name__)

DETECTION_INTERVAL_SECONDS = 2.0


class FrameSource(Protocol):
    def read(self) -> Frame | None: ...

    def release(self) -> None: ...


class FrameSampler:
    """Samples one frame every ``interval`` seconds on a background thread.

    The sampler owns the capture source and releases it on ``stop()``. Ticks
    with no frame, or a frame with no dimensions yet, are skipped.
    """

    def __init__(
        self,
        source: FrameSource,
        tracker: DetectionTracker,
        service: PerceptionService | None = None,
        interval: float = DETECTION_INTERVAL_SECONDS,
        listener: Optional[Callable[[Frame, ProctoringResult], None]] = None,
    ) -> None:
        self.source = source
        self.tracker = tracker
        self.service = service or PerceptionService()
        self.interval = interval
        self.listener = listener
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def tick(self) -> ProctoringResult | None:
        frame = self.source.read()
        if frame is None or frame.width == 0 or frame.height == 0:
            return None
        result = self.service.observe(frame, self.tracker)
        if self.listener is not None:
            self.listener(frame, result)
        return result

    def _run(self) -> None:
        while not self._stop.wait(self.interval):
            try:
                self.tick()
            except Exception:
                logger.exception("Frame sampling failed")

    def start(self) -> None:
        if self.running:
            raise RuntimeError("sampler already running")
        self._stop.clear()
        self._thread = threading.Thread(target=self._run, name="frame-sampler", daemon=True)
        self._thread.start()
        logger.info("Sampling frames every %.1fs", self.interval)

    def stop(self) -> None:
        self._stop.set()
        if self._thread is not None:
            self._thread.join()
            self._thread = None
        self.source.release()
