"""Perception service tying the detector to its caller-side tracking."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .annotate import overlay
from .detector.engine import EdgeDensityDetector
from .schemas import EdgeDensity, Frame
from .tracking.notifier import DetectionTracker


@dataclass
class ProctoringResult:
    present: bool
    notify: bool
    alert_visible: bool


@dataclass
class PerceptionService:
    detector: EdgeDensityDetector | None = None

    def __post_init__(self) -> None:
        if self.detector is None:
            self.detector = EdgeDensityDetector()

    def run_inference(self, frame: Frame) -> bool:
        assert self.detector is not None
        return self.detector.detect(frame)

    def measure(self, frame: Frame) -> EdgeDensity:
        assert self.detector is not None
        return self.detector.measure(frame)

    def observe(self, frame: Frame, tracker: DetectionTracker) -> ProctoringResult:
        """Run the detector on one frame and feed the result to ``tracker``."""
        present = self.run_inference(frame)
        notify = tracker.update(present)
        return ProctoringResult(present=present, notify=notify, alert_visible=tracker.alert_visible())

    def annotate(self, image: np.ndarray, present: bool) -> np.ndarray:
        return overlay.draw(image, present)
