"""Caller-side transition tracking for detector results."""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass, field
from typing import Callable

from interviewer.bus.bus import EventBus

logger = logging.getLogger(__name__)

PHONE_DETECTED_TOPIC = "proctoring.phone_detected"
ALERT_DURATION_SECONDS = 5.0


@dataclass
class DetectionTracker:
    """Turns a stream of per-frame results into phone alerts.

    Only a ``False -> True`` transition raises an alert. The alert stays
    visible for ``alert_duration`` seconds; a sustained detection does not
    re-alert until the signal drops back to ``False``. Updates may come from
    concurrent request threads.
    """

    source: str = "camera"
    alert_duration: float = ALERT_DURATION_SECONDS
    bus: EventBus | None = None
    clock: Callable[[], float] = time.monotonic
    last_present: bool = False
    alerts: int = 0
    _alert_expires_at: float | None = field(default=None, repr=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def update(self, present: bool) -> bool:
        """Record one detector result and return True when it should notify."""
        with self._lock:
            notify = present and not self.last_present
            self.last_present = present
            if not notify:
                return False
            now = self.clock()
            self._alert_expires_at = now + self.alert_duration
            self.alerts += 1

        logger.info("Phone detected in camera view (%s)", self.source)
        if self.bus is not None:
            self.bus.publish(PHONE_DETECTED_TOPIC, {"source": self.source, "at": now})
        return True

    def alert_visible(self) -> bool:
        """Whether an alert raised earlier is still inside its window, by the tracker's clock."""
        with self._lock:
            if self._alert_expires_at is None:
                return False
            return self.clock() < self._alert_expires_at
