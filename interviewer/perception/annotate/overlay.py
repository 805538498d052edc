"""Annotation helpers."""

from __future__ import annotations

import cv2
import numpy as np

ALERT_TEXT = "Phone detected in view"
ALERT_COLOR = (0, 0, 255)


def draw(image: np.ndarray, present: bool) -> np.ndarray:
    """Return a copy of a BGR image with the phone indicator drawn on it."""
    annotated = image.copy()
    if not present:
        return annotated
    height, width = annotated.shape[:2]
    cv2.rectangle(annotated, (0, 0), (width - 1, height - 1), ALERT_COLOR, 4)
    cv2.putText(annotated, ALERT_TEXT, (12, 32), cv2.FONT_HERSHEY_SIMPLEX, 0.8, ALERT_COLOR, 2)
    return annotated
