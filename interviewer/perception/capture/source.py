"""Camera capture for the frame sampler."""

from __future__ import annotations

import logging

import cv2

from ..schemas import Frame

logger = logging.getLogger(__name__)


class CameraSource:
    """Owns one OpenCV capture device and hands out frames on request."""

    def __init__(self, device_id: int = 0, width: int = 640, height: int = 480) -> None:
        self.device_id = device_id
        self.width = width
        self.height = height
        self._capture: cv2.VideoCapture | None = None

    def open(self) -> bool:
        if self._capture is not None:
            self._capture.release()
        self._capture = cv2.VideoCapture(self.device_id)
        self._capture.set(cv2.CAP_PROP_FRAME_WIDTH, self.width)
        self._capture.set(cv2.CAP_PROP_FRAME_HEIGHT, self.height)
        opened = self._capture.isOpened()
        if not opened:
            logger.error("Could not open camera %s", self.device_id)
        return opened

    def read(self) -> Frame | None:
        """Return the current frame, or None when the device has nothing yet."""
        if self._capture is None:
            return None
        success, image = self._capture.read()
        if not success or image is None:
            return None
        return Frame.from_bgr(image)

    def release(self) -> None:
        if self._capture is not None:
            self._capture.release()
            self._capture = None
