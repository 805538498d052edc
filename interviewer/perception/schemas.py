"""Perception service schemas."""

from __future__ import annotations

from dataclasses import dataclass

import cv2
import numpy as np


@dataclass(frozen=True)
class Frame:
    """One still image sampled from the camera, stored as an (H, W, 4) RGBA grid."""

    width: int
    height: int
    pixels: np.ndarray

    @classmethod
    def from_rgba(cls, data: bytes, width: int, height: int) -> "Frame":
        """Build a frame from a canvas-style buffer: R, G, B, A bytes, row-major, no padding."""
        if width < 0 or height < 0:
            raise ValueError(f"frame dimensions must be non-negative, got {width}x{height}")
        expected = width * height * 4
        if len(data) != expected:
            raise ValueError(f"expected {expected} bytes for a {width}x{height} RGBA frame, got {len(data)}")
        if expected == 0:
            pixels = np.zeros((height, width, 4), dtype=np.uint8)
            pixels.flags.writeable = False
        else:
            pixels = np.frombuffer(bytes(data), dtype=np.uint8).reshape(height, width, 4)
        return cls(width=width, height=height, pixels=pixels)

    @classmethod
    def from_bgr(cls, image: np.ndarray) -> "Frame":
        """Build a frame from an OpenCV BGR image."""
        height, width = image.shape[:2]
        if width == 0 or height == 0:
            pixels = np.zeros((height, width, 4), dtype=np.uint8)
        else:
            pixels = cv2.cvtColor(image, cv2.COLOR_BGR2RGBA)
        pixels.flags.writeable = False
        return cls(width=width, height=height, pixels=pixels)

    @property
    def red(self) -> np.ndarray:
        return self.pixels[:, :, 0]

    @property
    def grayscale(self) -> np.ndarray:
        # unweighted mean of R, G and B; alpha is ignored
        return self.pixels[:, :, :3].astype(np.float64).mean(axis=2)


@dataclass(frozen=True)
class EdgeDensity:
    edge_count: int
    edge_ratio: float
    present: bool
