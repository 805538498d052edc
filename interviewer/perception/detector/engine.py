"""Edge-density detector for rectangular objects (phones) in a camera frame."""

from __future__ import annotations

import numpy as np

from ..schemas import EdgeDensity, Frame

EDGE_THRESHOLD = 50
MIN_EDGE_RATIO = 0.02
MAX_EDGE_RATIO = 0.15

GRADIENT_SOURCES = ("red", "gray")


def sobel_magnitude(channel: np.ndarray) -> np.ndarray:
    """Return Sobel gradient magnitudes for the interior of a 2-D channel.

    The result has shape (H - 2, W - 2); border pixels have no full 3x3
    neighbourhood and are skipped. Channels smaller than 3x3 give an empty array.
    """
    p = channel.astype(np.float64)
    top_left, top, top_right = p[:-2, :-2], p[:-2, 1:-1], p[:-2, 2:]
    left, right = p[1:-1, :-2], p[1:-1, 2:]
    bottom_left, bottom, bottom_right = p[2:, :-2], p[2:, 1:-1], p[2:, 2:]

    gx = -top_left + top_right - 2 * left + 2 * right - bottom_left + bottom_right
    gy = -top_left - 2 * top - top_right + bottom_left + 2 * bottom + bottom_right
    return np.sqrt(gx * gx + gy * gy)


class EdgeDensityDetector:
    """Flags a frame whose edge density falls inside a phone-like band.

    This is a density band-pass, not shape recognition: a flat background has
    too few edges and a busy scene too many. The detector is stateless, so one
    instance can be shared across threads.

    ``gradient_source="red"`` reads the raw red channel, which is what the
    thresholds were tuned against. ``"gray"`` applies the same kernel to the
    RGB mean instead.
    """

    def __init__(
        self,
        edge_threshold: float = EDGE_THRESHOLD,
        min_edge_ratio: float = MIN_EDGE_RATIO,
        max_edge_ratio: float = MAX_EDGE_RATIO,
        gradient_source: str = "red",
    ) -> None:
        if gradient_source not in GRADIENT_SOURCES:
            raise ValueError(f"gradient_source must be one of {GRADIENT_SOURCES}, got {gradient_source!r}")
        self.edge_threshold = edge_threshold
        self.min_edge_ratio = min_edge_ratio
        self.max_edge_ratio = max_edge_ratio
        self.gradient_source = gradient_source

    def measure(self, frame: Frame) -> EdgeDensity:
        area = frame.width * frame.height
        if area == 0:
            return EdgeDensity(edge_count=0, edge_ratio=0.0, present=False)

        channel = frame.red if self.gradient_source == "red" else frame.grayscale
        magnitude = sobel_magnitude(channel)
        edge_count = int(np.count_nonzero(magnitude > self.edge_threshold))

        # normalised by the full frame area, border included
        edge_ratio = edge_count / area
        present = self.min_edge_ratio < edge_ratio < self.max_edge_ratio
        return EdgeDensity(edge_count=edge_count, edge_ratio=edge_ratio, present=present)

    def detect(self, frame: Frame) -> bool:
        return self.measure(frame).present
