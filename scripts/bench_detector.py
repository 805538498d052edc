"""Simple detector benchmark on a synthetic camera-sized frame."""

from __future__ import annotations

import time

import numpy as np

from interviewer.perception.schemas import Frame
from interviewer.perception.service import PerceptionService


def main() -> None:
    service = PerceptionService()
    rng = np.random.default_rng(0)
    image = rng.integers(0, 256, size=(480, 640, 3), dtype=np.uint8)
    frame = Frame.from_bgr(image)

    start = time.perf_counter()
    density = service.measure(frame)
    duration = time.perf_counter() - start
    print(
        f"Edge-density detector took {duration * 1000:.2f} ms on 640x480 "
        f"(edges={density.edge_count}, ratio={density.edge_ratio:.4f}, present={density.present})"
    )


if __name__ == "__main__":
    main()
