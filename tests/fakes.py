from __future__ import annotations

import numpy as np

from interviewer.perception.schemas import Frame


class FakeLLM:
    def __init__(self, reply: str = "", error: Exception | None = None, available: bool = True) -> None:
        self.reply = reply
        self.error = error
        self._available = available
        self.prompts: list[str] = []

    @property
    def available(self) -> bool:
        return self._available

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply


class FakeClock:
    def __init__(self, now: float = 0.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


def rgba_frame(red: np.ndarray, green: np.ndarray | None = None, blue: np.ndarray | None = None) -> Frame:
    height, width = red.shape
    pixels = np.zeros((height, width, 4), dtype=np.uint8)
    pixels[:, :, 0] = red
    if green is not None:
        pixels[:, :, 1] = green
    if blue is not None:
        pixels[:, :, 2] = blue
    pixels[:, :, 3] = 255
    return Frame.from_rgba(pixels.tobytes(), width, height)


def striped(stripe_rows: list[int], size: int = 100, thickness: int = 5) -> np.ndarray:
    """Channel of zeros with horizontal 255 stripes starting at ``stripe_rows``.

    Each stripe adds four full-width rows of edges: the rows either side of its
    top and bottom boundaries.
    """
    channel = np.zeros((size, size), dtype=np.uint8)
    for row in stripe_rows:
        channel[row : row + thickness] = 255
    return channel
