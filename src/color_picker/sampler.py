from __future__ import annotations

import logging
import math
from dataclasses import dataclass

log = logging.getLogger(__name__)

DEFAULT_SCREEN_WIDTH = 390.0
DEFAULT_HORIZONTAL_PADDING = 32.0


@dataclass(frozen=True)
class PickerGeometry:
    """Display metrics the gradient bar is laid out in."""

    screen_width: float = DEFAULT_SCREEN_WIDTH
    horizontal_padding: float = DEFAULT_HORIZONTAL_PADDING

    @property
    def width(self) -> float:
        return self.screen_width - self.horizontal_padding


def sample_index(position: float, width: float, length: int) -> int:
    """
    floor(position / width * length), clamped to [0, length - 1].

    Offsets left of the bar (or NaN) map to 0 and offsets past its right
    edge map to the last index.
    """
    if length <= 0:
        raise ValueError("cannot sample an empty gradient")
    if not width > 0:
        raise ValueError(f"width must be positive, got {width}")

    scaled = position / width * length
    if math.isnan(scaled) or scaled <= 0:
        return 0
    if math.isinf(scaled):
        return length - 1
    index = max(0, min(length - 1, math.floor(scaled)))
    log.debug("position %.2f / width %.2f -> index %d", position, width, index)
    return index


__all__ = [
    "DEFAULT_SCREEN_WIDTH",
    "DEFAULT_HORIZONTAL_PADDING",
    "PickerGeometry",
    "sample_index",
]
