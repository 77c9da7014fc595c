from __future__ import annotations

import logging
import numbers
from typing import List, Sequence

import numpy as np

from .blend import blend
from .color import (
    BLACK,
    BLUE,
    BROWN,
    CYAN,
    GRAY,
    GREEN,
    ORANGE,
    PURPLE,
    RED,
    WHITE,
    YELLOW,
    Color,
)

log = logging.getLogger(__name__)

ANCHORS: tuple[Color, ...] = (
    WHITE,
    RED,
    ORANGE,
    YELLOW,
    GREEN,
    CYAN,
    BLUE,
    PURPLE,
    BROWN,
    GRAY,
    BLACK,
)

MIDPOINT = 0.5


def gradient_length(anchor_count: int) -> int:
    return 2 * (anchor_count - 1) + 1 if anchor_count > 0 else 0


def generate_gradient_colors(anchors: Sequence[Color] = ANCHORS) -> List[Color]:
    """
    Each anchor followed by its midpoint blend with the next one, ending on
    the last anchor. N anchors -> 2N - 1 colours; recomputed on every call.
    """
    colors: List[Color] = []
    for i in range(len(anchors) - 1):
        colors.append(anchors[i])
        colors.append(blend(anchors[i], anchors[i + 1], MIDPOINT))
    if anchors:
        colors.append(anchors[-1])
    return colors


def gradient_array(colors: Sequence[Color] | None = None) -> np.ndarray:
    """(N, 4) float RGBA array of a colour sequence (default: the gradient)."""
    if colors is None:
        colors = generate_gradient_colors()
    if not colors:
        return np.empty((0, 4), dtype=np.float64)
    return np.array([c.rgba for c in colors], dtype=np.float64)


def render_strip(width: int, colors: Sequence[Color] | None = None) -> np.ndarray:
    """
    Sample a left-to-right linear gradient with evenly spaced stops at the
    centre of each of `width` pixels. Returns a (width, 4) RGBA array.
    """
    if isinstance(width, bool) or not isinstance(width, numbers.Integral):
        raise ValueError("width must be a positive integer")
    if width <= 0:
        raise ValueError("width must be a positive integer")
    width = int(width)
    stops = gradient_array(colors)
    if len(stops) == 0:
        raise ValueError("cannot render an empty gradient")
    if len(stops) == 1:
        return np.repeat(stops, width, axis=0)

    xs = (np.arange(width, dtype=np.float64) + 0.5) / width
    positions = np.linspace(0.0, 1.0, len(stops))
    strip = np.stack(
        [np.interp(xs, positions, stops[:, ch]) for ch in range(4)], axis=-1
    )
    log.debug("rendered %d px strip from %d stops", width, len(stops))
    return strip


def to_hex_list(rgba: np.ndarray) -> list[str]:
    """Rows of an (N, 4) RGBA array -> list of RRGGBB strings."""
    return [Color(*map(float, row)).hex_string() for row in np.asarray(rgba)]


__all__ = [
    "ANCHORS",
    "MIDPOINT",
    "gradient_length",
    "generate_gradient_colors",
    "gradient_array",
    "render_strip",
    "to_hex_list",
]
