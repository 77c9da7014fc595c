from __future__ import annotations

import numpy as np

from .color import Color


def blend(color1: Color, color2: Color, location: float) -> Color:
    """Channel-wise lerp; `location` is not validated and results are not clamped."""
    r1, g1, b1, a1 = color1.rgba
    r2, g2, b2, a2 = color2.rgba
    return Color(
        r1 + (r2 - r1) * location,
        g1 + (g2 - g1) * location,
        b1 + (b2 - b1) * location,
        a1 + (a2 - a1) * location,
    )


def blend_arrays(a: np.ndarray, b: np.ndarray, t: np.ndarray | float) -> np.ndarray:
    """Vectorised blend of (..., 4) RGBA arrays; `t` broadcasts against them."""
    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)
    t = np.asarray(t, dtype=np.float64)
    if t.ndim and t.shape[-1:] != (1,):
        t = t[..., None]
    return a + (b - a) * t


__all__ = ["blend", "blend_arrays"]
