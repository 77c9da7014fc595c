from __future__ import annotations

import logging
import math
from typing import Any, Callable, Generic, List, TypeVar

from .color import Color, Hex
from .gradient import generate_gradient_colors
from .sampler import PickerGeometry, sample_index

log = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_TITLE = "Цвет"
BRIGHTNESS_STEP = 0.1


class Binding(Generic[T]):
    """Read/write handle onto a value owned by someone else."""

    def __init__(self, getter: Callable[[], T], setter: Callable[[T], None]) -> None:
        self._get = getter
        self._set = setter

    @classmethod
    def constant(cls, value: T) -> "Binding[T]":
        """Always reads `value`; writes are dropped."""
        return cls(lambda: value, lambda v: None)

    @classmethod
    def of(cls, obj: Any, attr: str) -> "Binding[Any]":
        return cls(lambda: getattr(obj, attr), lambda v: setattr(obj, attr, v))

    @property
    def value(self) -> T:
        return self._get()

    @value.setter
    def value(self, v: T) -> None:
        self._set(v)


def _snap_brightness(value: float) -> float:
    if math.isnan(value):
        raise ValueError("brightness must be a number in [0, 1]")
    v = 0.0 if value <= 0.0 else 1.0 if value >= 1.0 else float(value)
    return round(round(v / BRIGHTNESS_STEP) * BRIGHTNESS_STEP, 10)


class ColorPicker:
    """
    Gradient-bar colour picker state.

    The selected colour and the visibility flag live with the caller and are
    reached through bindings; brightness belongs to the picker and starts at
    1.0 for every new instance.
    """

    def __init__(
        self,
        selected_color: Binding[Color],
        show_color_picker: Binding[bool],
        geometry: PickerGeometry | None = None,
        title: str = DEFAULT_TITLE,
    ) -> None:
        self.selected_color = selected_color
        self.show_color_picker = show_color_picker
        self.geometry = geometry or PickerGeometry()
        self.title = title
        self._brightness = 1.0

    @property
    def brightness(self) -> float:
        return self._brightness

    @brightness.setter
    def brightness(self, value: float) -> None:
        self._brightness = _snap_brightness(value)

    @property
    def is_open(self) -> bool:
        return bool(self.show_color_picker.value)

    @property
    def label(self) -> Hex:
        return self.selected_color.value.hex_string()

    @property
    def swatch_color(self) -> Color:
        return self.selected_color.value.brightened(1.0 - self._brightness)

    def toggle(self) -> bool:
        self.show_color_picker.value = not self.show_color_picker.value
        return self.show_color_picker.value

    def gradient_colors(self) -> List[Color]:
        return generate_gradient_colors()

    def get_color(self, at: float) -> Color:
        colors = self.gradient_colors()
        return colors[sample_index(at, self.geometry.width, len(colors))]

    def drag(self, x: float) -> Color | None:
        """Pick the colour under `x`; a hidden picker ignores drags."""
        if not self.is_open:
            return None
        color = self.get_color(x)
        self.selected_color.value = color
        log.debug("drag x=%.2f -> %s", x, color.hex_string())
        return color


__all__ = ["Binding", "ColorPicker", "BRIGHTNESS_STEP", "DEFAULT_TITLE"]
