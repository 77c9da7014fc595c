from __future__ import annotations

import logging
from typing import Any, Mapping

from flask import Flask, current_app, jsonify, request

from .color import Color, parse_color
from .gradient import ANCHORS, generate_gradient_colors, render_strip, to_hex_list
from .picker import DEFAULT_TITLE, Binding, ColorPicker
from .sampler import (
    DEFAULT_HORIZONTAL_PADDING,
    DEFAULT_SCREEN_WIDTH,
    PickerGeometry,
    sample_index,
)

log = logging.getLogger(__name__)

DEFAULTS: Mapping[str, Any] = {
    "PICKER_SCREEN_WIDTH": DEFAULT_SCREEN_WIDTH,
    "PICKER_HORIZONTAL_PADDING": DEFAULT_HORIZONTAL_PADDING,
    "PICKER_TITLE": DEFAULT_TITLE,
    "MAX_STRIP_WIDTH": 4096,
}


def _geometry() -> PickerGeometry:
    cfg = current_app.config
    return PickerGeometry(
        screen_width=float(cfg["PICKER_SCREEN_WIDTH"]),
        horizontal_padding=float(cfg["PICKER_HORIZONTAL_PADDING"]),
    )


def _float_arg(name: str, default: float | None = None) -> float:
    raw = request.args.get(name)
    if raw is None:
        if default is None:
            raise ValueError(f"missing '{name}'")
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number") from None


def _color_json(c: Color) -> dict[str, Any]:
    return {
        "hex": c.hex_string(),
        "red": c.red,
        "green": c.green,
        "blue": c.blue,
        "alpha": c.alpha,
    }


# ----------------------------- Flask app ----------------------------------


def create_app(config: Mapping[str, Any] | None = None) -> Flask:
    app = Flask(__name__)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

    app.config.from_mapping(DEFAULTS)
    app.config.from_prefixed_env("COLOR_PICKER")
    if config:
        app.config.from_mapping(config)

    @app.errorhandler(ValueError)
    def bad_request(exc: ValueError):
        return jsonify({"error": str(exc)}), 400

    @app.errorhandler(500)
    def server_error(exc: Exception):
        cause = getattr(exc, "original_exception", None) or exc
        log.exception("Request failed", exc_info=cause)
        return jsonify({"error": str(cause)}), 500

    @app.route("/")
    def index():
        geometry = _geometry()
        return jsonify(
            {
                "title": app.config["PICKER_TITLE"],
                "anchors": [c.hex_string() for c in ANCHORS],
                "gradient": [c.hex_string() for c in generate_gradient_colors()],
                "width": geometry.width,
            }
        )

    @app.route("/gradient")
    def gradient():
        return jsonify([c.hex_string() for c in generate_gradient_colors()])

    @app.route("/strip")
    def strip():
        try:
            width = int(request.args.get("width", 0))
        except ValueError:
            return jsonify({"error": "width must be an integer"}), 400
        limit = int(app.config["MAX_STRIP_WIDTH"])
        if not 0 < width <= limit:
            return jsonify({"error": f"width must be in 1..{limit}"}), 400
        return jsonify(to_hex_list(render_strip(width)))

    @app.route("/color")
    def color():
        x = _float_arg("x")
        width = _float_arg("width", _geometry().width)
        colors = generate_gradient_colors()
        index = sample_index(x, width, len(colors))
        return jsonify({"index": index, "hex": colors[index].hex_string()})

    @app.route("/hex/<value>")
    def decode_hex(value: str):
        return jsonify(_color_json(Color.from_hex(value)))

    @app.route("/swatch")
    def swatch():
        selected = parse_color(request.args.get("color", "#ffffff"))
        picker = ColorPicker(
            Binding.constant(selected),
            Binding.constant(False),
            geometry=_geometry(),
            title=app.config["PICKER_TITLE"],
        )
        picker.brightness = _float_arg("brightness", 1.0)
        return jsonify(
            {
                "color": picker.label,
                "brightness": picker.brightness,
                "swatch": picker.swatch_color.hex_string(),
            }
        )

    return app


__all__ = ["create_app", "DEFAULTS"]
