from __future__ import annotations

import logging
import math
import string
from typing import Any, Mapping

from flask import Flask, jsonify, render_template, request

# Project-local algorithms
from .gradient import (
    DEFAULT_OPTIONS,
    LUMINANCE_ORDER,
    WIRE_NAMES,
    GradientOptions,
    create_gradient_with_oklch,
)
from .oklch import InvalidColorError, InvariantError
from .plot import LCPlot

log = logging.getLogger(__name__)

DEFAULT_COLOR = "#3b82f6"

# wire name → (label, min, max, step); bounds keep the sliders in a sane range
SLIDERS: Mapping[str, tuple[str, float, float, float]] = {
    "minL": ("Min Lightness (dark end)", 0.0, 0.5, 0.01),
    "maxL": ("Max Lightness (light end)", 0.5, 1.0, 0.01),
    "darkChroma": ("Dark Chroma", 0.0, 0.2, 0.001),
    "lightChroma": ("Light Chroma", 0.0, 0.2, 0.001),
    "mainColorStop": ("Main Color Stop", 0.1, 0.9, 0.01),
}

DEFAULT_CONFIG: Mapping[str, Any] = {
    "DEFAULT_COLOR": DEFAULT_COLOR,
    "LOG_LEVEL": "INFO",
    "PLOT_GRID_RESOLUTION": 40,
}


class BadRequest(ValueError):
    pass


def canon_hex(s: str) -> str:
    """Normalize to '#rrggbb'; anything but 3 or 6 hex digits raises InvalidColorError."""
    raw = (s or "").strip().lstrip("#")
    if len(raw) == 3 and all(c in string.hexdigits for c in raw):
        raw = "".join(ch * 2 for ch in raw)
    if len(raw) != 6 or not all(c in string.hexdigits for c in raw):
        raise InvalidColorError("hex must be 3 or 6 hex digits")
    return "#" + raw.lower()


def parse_options(args: Mapping[str, str]) -> GradientOptions:
    """Read the wire-named knobs; absent or blank ones keep their defaults."""
    overrides: dict[str, float] = {}
    for name, wire in WIRE_NAMES.items():
        val = args.get(wire)
        if val is None or not val.strip():
            continue
        try:
            num = float(val)
        except ValueError:
            raise BadRequest(f"{wire} must be a number") from None
        # float() accepts "inf" and "nan"
        if not math.isfinite(num):
            raise BadRequest(f"{wire} must be a number")
        overrides[name] = num
    return DEFAULT_OPTIONS.merged(overrides)


def sliders(opts: GradientOptions) -> list[dict[str, Any]]:
    values = opts.to_json()
    defaults = DEFAULT_OPTIONS.to_json()
    return [
        {
            "name": wire,
            "label": label,
            "min": lo,
            "max": hi,
            "step": step,
            "value": values[wire],
            "default": defaults[wire],
        }
        for wire, (label, lo, hi, step) in SLIDERS.items()
    ]


# ----------------------------- Flask app ----------------------------------


def create_app(test_config: Mapping[str, Any] | None = None) -> Flask:
    app = Flask(__name__, template_folder="templates")
    app.config.from_mapping(DEFAULT_CONFIG)
    app.config.from_prefixed_env("GRADIENT")
    if test_config:
        app.config.from_mapping(test_config)
    logging.basicConfig(
        level=app.config["LOG_LEVEL"], format="%(levelname)s: %(message)s"
    )

    plot = LCPlot(grid_resolution=int(app.config["PLOT_GRID_RESOLUTION"]))

    def inputs() -> tuple[str, GradientOptions]:
        color = canon_hex(request.args.get("color") or app.config["DEFAULT_COLOR"])
        return color, parse_options(request.args)

    def result_context() -> dict[str, Any]:
        color, opts = inputs()
        result = create_gradient_with_oklch(color, opts)
        return {
            "color": color,
            "default_color": app.config["DEFAULT_COLOR"],
            "sliders": sliders(opts),
            "order": LUMINANCE_ORDER,
            "result": result,
            "plot": plot.model(result),
        }

    @app.errorhandler(InvalidColorError)
    def invalid_color(exc: InvalidColorError):
        return jsonify({"error": f"invalid color: {exc}"}), 400

    @app.errorhandler(BadRequest)
    def bad_request(exc: BadRequest):
        return jsonify({"error": str(exc)}), 400

    @app.errorhandler(InvariantError)
    def invariant_violation(exc: InvariantError):
        log.exception("Gradient derivation failed")
        return jsonify({"error": str(exc)}), 500

    @app.route("/")
    def index():
        return render_template("index.html", **result_context())

    @app.route("/render")
    def render():
        return render_template("_result.html", **result_context())

    @app.route("/gradient")
    def gradient():
        color, opts = inputs()
        result = create_gradient_with_oklch(color, opts)
        payload = result.to_json()
        payload["color"] = color
        payload["options"] = opts.to_json()
        return jsonify(payload)

    return app


if __name__ == "__main__":
    create_app().run(debug=False, threaded=True)
