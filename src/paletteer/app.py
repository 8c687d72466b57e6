from __future__ import annotations

import logging
import math
from typing import Any, Mapping, cast

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from .color_convert import Swatch
from .hsba import HSBA
from .palette import SCHEDULES, Schedule, tonal_palette

log = logging.getLogger(__name__)

DEFAULTS: Mapping[str, Any] = {
    "PALETTE_DEFAULT_STEPS": 13,
    "PALETTE_MAX_STEPS": 512,
    "PALETTE_DEFAULT_GAMMA": 1.35,
    "HCT_MAX_CHROMA": 200.0,
    "LOG_LEVEL": "INFO",
}


def describe(swatch: Swatch) -> dict[str, Any]:
    """Everything the colour-values panel shows, as JSON-ready data."""
    hct = swatch.hct
    return {
        "rgba": list(swatch.rgba),
        "hex": swatch.hex_rgb,
        "hex_rgba": swatch.hex_rgba,
        "argb": swatch.rgb_int,
        "hsba": swatch.hsba.label,
        "hct": {"hue": hct.hue, "chroma": hct.chroma, "tone": hct.tone, "label": hct.label},
        "luminance": swatch.luminance,
        "is_light": swatch.is_light,
        "contrasting": swatch.contrasting_color.hex_rgb,
    }


def parse_float(
    name: str, default: float, *, lo: float | None = None, hi: float | None = None
) -> float:
    val = request.args.get(name)
    if val is None or val == "":
        return default
    try:
        v = float(val)
    except ValueError:
        raise ValueError(f"{name} must be a number") from None
    if not math.isfinite(v):
        raise ValueError(f"{name} must be a finite number")
    if (lo is not None and v < lo) or (hi is not None and v > hi):
        raise ValueError(f"{name} must be between {lo} and {hi}")
    return v


def parse_schedule(val: str | None) -> Schedule:
    s = (val or "ease").strip().lower()
    if s not in SCHEDULES:
        raise ValueError(f"unknown schedule '{s}'")
    return cast(Schedule, s)


# ----------------------------- Flask app ----------------------------------


def create_app(config: Mapping[str, Any] | None = None) -> Flask:
    app = Flask(__name__)
    app.config.from_mapping(DEFAULTS)
    if config:
        app.config.from_mapping(config)
    logging.basicConfig(
        level=app.config["LOG_LEVEL"], format="%(levelname)s: %(message)s"
    )

    @app.errorhandler(ValueError)
    def bad_request(exc: ValueError):
        return jsonify({"error": str(exc)}), 400

    @app.errorhandler(Exception)
    def failed(exc: Exception):
        if isinstance(exc, HTTPException):
            return exc
        log.exception("Request failed")
        return jsonify({"error": str(exc)}), 500

    @app.route("/color")
    def color():
        return jsonify(describe(Swatch.from_hex(request.args.get("hex", ""))))

    @app.route("/hct")
    def hct():
        swatch = Swatch.from_hct(
            parse_float("h", 180.0),
            parse_float("c", 50.0, lo=0.0, hi=float(app.config["HCT_MAX_CHROMA"])),
            parse_float("t", 50.0, lo=0.0, hi=100.0),
        )
        return jsonify(describe(swatch))

    @app.route("/hsba")
    def hsba():
        label = request.args.get("label", "")
        return jsonify(describe(Swatch.from_hsba(HSBA.parse(label))))

    @app.route("/decode")
    def decode():
        swatch = Swatch.from_raw(request.args.get("raw", ""))
        if swatch is None:
            return jsonify({"error": "undecodable color"}), 400
        return jsonify(describe(swatch))

    @app.route("/palette")
    def palette():
        seed = request.args.get("seed", "")
        try:
            n = int(request.args.get("n", app.config["PALETTE_DEFAULT_STEPS"]))
        except ValueError:
            return jsonify({"error": "n must be an integer"}), 400
        n = max(3, min(n, int(app.config["PALETTE_MAX_STEPS"])))
        schedule = parse_schedule(request.args.get("schedule"))
        gamma = parse_float("gamma", float(app.config["PALETTE_DEFAULT_GAMMA"]))
        return jsonify(tonal_palette(seed, n, schedule=schedule, gamma=gamma))

    return app


if __name__ == "__main__":
    create_app().run(debug=False)
