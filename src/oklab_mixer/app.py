from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from flask import Flask, jsonify, request

from .config import MAX_MIDPOINTS, configure_logging
from .gradient import DEFAULT_MIDPOINTS, generate_sequence
from .srgb import InvalidFormat, format_hex_string, parse_hex_string

log = logging.getLogger(__name__)


def parse_midpoints(val: str | None, cap: int) -> int:
    m = DEFAULT_MIDPOINTS if val in (None, "") else int(val)
    if m < 0:
        raise ValueError("m must be >= 0")
    return min(m, cap)


def mix_oklab(hex_a: str, hex_b: str, m: int) -> list[str]:
    """'#rrggbb' A→B through OKLab, endpoints included (m + 2 colors)."""
    a = parse_hex_string(hex_a)
    b = parse_hex_string(hex_b)
    return [format_hex_string(h) for h in generate_sequence(a, b, m)]


# ----------------------------- Flask app ----------------------------------


def create_app(config: Optional[Mapping[str, Any]] = None) -> Flask:
    app = Flask(__name__)
    app.config.update(MAX_MIDPOINTS=MAX_MIDPOINTS)
    if config:
        app.config.update(config)
    configure_logging(app.config.get("LOG_LEVEL"))

    @app.route("/mix")
    def mix():
        a = request.args.get("a", "ff0000")
        b = request.args.get("b", "0000ff")
        try:
            m = parse_midpoints(request.args.get("m"), app.config["MAX_MIDPOINTS"])
        except ValueError:
            return jsonify({"error": "m must be a non-negative integer"}), 400

        try:
            palette = mix_oklab(a, b, m)
        except InvalidFormat as e:
            return jsonify({"error": f"invalid color: {e}"}), 400
        except Exception as exc:
            log.exception("Interpolation failed")
            return jsonify({"error": str(exc)}), 500

        return jsonify(palette)

    return app


if __name__ == "__main__":
    create_app().run(debug=False, threaded=True)
