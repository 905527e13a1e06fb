"""Flask API for text_lines."""

from __future__ import annotations

from flask import Flask, jsonify, request

from .lines import join_lines, prefix_lines, split_lines, trim_line

OPERATIONS = ("join", "split", "prefix", "trim")


def _is_str_list(value) -> bool:
    return isinstance(value, list) and all(isinstance(v, str) for v in value)


def create_app() -> Flask:
    """Create and configure the Flask application."""
    app = Flask(__name__)

    def _body() -> dict | None:
        data = request.get_json(force=True, silent=True)
        return data if isinstance(data, dict) else None

    def _text_field(data: dict, key: str):
        """Return (value, None) or (None, error response) for a string field."""
        if key not in data:
            return None, (jsonify({"error": f"missing '{key}'"}), 400)
        value = data[key]
        if not isinstance(value, str):
            return None, (jsonify({"error": f"'{key}' must be a string"}), 400)
        return value, None

    # ── Lines ──────────────────────────────────────────────

    @app.route("/lines/join", methods=["POST"])
    def join():
        data = _body()
        if data is None:
            return jsonify({"error": "expected a JSON object"}), 400
        if "lines" not in data:
            return jsonify({"error": "missing 'lines'"}), 400
        lines = data["lines"]
        if not _is_str_list(lines):
            return jsonify({"error": "'lines' must be a list of strings"}), 400
        return jsonify({"text": join_lines(lines)})

    @app.route("/lines/split", methods=["POST"])
    def split():
        data = _body()
        if data is None:
            return jsonify({"error": "expected a JSON object"}), 400
        text, error = _text_field(data, "text")
        if error:
            return error
        return jsonify({"lines": split_lines(text)})

    @app.route("/lines/prefix", methods=["POST"])
    def prefix():
        data = _body()
        if data is None:
            return jsonify({"error": "expected a JSON object"}), 400
        prfx, error = _text_field(data, "prefix")
        if error:
            return error
        text, error = _text_field(data, "text")
        if error:
            return error
        return jsonify({"text": prefix_lines(prfx, text)})

    @app.route("/lines/trim", methods=["POST"])
    def trim():
        data = _body()
        if data is None:
            return jsonify({"error": "expected a JSON object"}), 400
        text, error = _text_field(data, "text")
        if error:
            return error
        return jsonify({"text": trim_line(text)})

    # ── Status ─────────────────────────────────────────────

    @app.route("/status")
    def status():
        return jsonify({"operations": list(OPERATIONS)})

    return app


def main():
    """Run the API server."""
    app = create_app()
    app.run(host="127.0.0.1", port=5577, debug=True)


if __name__ == "__main__":
    main()
