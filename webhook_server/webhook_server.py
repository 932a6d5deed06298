"""
Local capture receiver for audit webhooks.

Point ``webhook.url`` at ``http://127.0.0.1:8000/webhook`` (or at a path
containing ``hooks.slack.com`` to exercise the attachments shape) and inspect
what the notifier sends via ``/api/recent``.
"""

from __future__ import annotations

import os
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv
from flask import Flask, jsonify, request

MAX_EVENTS = 500

# Load .env from the executable directory so it stays editable
EXE_DIR = Path(sys.executable).resolve().parent if getattr(sys, "frozen", False) else Path(__file__).resolve().parent
load_dotenv(EXE_DIR / ".env")


def _now_iso() -> str:
    return datetime.now().isoformat(timespec="seconds")


def detect_body_style(body: Dict[str, Any]) -> Optional[str]:
    """Return "embeds" or "attachments" for a well-formed body, else None."""
    has_embeds = isinstance(body.get("embeds"), list)
    has_attachments = isinstance(body.get("attachments"), list)
    if has_embeds == has_attachments:
        return None
    return "embeds" if has_embeds else "attachments"


def create_app(fail_status: Optional[int] = None) -> Flask:
    """
    Build the capture app.

    Parameters
    ----------
    fail_status
        If set, every POST is answered with this status, to try out error
        reporting in the test-webhook action. Defaults to the
        ``CAPTURE_FAIL_STATUS`` env var.
    """
    app = Flask(__name__)

    if fail_status is None and os.getenv("CAPTURE_FAIL_STATUS"):
        fail_status = int(os.environ["CAPTURE_FAIL_STATUS"])

    events: List[Dict[str, Any]] = []
    app.config["CAPTURED_EVENTS"] = events

    @app.post("/webhook")
    @app.post("/webhook/<path:suffix>")
    def capture(suffix: str = ""):
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return jsonify({"error": "expected a JSON object"}), 400

        style = detect_body_style(data)
        events.append({"received_at": _now_iso(), "path": request.path, "style": style, "body": data})
        if len(events) > MAX_EVENTS:
            del events[:-MAX_EVENTS]

        if fail_status is not None:
            return jsonify({"error": "configured failure"}), fail_status
        if style is None:
            return jsonify({"error": "body must carry exactly one of embeds/attachments"}), 422
        return jsonify({"status": "ok", "style": style}), 200

    @app.get("/api/recent")
    def api_recent():
        recent = list(reversed(events[-200:]))
        return jsonify({"count": len(events), "events": recent}), 200

    @app.get("/health")
    def health():
        return jsonify({"status": "ok"}), 200

    return app


if __name__ == "__main__":
    create_app().run(host="127.0.0.1", port=int(os.getenv("CAPTURE_PORT", "8000")), debug=False)
