from __future__ import annotations

import json
import logging
import sys

from audit_webhook.logging import JsonLogFormatter, get_logger


def test_structured_logger_attaches_fields(caplog) -> None:
    caplog.set_level(logging.INFO, logger="tests.structured")
    logger = get_logger("tests.structured")

    logger.info("webhook_sent", event="SIGN_IN", status=204)

    record = caplog.records[-1]
    assert record.getMessage() == "webhook_sent"
    assert record.fields == {"event": "SIGN_IN", "status": 204}


def test_json_formatter_renders_fields_and_exception() -> None:
    formatter = JsonLogFormatter()
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        exc_info = sys.exc_info()

    record = logging.LogRecord("tests.json", logging.ERROR, __file__, 1, "webhook_failed", None, exc_info)
    record.fields = {"event": "SIGN_IN", "error": "boom"}

    data = json.loads(formatter.format(record))

    assert data["level"] == "ERROR"
    assert data["logger"] == "tests.json"
    assert data["message"] == "webhook_failed"
    assert data["event"] == "SIGN_IN"
    assert "RuntimeError: boom" in data["exception"]
