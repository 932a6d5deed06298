"""
Receiver-specific payload shaping.

Discord-compatible receivers expect the notification under ``"embeds"``;
Slack incoming webhooks expect it under ``"attachments"``. The shape is
picked right before serialization, from an explicit style or from the URL.
"""

from __future__ import annotations

import json
from dataclasses import asdict
from typing import Any, Dict

from audit_webhook.domain.models import PayloadStyle
from audit_webhook.notification.payload import NotificationPayload

SLACK_WEBHOOK_HOST = "hooks.slack.com"


def detect_style(url: str, preferred: PayloadStyle = PayloadStyle.AUTO) -> PayloadStyle:
    """
    Resolve the payload style for a destination.

    Parameters
    ----------
    url
        Destination URL.
    preferred
        Configured style. Anything other than AUTO is returned unchanged.

    Returns
    -------
    PayloadStyle
        EMBEDS or ATTACHMENTS, never AUTO.
    """
    preferred = PayloadStyle(preferred)
    if preferred is not PayloadStyle.AUTO:
        return preferred
    if SLACK_WEBHOOK_HOST in url:
        return PayloadStyle.ATTACHMENTS
    return PayloadStyle.EMBEDS


def to_wire_dict(
    url: str,
    payload: NotificationPayload,
    preferred: PayloadStyle = PayloadStyle.AUTO,
    content: str = "",
) -> Dict[str, Any]:
    """Build the JSON-ready body, omitting empty top-level keys."""
    embed = {
        "title": payload.title,
        "color": payload.color,
        "fields": [asdict(f) for f in payload.fields],
        "timestamp": payload.timestamp,
    }

    body: Dict[str, Any] = {}
    if content:
        body["content"] = content
    body[detect_style(url, preferred).value] = [embed]
    return body


def serialize_for_destination(
    url: str,
    payload: NotificationPayload,
    preferred: PayloadStyle = PayloadStyle.AUTO,
) -> bytes:
    """Serialize a payload as UTF-8 JSON in the destination's shape."""
    return json.dumps(to_wire_dict(url, payload, preferred)).encode("utf-8")
