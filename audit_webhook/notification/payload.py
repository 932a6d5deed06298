from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Optional

from audit_webhook.domain.events import AuditEvent
from audit_webhook.notification.formatting import (
    format_location,
    title_from_event_kind,
    value_or_placeholder,
)

ACCENT_COLOR = 5814783
PRODUCT_NAME = "Audit Webhook"
TEST_TITLE = "Test Webhook"


@dataclass(frozen=True)
class NotificationField:
    """One name/value row of a notification, with an inline layout hint."""

    name: str
    value: str
    inline: bool = True


@dataclass
class NotificationPayload:
    """
    Destination-agnostic notification.

    The receiver-specific key ("embeds" or "attachments") is chosen later by
    the destination adapter.

    Parameters
    ----------
    title
        Notification headline.
    color
        Accent color as a 24-bit integer.
    fields
        Ordered display fields.
    timestamp
        RFC 3339 UTC timestamp.
    """

    title: str
    color: int
    fields: List[NotificationField] = field(default_factory=list)
    timestamp: str = ""


def _rfc3339_utc(ts: datetime) -> str:
    """
    Format a datetime as RFC 3339 in UTC with second precision.

    Naive datetimes are assumed to already be UTC.
    """
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    return ts.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def build_event_payload(event: AuditEvent) -> NotificationPayload:
    """
    Build the notification for an audit event.

    The four fixed fields come first, followed by one field per entry of
    ``event.data`` in the mapping's iteration order.
    """
    location = format_location(event.country, event.city)

    fields = [
        NotificationField("User", value_or_placeholder(event.username)),
        NotificationField("IP Address", value_or_placeholder(event.ip_address)),
        NotificationField("Location", value_or_placeholder(location)),
        NotificationField("Device", value_or_placeholder(event.user_agent)),
    ]
    for key, value in event.data.items():
        fields.append(NotificationField(key, value_or_placeholder(value)))

    return NotificationPayload(
        title=title_from_event_kind(event.kind_name),
        color=ACCENT_COLOR,
        fields=fields,
        timestamp=_rfc3339_utc(event.created_at),
    )


def build_test_payload(now: Optional[datetime] = None) -> NotificationPayload:
    """Build the static connectivity-check notification."""
    return NotificationPayload(
        title=TEST_TITLE,
        color=ACCENT_COLOR,
        fields=[
            NotificationField("Status", "Connection successful", inline=False),
            NotificationField("Source", PRODUCT_NAME, inline=True),
        ],
        timestamp=_rfc3339_utc(now or datetime.now(timezone.utc)),
    )
