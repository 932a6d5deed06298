"""
Unit tests for audit_webhook.notification.payload.

These tests validate that the payload builders:
- produce the fixed fields with dash placeholders
- add one field per extra attribute
- format timestamps as RFC 3339 UTC

No I/O is performed.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from audit_webhook.domain.events import AuditEvent, AuditEventKind
from audit_webhook.notification.payload import (
    ACCENT_COLOR,
    PRODUCT_NAME,
    NotificationField,
    build_event_payload,
    build_test_payload,
)


def _mk_event(**overrides) -> AuditEvent:
    values = dict(
        kind=AuditEventKind.SIGN_IN,
        created_at=datetime(2026, 1, 1, 10, 0, 5, tzinfo=timezone.utc),
        username="alice",
        ip_address="198.51.100.4",
        country="US",
        city="Paris",
        user_agent="curl/8.0",
    )
    values.update(overrides)
    return AuditEvent(**values)


def test_build_event_payload_fixed_fields() -> None:
    payload = build_event_payload(_mk_event())

    assert payload.title == "Sign In"
    assert payload.color == ACCENT_COLOR
    assert payload.timestamp == "2026-01-01T10:00:05Z"
    assert payload.fields == [
        NotificationField("User", "alice", True),
        NotificationField("IP Address", "198.51.100.4", True),
        NotificationField("Location", "Paris, US", True),
        NotificationField("Device", "curl/8.0", True),
    ]


def test_build_event_payload_uses_placeholders_for_missing_values() -> None:
    payload = build_event_payload(
        _mk_event(username=None, ip_address=None, country=None, city=None, user_agent="")
    )

    assert [f.value for f in payload.fields] == ["-", "-", "-", "-"]


def test_build_event_payload_adds_extra_attributes() -> None:
    payload = build_event_payload(_mk_event(data={"clientName": "Grafana", "scope": ""}))

    extra = {f.name: f for f in payload.fields[4:]}
    assert len(payload.fields) == 6
    assert extra["clientName"].value == "Grafana"
    assert extra["scope"].value == "-"
    assert all(f.inline for f in extra.values())


def test_build_event_payload_keeps_unknown_kind_verbatim_in_title() -> None:
    payload = build_event_payload(_mk_event(kind="PASSKEY_ADDED"))
    assert payload.title == "Passkey Added"


def test_timestamp_is_converted_to_utc() -> None:
    cet = timezone(timedelta(hours=1))
    payload = build_event_payload(_mk_event(created_at=datetime(2026, 1, 1, 11, 0, 0, tzinfo=cet)))
    assert payload.timestamp == "2026-01-01T10:00:00Z"


def test_naive_timestamp_is_treated_as_utc() -> None:
    payload = build_event_payload(_mk_event(created_at=datetime(2026, 3, 2, 8, 30, 0)))
    assert payload.timestamp == "2026-03-02T08:30:00Z"


def test_build_test_payload() -> None:
    now = datetime(2026, 5, 6, 7, 8, 9, tzinfo=timezone.utc)
    payload = build_test_payload(now=now)

    assert payload.title == "Test Webhook"
    assert payload.color == ACCENT_COLOR
    assert payload.timestamp == "2026-05-06T07:08:09Z"
    assert payload.fields == [
        NotificationField("Status", "Connection successful", False),
        NotificationField("Source", PRODUCT_NAME, True),
    ]


def test_build_test_payload_defaults_to_current_time() -> None:
    before = datetime.now(timezone.utc).replace(microsecond=0)
    payload = build_test_payload()
    stamp = datetime.strptime(payload.timestamp, "%Y-%m-%dT%H:%M:%SZ").replace(tzinfo=timezone.utc)
    assert before <= stamp <= datetime.now(timezone.utc)
