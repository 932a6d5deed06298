"""
Unit tests for audit_webhook.domain.events.

These tests validate the audit event domain contracts:
- Enum stability for AuditEventKind
- Immutability of AuditEvent
- kind_name for known and unrecognized kinds
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError
from datetime import datetime, timezone

import pytest

from audit_webhook.domain.events import AuditEvent, AuditEventKind, kind_name


def test_audit_event_kind_values_are_stable() -> None:
    """
    Kind identifiers are what operators write into the event filter.
    """
    assert AuditEventKind.SIGN_IN.value == "SIGN_IN"
    assert AuditEventKind.TOKEN_SIGN_IN.value == "TOKEN_SIGN_IN"
    assert AuditEventKind.NEW_CLIENT_AUTHORIZATION.value == "NEW_CLIENT_AUTHORIZATION"


def test_kind_name_for_known_and_unknown_kinds() -> None:
    assert kind_name(AuditEventKind.ACCOUNT_CREATED) == "ACCOUNT_CREATED"
    assert kind_name("SOMETHING_NEW") == "SOMETHING_NEW"


def test_audit_event_defaults_and_kind_name() -> None:
    ev = AuditEvent(kind=AuditEventKind.SIGN_IN, created_at=datetime(2026, 1, 1, tzinfo=timezone.utc))

    assert ev.kind_name == "SIGN_IN"
    assert ev.username is None
    assert ev.ip_address is None
    assert ev.data == {}


def test_audit_event_is_frozen() -> None:
    ev = AuditEvent(kind="SIGN_IN", created_at=datetime(2026, 1, 1, tzinfo=timezone.utc))

    with pytest.raises(FrozenInstanceError):
        ev.username = "changed"  # type: ignore[misc]
