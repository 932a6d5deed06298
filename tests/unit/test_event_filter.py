from __future__ import annotations

from audit_webhook.notification.event_filter import is_event_allowed, parse_event_filter


def test_empty_filter_allows_everything() -> None:
    assert is_event_allowed("SIGN_IN", "") is True
    assert is_event_allowed("ANYTHING", "   ") is True


def test_listed_event_is_allowed_with_whitespace() -> None:
    assert is_event_allowed("SIGN_IN", "TOKEN_SIGN_IN, SIGN_IN") is True


def test_unlisted_event_is_rejected() -> None:
    assert is_event_allowed("SIGN_IN", "TOKEN_SIGN_IN") is False


def test_match_is_exact_and_case_sensitive() -> None:
    assert is_event_allowed("sign_in", "SIGN_IN") is False
    assert is_event_allowed("SIGN", "SIGN_IN") is False


def test_parse_event_filter_drops_empty_entries() -> None:
    assert parse_event_filter(" A ,, B ,") == ["A", "B"]
