"""
Audit event domain models.

An `AuditEvent` is a record of a security-relevant account action (sign-in,
authorization grant, account creation) produced by the audit-logging layer
after it has persisted the event. The webhook notifier only reads it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Mapping, Optional, Union


class AuditEventKind(str, Enum):
    """
    Known audit event kinds.

    Members
    -------
    SIGN_IN : str
        Interactive sign-in.
    TOKEN_SIGN_IN : str
        Sign-in with a one-time access token.
    ACCOUNT_CREATED : str
        A new account was created.
    CLIENT_AUTHORIZATION : str
        An already-authorized client was authorized again.
    NEW_CLIENT_AUTHORIZATION : str
        A client was authorized for the first time.
    DEVICE_CODE_AUTHORIZATION : str
        Device-code flow authorization for a known client.
    NEW_DEVICE_CODE_AUTHORIZATION : str
        First device-code flow authorization for a client.
    """

    SIGN_IN = "SIGN_IN"
    TOKEN_SIGN_IN = "TOKEN_SIGN_IN"
    ACCOUNT_CREATED = "ACCOUNT_CREATED"
    CLIENT_AUTHORIZATION = "CLIENT_AUTHORIZATION"
    NEW_CLIENT_AUTHORIZATION = "NEW_CLIENT_AUTHORIZATION"
    DEVICE_CODE_AUTHORIZATION = "DEVICE_CODE_AUTHORIZATION"
    NEW_DEVICE_CODE_AUTHORIZATION = "NEW_DEVICE_CODE_AUTHORIZATION"


def kind_name(kind: Union[AuditEventKind, str]) -> str:
    """Return the raw identifier of a known or unrecognized event kind."""
    if isinstance(kind, AuditEventKind):
        return kind.value
    return str(kind)


@dataclass(frozen=True)
class AuditEvent:
    """
    Audit event consumed by the webhook notifier.

    Parameters
    ----------
    kind
        Event kind. Unrecognized identifiers are kept verbatim as strings.
    created_at
        When the event was recorded. Naive datetimes are treated as UTC.
    username
        Optional username of the affected account.
    ip_address
        Optional client IP address.
    country
        Optional country resolved from the IP address.
    city
        Optional city resolved from the IP address.
    user_agent
        Optional user-agent string of the client device.
    data
        Extra string attributes attached by the producer.
    """

    kind: Union[AuditEventKind, str]
    created_at: datetime
    username: Optional[str] = None
    ip_address: Optional[str] = None
    country: Optional[str] = None
    city: Optional[str] = None
    user_agent: Optional[str] = None
    data: Mapping[str, str] = field(default_factory=dict)

    @property
    def kind_name(self) -> str:
        return kind_name(self.kind)
