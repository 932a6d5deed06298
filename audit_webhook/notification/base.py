from __future__ import annotations

from typing import Optional, Protocol

from audit_webhook.domain.events import AuditEvent


class EventNotifier(Protocol):
    """
    Protocol interface for audit event notification delivery.

    Any object providing ``notify_event(event, timeout_s=None)`` can be driven
    by the notification worker, which keeps the worker testable with fakes.

    Methods
    -------
    notify_event(event, timeout_s=None)
        Deliver a notification for one audit event. Implementations handle
        their own failures; the worker only guards against unexpected ones.
    """

    def notify_event(self, event: AuditEvent, timeout_s: Optional[float] = None) -> None:
        ...
