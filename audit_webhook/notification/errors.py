"""
Webhook error hierarchy.

``WebhookNotConfiguredError`` and ``WebhookDeliveryError`` let the settings
action tell "nothing to send to" apart from "the send failed".
"""

from __future__ import annotations

from typing import Optional


class WebhookError(Exception):
    """Base class for webhook notification failures."""


class WebhookNotConfiguredError(WebhookError):
    """Raised when no destination URL is configured."""

    def __init__(self, message: str = "webhook URL is not configured") -> None:
        super().__init__(message)


class WebhookDeliveryError(WebhookError):
    """
    Raised when a payload could not be delivered.

    Attributes
    ----------
    stage
        First failure point: ``"marshal"``, ``"request"``, ``"transport"``
        or ``"status"``.
    status_code
        HTTP status code for ``"status"`` failures, otherwise None.
    """

    def __init__(self, message: str, stage: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.stage = stage
        self.status_code = status_code
