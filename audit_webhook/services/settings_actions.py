"""
Actions backing the webhook settings form.

The form itself lives in the host application; it calls
:func:`send_test_webhook` when the administrator presses "Send test webhook"
and shows the returned message.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from audit_webhook.logging import get_logger
from audit_webhook.notification.errors import WebhookDeliveryError, WebhookNotConfiguredError
from audit_webhook.notification.webhook_notifier import WebhookNotifier

logger = get_logger(__name__)


@dataclass(frozen=True)
class TestWebhookResult:
    """
    Outcome of a test webhook, ready for display.

    Parameters
    ----------
    success
        True when the receiver answered with a 2xx status.
    message
        Human-readable outcome.
    status_code
        HTTP status of a rejected delivery, if any.
    """

    __test__ = False

    success: bool
    message: str
    status_code: Optional[int] = None


def send_test_webhook(notifier: WebhookNotifier, timeout_s: Optional[float] = None) -> TestWebhookResult:
    try:
        notifier.send_test_notification(timeout_s=timeout_s)
    except WebhookNotConfiguredError:
        return TestWebhookResult(success=False, message="Webhook URL is not configured")
    except WebhookDeliveryError as exc:
        logger.warning("webhook_test_failed", error=str(exc), stage=exc.stage, status=exc.status_code)
        return TestWebhookResult(
            success=False,
            message=f"Webhook delivery failed: {exc}",
            status_code=exc.status_code,
        )
    except (OSError, ValueError) as exc:
        logger.warning("webhook_test_failed", error=str(exc), stage="settings")
        return TestWebhookResult(success=False, message=f"Webhook settings could not be read: {exc}")

    return TestWebhookResult(success=True, message="Test webhook sent successfully")
