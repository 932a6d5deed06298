from __future__ import annotations

import time
from typing import Optional

import requests

from audit_webhook.core.config.settings_provider import SettingsProvider
from audit_webhook.domain.events import AuditEvent
from audit_webhook.domain.models import WebhookSettings
from audit_webhook.logging import get_logger
from audit_webhook.notification.destination import serialize_for_destination
from audit_webhook.notification.errors import (
    WebhookDeliveryError,
    WebhookError,
    WebhookNotConfiguredError,
)
from audit_webhook.notification.event_filter import is_event_allowed
from audit_webhook.notification.payload import (
    NotificationPayload,
    build_event_payload,
    build_test_payload,
)

logger = get_logger(__name__)

# Raised by requests while preparing the request, before any I/O.
_REQUEST_BUILD_ERRORS = (
    requests.exceptions.MissingSchema,
    requests.exceptions.InvalidSchema,
    requests.exceptions.InvalidURL,
    requests.exceptions.InvalidHeader,
)


class WebhookNotifier:
    """
    Sends audit event notifications to the configured chat webhook.

    Settings are read from the provider at the start of every call. The
    notifier holds no other state and is safe to share between threads as
    long as the injected session is.

    Notes
    -----
    - ``notify_event`` logs every failure and never raises.
    - ``send_test_notification`` raises :class:`WebhookError` subclasses so
      an interactive caller can report what went wrong.
    """

    def __init__(self, settings: SettingsProvider, session: Optional[requests.Session] = None):
        """
        Parameters
        ----------
        settings
            Provider consulted for a fresh settings snapshot per call.
        session
            HTTP session used for POSTs. A new one is created if omitted.
        """
        self._settings = settings
        self._session = session or requests.Session()

    def notify_event(self, event: AuditEvent, timeout_s: Optional[float] = None) -> None:
        """
        Deliver a notification for an audit event, if enabled and allowed.

        Parameters
        ----------
        event
            The recorded audit event.
        timeout_s
            Optional deadline overriding the configured timeout.
        """
        kind = event.kind_name
        try:
            settings = self._settings.webhook_settings()
        except Exception as exc:
            logger.error("webhook_failed", error=str(exc), event=kind)
            return

        if not settings.url:
            logger.debug("webhook_skipped", reason="not_configured", event=kind)
            return

        if not is_event_allowed(kind, settings.events):
            logger.debug("webhook_skipped", reason="filtered", event=kind)
            return

        try:
            payload = build_event_payload(event)
        except Exception as exc:
            logger.error("webhook_failed", error=str(exc), event=kind)
            return

        try:
            status = self._send(settings, payload, timeout_s)
        except WebhookError as exc:
            logger.error("webhook_failed", error=str(exc), event=kind)
            return

        logger.info("webhook_sent", event=kind, status=status)

    def send_test_notification(self, timeout_s: Optional[float] = None) -> None:
        """
        Send the static test notification.

        Raises
        ------
        WebhookNotConfiguredError
            If no destination URL is configured.
        WebhookDeliveryError
            If serialization, request construction, transport or the
            response status fails.
        """
        settings = self._settings.webhook_settings()
        if not settings.url:
            raise WebhookNotConfiguredError()

        status = self._send(settings, build_test_payload(), timeout_s)
        logger.info("webhook_test_sent", status=status)

    def _send(
        self,
        settings: WebhookSettings,
        payload: NotificationPayload,
        timeout_s: Optional[float],
    ) -> int:
        try:
            body = serialize_for_destination(settings.url, payload, settings.payload_style)
        except (TypeError, ValueError) as exc:
            raise WebhookDeliveryError(f"failed to marshal webhook payload: {exc}", stage="marshal") from exc

        deadline_s = timeout_s if timeout_s is not None else settings.timeout_s
        started = time.monotonic()
        try:
            # stream=True returns after the headers; the body is never read.
            resp = self._session.post(
                settings.url,
                data=body,
                headers={"Content-Type": "application/json"},
                timeout=deadline_s,
                verify=settings.verify_tls,
                stream=True,
            )
        except _REQUEST_BUILD_ERRORS as exc:
            raise WebhookDeliveryError(f"failed to create webhook request: {exc}", stage="request") from exc
        except requests.RequestException as exc:
            raise WebhookDeliveryError(f"failed to send webhook request: {exc}", stage="transport") from exc

        try:
            # requests times each connect/read step, not the whole exchange.
            elapsed = time.monotonic() - started
            if elapsed > deadline_s:
                raise WebhookDeliveryError(
                    f"webhook request exceeded deadline of {deadline_s:g}s ({elapsed:.2f}s)",
                    stage="transport",
                )
            if not 200 <= resp.status_code < 300:
                raise WebhookDeliveryError(
                    f"webhook returned non-success status: {resp.status_code}",
                    stage="status",
                    status_code=resp.status_code,
                )
            return resp.status_code
        finally:
            resp.close()
