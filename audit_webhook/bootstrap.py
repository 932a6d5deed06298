from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import requests

from audit_webhook.core.config.settings_provider import SettingsProvider, YamlSettingsProvider
from audit_webhook.core.config.yaml_config import AppConfig, load_app_config, resolve_config_path
from audit_webhook.logging import configure_logging
from audit_webhook.notification.notification_thread import NotificationThreadConfig, NotificationWorkerThread
from audit_webhook.notification.webhook_notifier import WebhookNotifier


@dataclass(frozen=True)
class NotifierWiring:
    """Everything the host application needs to send audit webhooks."""
    config: AppConfig
    settings: SettingsProvider
    notifier: WebhookNotifier
    worker: NotificationWorkerThread


def build_worker(notifier: WebhookNotifier, cfg: NotificationThreadConfig | None = None) -> NotificationWorkerThread:
    return NotificationWorkerThread(notifiers=[notifier], cfg=cfg)


def build_notifier_system(
    config_path: Optional[str] = None,
    session: Optional[requests.Session] = None,
    start_worker: bool = True,
) -> NotifierWiring:
    cfg = load_app_config(config_path)

    # --- LOGGING ---
    configure_logging(
        level=cfg.logging.level,
        json_output=cfg.logging.json_output,
        log_file=cfg.logging.log_file,
    )

    # --- SETTINGS (re-read per dispatch) ---
    settings = YamlSettingsProvider(resolve_config_path(config_path))

    # --- NOTIFIER ---
    notifier = WebhookNotifier(settings=settings, session=session)

    # --- WORKER ---
    worker = build_worker(notifier)
    if start_worker:
        worker.start()

    return NotifierWiring(config=cfg, settings=settings, notifier=notifier, worker=worker)
