"""
Read-only access to webhook settings.

The notifier never holds on to settings: it asks a provider for a fresh
snapshot on every dispatch, so administrator changes apply to the next event.
"""

from __future__ import annotations

import threading
from dataclasses import replace
from pathlib import Path
from typing import Any, Protocol

from audit_webhook.core.config.yaml_config import read_yaml, parse_webhook_settings
from audit_webhook.domain.models import WebhookSettings


class SettingsProvider(Protocol):
    """
    Protocol for anything that can hand out a webhook settings snapshot.

    Methods
    -------
    webhook_settings()
        Return the current settings.
    """

    def webhook_settings(self) -> WebhookSettings:
        ...


class InMemorySettingsProvider:
    """
    Thread-safe in-process settings holder.

    Stands in for the application's settings store; ``update`` is what a
    settings form would call on save.
    """

    def __init__(self, settings: WebhookSettings | None = None):
        self._settings = settings or WebhookSettings()
        self._lock = threading.Lock()

    def webhook_settings(self) -> WebhookSettings:
        with self._lock:
            return self._settings

    def update(self, **changes: Any) -> WebhookSettings:
        """
        Replace selected settings fields.

        Parameters
        ----------
        **changes
            Field names of :class:`WebhookSettings` and their new values.

        Returns
        -------
        WebhookSettings
            The new snapshot.
        """
        with self._lock:
            self._settings = replace(self._settings, **changes)
            return self._settings


class YamlSettingsProvider:
    """
    Settings provider backed by a YAML file, re-read on every call.

    Raises the loader's ``FileNotFoundError``/``ValueError`` when the file is
    missing or malformed.
    """

    def __init__(self, path: str | Path):
        self._path = Path(path).expanduser().resolve()

    @property
    def path(self) -> Path:
        return self._path

    def webhook_settings(self) -> WebhookSettings:
        if not self._path.exists():
            raise FileNotFoundError(f"Config not found: {self._path}")
        return parse_webhook_settings(read_yaml(self._path))
