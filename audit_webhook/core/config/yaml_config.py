from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from audit_webhook.domain.models import PayloadStyle, WebhookSettings

CONFIG_ENV_VAR = "AUDIT_WEBHOOK_CONFIG"


@dataclass(frozen=True)
class LoggingConfig:
    """Logging setup applied at process start."""
    level: str = "INFO"
    json_output: bool = True
    log_file: Optional[str] = None


@dataclass(frozen=True)
class AppConfig:
    """
    Root configuration loaded from YAML.

    ``webhook`` is only a startup snapshot. Dispatch reads settings through a
    provider so edits are picked up without a restart.
    """
    webhook: WebhookSettings
    logging: LoggingConfig


def read_yaml(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError("config.yaml must contain a YAML mapping at the root")
    return data


def resolve_config_path(path: Optional[str] = None) -> Path:
    """
    Resolve config.yaml location.

    Priority:
    1) explicit path
    2) AUDIT_WEBHOOK_CONFIG env var if provided
    3) config.yaml next to the executable
    4) ./config.yaml in current working directory
    """
    if path:
        return Path(path).expanduser().resolve()

    env = os.getenv(CONFIG_ENV_VAR)
    if env:
        return Path(env).expanduser().resolve()

    exe_dir = Path(sys.executable).resolve().parent
    candidate = exe_dir / "config.yaml"
    if candidate.exists():
        return candidate

    return Path("config.yaml").resolve()


def _events_value(raw: Any) -> str:
    # Accept both "A, B" and a YAML list.
    if raw is None:
        return ""
    if isinstance(raw, (list, tuple)):
        return ",".join(str(x).strip() for x in raw)
    return str(raw)


def _payload_style(raw: Any) -> PayloadStyle:
    if raw is None or raw == "":
        return PayloadStyle.AUTO
    try:
        return PayloadStyle(str(raw).strip().lower())
    except ValueError:
        allowed = ", ".join(s.value for s in PayloadStyle)
        raise ValueError(f"webhook.payload_style must be one of: {allowed} (got {raw!r})") from None


def _bool_value(raw: Any, name: str, default: bool) -> bool:
    # Quoted "false" is a truthy string; only real YAML booleans are accepted.
    if raw is None:
        return default
    if not isinstance(raw, bool):
        raise ValueError(f"{name} must be true or false (got {raw!r})")
    return raw


def parse_webhook_settings(raw: Dict[str, Any]) -> WebhookSettings:
    """
    Convert the ``webhook`` section of a config mapping into settings.

    Raises
    ------
    ValueError
        If the section or one of its values is malformed.
    """
    w = raw.get("webhook") or {}
    if not isinstance(w, dict):
        raise ValueError("webhook section must be a mapping")

    try:
        timeout_s = float(w.get("timeout_s", 10.0))
    except (TypeError, ValueError):
        raise ValueError(f"webhook.timeout_s must be a number (got {w.get('timeout_s')!r})") from None

    return WebhookSettings(
        url=str(w.get("url") or "").strip(),
        events=_events_value(w.get("events")),
        timeout_s=timeout_s,
        verify_tls=_bool_value(w.get("verify_tls"), "webhook.verify_tls", True),
        payload_style=_payload_style(w.get("payload_style")),
    )


def load_app_config(path: Optional[str] = None) -> AppConfig:
    """
    Load configuration from YAML and convert it into typed config objects.

    Parameters
    ----------
    path
        Explicit path to config.yaml. If None, uses default resolution.

    Raises
    ------
    FileNotFoundError
        If config file does not exist.
    ValueError
        If fields are invalid.
    """
    cfg_path = resolve_config_path(path)
    if not cfg_path.exists():
        raise FileNotFoundError(f"Config not found: {cfg_path}")

    raw = read_yaml(cfg_path)

    lg = raw.get("logging") or {}
    logging_cfg = LoggingConfig(
        level=str(lg.get("level", "INFO")),
        json_output=_bool_value(lg.get("json"), "logging.json", True),
        log_file=lg.get("log_file"),
    )

    return AppConfig(webhook=parse_webhook_settings(raw), logging=logging_cfg)
