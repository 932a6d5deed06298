from __future__ import annotations

import sys
from datetime import datetime, timezone
from typing import List, Optional

from audit_webhook.bootstrap import build_notifier_system
from audit_webhook.domain.events import AuditEvent
from audit_webhook.services.settings_actions import send_test_webhook


def _arg_value(argv: List[str], flag: str) -> Optional[str]:
    if flag in argv:
        i = argv.index(flag)
        if i + 1 < len(argv):
            return argv[i + 1]
    return None


def sample_event(kind: str) -> AuditEvent:
    """Audit event with realistic values, for trying out a receiver."""
    return AuditEvent(
        kind=kind,
        created_at=datetime.now(timezone.utc),
        username="jane.doe",
        ip_address="203.0.113.7",
        country="FR",
        city="Paris",
        user_agent="Mozilla/5.0 (X11; Linux x86_64) Firefox/128.0",
        data={"clientName": "Grafana"},
    )


def main(argv: Optional[List[str]] = None) -> int:
    """
    Send a test webhook or a sample audit event using config.yaml.

    Notes
    -----
    - Optional CLI usage:
        python -m audit_webhook.dev.run_notifier --config path/to/config.yaml
        python -m audit_webhook.dev.run_notifier --event SIGN_IN
    """
    argv = sys.argv[1:] if argv is None else argv

    wiring = build_notifier_system(config_path=_arg_value(argv, "--config"), start_worker=False)

    kind = _arg_value(argv, "--event")
    if kind is None:
        result = send_test_webhook(wiring.notifier)
        print(result.message)
        return 0 if result.success else 1

    # Synchronous here so the process does not exit before the POST.
    wiring.notifier.notify_event(sample_event(kind))
    return 0


if __name__ == "__main__":
    sys.exit(main())
