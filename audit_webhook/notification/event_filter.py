from __future__ import annotations

from typing import List


def parse_event_filter(filter_config: str) -> List[str]:
    """Split a comma-separated allow-list into trimmed, non-empty entries."""
    return [entry.strip() for entry in filter_config.split(",") if entry.strip()]


def is_event_allowed(event_kind: str, filter_config: str) -> bool:
    """
    Check whether an event kind may trigger a webhook.

    An empty filter allows every event. Otherwise the kind must match one
    trimmed entry exactly (case-sensitive).
    """
    if not filter_config or not filter_config.strip():
        return True
    return event_kind in parse_event_filter(filter_config)
