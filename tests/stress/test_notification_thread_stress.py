"""
Stress tests for NotificationWorkerThread.

Validate:
- emit() is safe under concurrent calls from multiple threads
- every accepted event is delivered exactly once

Notes
-----
Thread stress tests are probabilistic: passing increases confidence but does not
prove the absence of races. Run repeatedly for higher confidence.
"""

from __future__ import annotations

import threading
from collections import Counter
from datetime import datetime, timezone
from typing import List, Optional

from audit_webhook.domain.events import AuditEvent
from audit_webhook.notification.notification_thread import NotificationThreadConfig, NotificationWorkerThread


class CountingNotifier:
    def __init__(self, expected: int) -> None:
        self._lock = threading.Lock()
        self.kinds: List[str] = []
        self._expected = expected
        self.done = threading.Event()

    def notify_event(self, event: AuditEvent, timeout_s: Optional[float] = None) -> None:
        with self._lock:
            self.kinds.append(event.kind_name)
            if len(self.kinds) >= self._expected:
                self.done.set()


def test_concurrent_emit_delivers_every_event_once() -> None:
    producers = 8
    per_producer = 250
    total = producers * per_producer

    notifier = CountingNotifier(expected=total)
    worker = NotificationWorkerThread(
        [notifier],
        NotificationThreadConfig(max_queue=total, poll_timeout_s=0.05),
    )
    worker.start()

    start = threading.Barrier(producers)

    def produce(p: int) -> None:
        start.wait()
        for i in range(per_producer):
            worker.emit(AuditEvent(kind=f"P{p}_E{i}", created_at=datetime.now(timezone.utc)))

    threads = [threading.Thread(target=produce, args=(p,)) for p in range(producers)]
    try:
        for t in threads:
            t.start()
        for t in threads:
            t.join(timeout=10.0)

        assert notifier.done.wait(timeout=10.0)
    finally:
        worker.stop()

    counts = Counter(notifier.kinds)
    assert len(counts) == total
    assert set(counts.values()) == {1}
