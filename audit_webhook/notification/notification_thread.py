from __future__ import annotations

import queue
import threading
from dataclasses import dataclass
from typing import List, Optional

from audit_webhook.domain.events import AuditEvent
from audit_webhook.logging import get_logger
from audit_webhook.notification.base import EventNotifier

logger = get_logger(__name__)

_STOP = object()


@dataclass(frozen=True)
class NotificationThreadConfig:
    max_queue: int = 2000
    poll_timeout_s: float = 0.5
    send_timeout_s: Optional[float] = None


class NotificationWorkerThread:
    """
    Background worker that delivers audit event notifications off the caller's path.

    The audit-logging code calls :meth:`emit` right after recording an event
    and moves on; webhook latency or failure never reaches it.

    Concurrency Model
    -----------------
    - One daemon thread drains a bounded queue.
    - ``emit`` is non-blocking and safe to call from any thread.
    - A full queue drops the newest event with a warning.
    - No retries. Events still queued at :meth:`stop` are discarded and counted
      in a warning.
    """

    def __init__(self, notifiers: List[EventNotifier], cfg: NotificationThreadConfig | None = None):
        self._notifiers = notifiers
        self._cfg = cfg or NotificationThreadConfig()
        self._q: "queue.Queue[object]" = queue.Queue(maxsize=self._cfg.max_queue)
        self._stop = threading.Event()
        self._thread = threading.Thread(target=self._run, name="webhook-notifier", daemon=True)

    @property
    def pending(self) -> int:
        return self._q.qsize()

    def start(self) -> None:
        if not self._thread.is_alive():
            self._thread.start()

    def stop(self, timeout: float = 2.0) -> None:
        self._stop.set()
        try:
            self._q.put_nowait(_STOP)
        except queue.Full:
            pass
        if self._thread.is_alive():
            self._thread.join(timeout=timeout)

        discarded = 0
        while True:
            try:
                item = self._q.get_nowait()
            except queue.Empty:
                break
            if item is not _STOP:
                discarded += 1
        if discarded:
            logger.warning("webhook_events_discarded", count=discarded, reason="stopped")

    def emit(self, event: AuditEvent) -> None:
        try:
            self._q.put_nowait(event)
        except queue.Full:
            logger.warning("webhook_event_dropped", event=event.kind_name, reason="queue_full")

    def _run(self) -> None:
        while not self._stop.is_set():
            try:
                item = self._q.get(timeout=self._cfg.poll_timeout_s)
            except queue.Empty:
                continue

            if item is _STOP:
                break

            for notifier in self._notifiers:
                self._deliver(notifier, item)  # type: ignore[arg-type]

    def _deliver(self, notifier: EventNotifier, event: AuditEvent) -> None:
        try:
            notifier.notify_event(event, timeout_s=self._cfg.send_timeout_s)
        except Exception:
            logger.exception("webhook_worker_error", event=event.kind_name)
