from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class PayloadStyle(str, Enum):
    """
    Receiver payload shape.

    Members
    -------
    AUTO : str
        Pick the shape from the destination URL.
    EMBEDS : str
        Discord-style body, fields under ``"embeds"``.
    ATTACHMENTS : str
        Slack-style body, fields under ``"attachments"``.
    """

    AUTO = "auto"
    EMBEDS = "embeds"
    ATTACHMENTS = "attachments"


@dataclass(frozen=True)
class WebhookSettings:
    """
    Webhook settings snapshot taken at the start of each dispatch.

    Parameters
    ----------
    url
        Destination URL. Empty disables delivery.
    events
        Comma-separated allow-list of event kinds. Empty allows every event.
    timeout_s
        HTTP request deadline in seconds.
    verify_tls
        Whether to verify TLS certificates.
    payload_style
        Receiver payload shape, or AUTO to detect it from the URL.
    """

    url: str = ""
    events: str = ""
    timeout_s: float = 10.0
    verify_tls: bool = True
    payload_style: PayloadStyle = PayloadStyle.AUTO

    @property
    def enabled(self) -> bool:
        return bool(self.url)
