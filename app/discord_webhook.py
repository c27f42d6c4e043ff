"""
Discord webhook client used for the notification relay and audit lines
"""
from typing import Optional

import requests

from app.errors import ProviderError
from app.logger import LOG

# Discord rejects message content above this length
MAX_CONTENT_LENGTH = 2000


class DiscordWebhookError(ProviderError):
    def __init__(self, status_code: int, body: str):
        super().__init__(f"Discord webhook error ({status_code}): {body}")
        self.upstream_status = status_code


class DiscordWebhook:
    def __init__(self, webhook_url: Optional[str], timeout: float = 30.0):
        self.webhook_url = webhook_url
        self.timeout = timeout

    def post_message(self, content: str) -> None:
        """Post a text message to the webhook, raising on any non-2xx answer"""
        if not self.webhook_url:
            raise ProviderError("DISCORD_WEBHOOK_URL not configured")

        if len(content) > MAX_CONTENT_LENGTH:
            content = content[:MAX_CONTENT_LENGTH - 3] + "..."

        resp = requests.post(self.webhook_url, json={"content": content}, timeout=self.timeout)
        if not resp.ok:
            raise DiscordWebhookError(resp.status_code, resp.text)


def send_audit_message(webhook: DiscordWebhook, message: str) -> None:
    """
    Best-effort audit line, scheduled as a background task.
    Failures are logged and never reach the caller.
    """
    try:
        webhook.post_message(message)
    except Exception as e:
        LOG.warning(f"Audit message not delivered: {e}")
