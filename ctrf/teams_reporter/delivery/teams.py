"""Microsoft Teams incoming webhook sender."""

import logging
from collections.abc import Mapping

import aiohttp

from ctrf.teams_reporter.delivery.base import NotificationSender
from ctrf.teams_reporter.models.webhook_config import WebhookConfig

logger = logging.getLogger(__name__)


class TeamsWebhookSender(NotificationSender):
    """Posts message documents to a Teams incoming webhook."""

    def __init__(self, config: WebhookConfig) -> None:
        """Initialize sender with webhook configuration."""
        self.config = config

    async def send(self, payload: Mapping[str, object]) -> None:
        """Post the payload as JSON to the webhook."""
        timeout = aiohttp.ClientTimeout(total=self.config.timeout)

        async with aiohttp.ClientSession(timeout=timeout) as session:
            async with session.post(
                self.config.webhook_url,
                headers={"Content-Type": "application/json"},
                json=payload,
            ) as response:
                if not 200 <= response.status < 300:
                    text = await response.text()
                    raise RuntimeError(
                        f"Failed to send message to Teams: {response.status} {text}"
                    )

        logger.info("Message sent to Teams")
