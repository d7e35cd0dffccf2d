"""Configuration model for webhook delivery."""

from pydantic import BaseModel, Field


class WebhookConfig(BaseModel):
    """Configuration for a Microsoft Teams incoming webhook."""

    webhook_url: str = Field(..., description="Teams incoming webhook URL")
    timeout: float = Field(
        default=30.0, description="Request timeout in seconds", gt=0
    )
