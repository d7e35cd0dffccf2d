"""Data models for CTRF reports and webhook configuration."""

from ctrf.teams_reporter.models.report import (
    CtrfReport,
    CtrfTest,
    Environment,
    Results,
    Summary,
    TestStatus,
    Tool,
)
from ctrf.teams_reporter.models.webhook_config import WebhookConfig

__all__ = [
    "CtrfReport",
    "CtrfTest",
    "Environment",
    "Results",
    "Summary",
    "TestStatus",
    "Tool",
    "WebhookConfig",
]
