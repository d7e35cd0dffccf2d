"""Select, build and dispatch Teams notifications for a CTRF report."""

import logging

from ctrf.teams_reporter.delivery.base import NotificationSender
from ctrf.teams_reporter.formatters.adaptive_card import (
    format_results_adaptive_card,
)
from ctrf.teams_reporter.formatters.message_card import (
    format_ai_summary_for_test,
    format_flaky_tests_message,
    format_results_message,
)
from ctrf.teams_reporter.models.report import CtrfReport

logger = logging.getLogger(__name__)


class TeamsReporter:
    """Sends CTRF report notifications through a sender."""

    def __init__(self, sender: NotificationSender) -> None:
        """Initialize reporter with the channel to deliver through."""
        self.sender = sender

    async def send_results(
        self,
        report: CtrfReport,
        on_fail_only: bool = False,
        use_adaptive_card: bool = False,
    ) -> bool:
        """Send the results summary.

        Args:
            report: Parsed CTRF report
            on_fail_only: Only send when the report has failed tests
            use_adaptive_card: Send an adaptive card instead of a MessageCard

        Returns:
            True if a message was sent

        """
        failed = report.results.summary.failed
        if on_fail_only and failed == 0:
            logger.info("No failed tests, results message not sent")
            return False

        if use_adaptive_card:
            payload = format_results_adaptive_card(report)
        else:
            payload = format_results_message(report)

        logger.info(f"Sending results message ({failed} failed tests)")
        await self.sender.send(payload)
        return True

    async def send_flaky(self, report: CtrfReport) -> bool:
        """Send the flaky test digest, if any test is flaky."""
        payload = format_flaky_tests_message(report)
        if payload is None:
            logger.info("No flaky tests detected, flaky message not sent")
            return False

        logger.info("Sending flaky tests message")
        await self.sender.send(payload)
        return True

    async def send_ai_summaries(self, report: CtrfReport) -> int:
        """Send one AI summary message per test carrying an AI summary.

        Returns:
            Number of messages sent

        """
        environment = report.results.environment
        payloads = []
        for test in report.results.tests:
            payload = format_ai_summary_for_test(test, environment)
            if payload is not None:
                payloads.append(payload)

        if not payloads:
            logger.info("No AI summaries found, no message sent")
            return 0

        logger.info(f"Sending {len(payloads)} AI summary messages")
        return await self.sender.send_all(payloads)
