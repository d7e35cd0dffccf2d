"""Build Teams MessageCard payloads from CTRF reports."""

from ctrf.teams_reporter.formatters.common import (
    format_duration,
    message_card,
    resolve_environment,
    result_text,
)
from ctrf.teams_reporter.models.report import CtrfReport, CtrfTest, Environment

RESULTS_TITLE = "CTRF Test Results"
FLAKY_TITLE = "Flaky Test Report"
AI_SUMMARY_TITLE = "AI Test Summary"
NO_AI_SUMMARY = "No AI summary provided."

FAILED_COLOR = "FF0000"
PASSED_COLOR = "36a64f"
FLAKY_COLOR = "#FFA500"


def format_results_message(report: CtrfReport) -> dict[str, object]:
    """Build the results summary card.

    Args:
        report: Parsed CTRF report

    Returns:
        MessageCard with the outcome tally, result, duration and build

    """
    summary = report.results.summary
    env_info = resolve_environment(report.results.environment)

    tally = (
        f"&#x2705; {summary.passed} | &#x274C; {summary.failed} | "
        f"&#x23E9; {summary.skipped} | &#x23F3; {summary.pending} | "
        f"&#x2753; {summary.other}"
    )

    facts: list[dict[str, object]] = [
        {"name": "Test Summary", "value": tally},
        {"name": "Results", "value": result_text(summary.failed)},
        {
            "name": "Duration",
            "value": f"*Duration:* {format_duration(summary.start, summary.stop)}",
        },
        {"name": "Build", "value": env_info.build_info},
    ]

    color = FAILED_COLOR if summary.failed > 0 else PASSED_COLOR
    return message_card(RESULTS_TITLE, color, facts, env_info)


def format_flaky_tests_message(report: CtrfReport) -> dict[str, object] | None:
    """Build the flaky test digest card.

    Returns None when no test in the report is flagged as flaky.
    """
    flaky_tests = [test for test in report.results.tests if test.flaky]
    if not flaky_tests:
        return None

    env_info = resolve_environment(report.results.environment)
    flaky_text = "\n".join(f"- {test.name}" for test in flaky_tests)

    facts: list[dict[str, object]] = [
        {"name": "&#x1F342; Flaky Tests Detected"},
        {"name": "Flaky Tests", "value": flaky_text},
        {"name": "Build", "value": env_info.build_info},
    ]

    return message_card(FLAKY_TITLE, FLAKY_COLOR, facts, env_info)


def format_ai_summary_for_test(
    test: CtrfTest, environment: Environment | None
) -> dict[str, object] | None:
    """Build the AI failure summary card for a single test.

    Returns None when the test has no AI summary at all. An empty summary
    still produces a card, carrying a placeholder text.
    """
    if test.ai is None:
        return None

    env_info = resolve_environment(environment)

    facts: list[dict[str, object]] = [
        {"name": "Test Name", "value": test.name},
        {"name": "Status", "value": "Failed"},
        {"name": "&#x2728; AI Summary", "value": test.ai or NO_AI_SUMMARY},
        {"name": "Build", "value": env_info.build_info},
    ]

    return message_card(AI_SUMMARY_TITLE, FAILED_COLOR, facts, env_info)
