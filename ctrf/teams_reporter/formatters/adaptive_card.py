"""Build the Teams adaptive card for CTRF test results."""

from types import MappingProxyType

from pydantic import BaseModel

from ctrf.teams_reporter.formatters.common import format_duration, result_text
from ctrf.teams_reporter.models.report import CtrfReport, Environment, TestStatus

ADAPTIVE_CARD_CONTENT_TYPE = "application/vnd.microsoft.card.adaptive"
ADAPTIVE_CARD_SCHEMA = "http://adaptivecards.io/schemas/adaptive-card.json"
ADAPTIVE_CARD_VERSION = "1.5"
DEFAULT_APP_TITLE = "CTRF"
DEFAULT_BUILD_TITLE = "Build Info"


class StatusStyle(BaseModel, frozen=True):
    """Visual treatment of a test status."""

    emoji: str
    chart_color: str
    text_color: str


STATUS_STYLES = MappingProxyType(
    {
        TestStatus.PASSED: StatusStyle(
            emoji="✅", chart_color="good", text_color="good"
        ),
        TestStatus.FAILED: StatusStyle(
            emoji="❌", chart_color="attention", text_color="attention"
        ),
        TestStatus.SKIPPED: StatusStyle(
            emoji="⏩️", chart_color="divergingCyan", text_color="accent"
        ),
        TestStatus.PENDING: StatusStyle(
            emoji="⌛", chart_color="neutral", text_color="default"
        ),
        TestStatus.OTHER: StatusStyle(
            emoji="❓️", chart_color="warning", text_color="warning"
        ),
    }
)


def _resolve_titles(environment: Environment | None) -> tuple[str, str, str | None]:
    """Resolve app title, build title and build URL for the card."""
    app_title = DEFAULT_APP_TITLE
    build_title = DEFAULT_BUILD_TITLE
    build_url = None

    if environment is not None:
        name = environment.build_name
        number = environment.build_number
        if environment.app_name:
            app_title = environment.app_name
        if name and number:
            build_title = f"{name} #{number}"
        elif name or number:
            build_title = f"{name or ''}{number or ''}"
        if environment.build_url:
            build_url = environment.build_url

    return app_title, build_title, build_url


def _column(item: dict[str, object], width: str = "auto") -> dict[str, object]:
    return {"type": "Column", "width": width, "items": [item]}


def _label_row(label: str, value: str) -> dict[str, object]:
    """Row of a bold label followed by a bold value."""
    return {
        "type": "ColumnSet",
        "columns": [
            _column(
                {"type": "TextBlock", "text": label, "weight": "Bolder", "wrap": True}
            ),
            _column(
                {"type": "TextBlock", "text": value, "weight": "Bolder", "wrap": True}
            ),
        ],
    }


def format_results_adaptive_card(report: CtrfReport) -> dict[str, object]:
    """Build the results adaptive card with a donut chart of outcomes.

    Args:
        report: Parsed CTRF report

    Returns:
        Teams message envelope carrying a single adaptive card attachment

    """
    summary = report.results.summary
    app_title, build_title, build_url = _resolve_titles(report.results.environment)

    counts = {
        TestStatus.PASSED: summary.passed,
        TestStatus.FAILED: summary.failed,
        TestStatus.SKIPPED: summary.skipped,
        TestStatus.PENDING: summary.pending,
        TestStatus.OTHER: summary.other,
    }
    title_style = STATUS_STYLES[
        TestStatus.FAILED if summary.failed > 0 else TestStatus.PASSED
    ]
    results = result_text(summary.failed)
    elapsed = format_duration(summary.start, summary.stop)

    title_container = {
        "type": "Container",
        "items": [
            {
                "type": "TextBlock",
                "size": "Large",
                "weight": "Bolder",
                "text": f"{title_style.emoji}  {app_title} Test Results",
                "wrap": True,
            }
        ],
        "style": title_style.text_color,
        "bleed": True,
    }

    chart = {
        "title": "Summary",
        "data": [
            {
                "legend": status.value.capitalize(),
                "color": STATUS_STYLES[status].chart_color,
                "value": count,
            }
            for status, count in counts.items()
        ],
        "type": "Chart.Donut",
    }

    tally_row = {
        "type": "ColumnSet",
        "columns": [
            _column({"type": "TextBlock", "text": "Summary:", "weight": "Bolder"}),
            *(
                _column(
                    {
                        "type": "TextBlock",
                        "text": f"{STATUS_STYLES[status].emoji} {count}",
                        "color": STATUS_STYLES[status].text_color,
                        "weight": "Bolder",
                        "wrap": True,
                    }
                )
                for status, count in counts.items()
            ),
        ],
    }

    details = {
        "type": "Column",
        "width": "stretch",
        "verticalContentAlignment": "center",
        "items": [
            tally_row,
            _label_row("Results:", results),
            _label_row("Duration:", elapsed),
        ],
    }

    actions: list[dict[str, object]] = []
    if build_url:
        actions.append(
            {"type": "Action.OpenUrl", "title": build_title, "url": build_url}
        )

    return {
        "type": "message",
        "attachments": [
            {
                "contentType": ADAPTIVE_CARD_CONTENT_TYPE,
                "content": {
                    "$schema": ADAPTIVE_CARD_SCHEMA,
                    "type": "AdaptiveCard",
                    "version": ADAPTIVE_CARD_VERSION,
                    "speak": f"{app_title} Test Results. {results} in {elapsed}",
                    "msteams": {"width": "Full"},
                    "body": [
                        title_container,
                        {
                            "type": "ColumnSet",
                            "columns": [_column(chart, width="100px"), details],
                        },
                    ],
                    "actions": actions,
                },
            }
        ],
    }
