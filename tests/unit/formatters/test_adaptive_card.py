"""Tests for the adaptive card formatter."""

import json
from typing import Any

import pytest

from ctrf.teams_reporter.formatters.adaptive_card import (
    STATUS_STYLES,
    format_results_adaptive_card,
)
from ctrf.teams_reporter.models.report import (
    CtrfReport,
    Environment,
    Results,
    Summary,
    TestStatus,
)


def make_report(
    summary: Summary | None = None, environment: Environment | None = None
) -> CtrfReport:
    """Build a report with the given summary and environment."""
    return CtrfReport(
        results=Results(
            summary=summary
            or Summary(
                passed=4, failed=0, skipped=2, pending=1, other=3, start=0, stop=65000
            ),
            environment=environment,
        )
    )


def card_content(envelope: dict[str, Any]) -> dict[str, Any]:
    """Return the adaptive card inside the message envelope."""
    content: dict[str, Any] = envelope["attachments"][0]["content"]
    return content


def test_status_styles_cover_every_status() -> None:
    """Every test status has a style."""
    assert set(STATUS_STYLES) == set(TestStatus)
    assert STATUS_STYLES[TestStatus.SKIPPED].chart_color == "divergingCyan"
    assert STATUS_STYLES[TestStatus.SKIPPED].text_color == "accent"
    assert STATUS_STYLES[TestStatus.PENDING].text_color == "default"


def test_status_styles_are_read_only() -> None:
    """The style table cannot be modified."""
    with pytest.raises(TypeError):
        STATUS_STYLES[TestStatus.PASSED] = STATUS_STYLES[TestStatus.FAILED]  # type: ignore[index]


def test_envelope() -> None:
    """Card is wrapped in a Teams message attachment."""
    envelope = format_results_adaptive_card(make_report())

    assert envelope["type"] == "message"
    attachments = envelope["attachments"]
    assert isinstance(attachments, list)
    assert len(attachments) == 1
    assert attachments[0]["contentType"] == "application/vnd.microsoft.card.adaptive"
    content = card_content(envelope)
    assert content["$schema"] == "http://adaptivecards.io/schemas/adaptive-card.json"
    assert content["type"] == "AdaptiveCard"
    assert content["version"] == "1.5"
    assert content["msteams"] == {"width": "Full"}


def test_passed_title_defaults() -> None:
    """Passing run without environment uses default titles."""
    content = card_content(format_results_adaptive_card(make_report()))

    title = content["body"][0]
    assert title["type"] == "Container"
    assert title["style"] == "good"
    assert title["bleed"] is True
    assert title["items"][0]["text"] == "✅  CTRF Test Results"
    assert title["items"][0]["size"] == "Large"
    assert content["speak"] == "CTRF Test Results. Passed in 00:01:05"
    assert content["actions"] == []


def test_failed_title_uses_app_name() -> None:
    """Failing run shows the failed style and app name."""
    report = make_report(
        summary=Summary(passed=1, failed=2, start=0, stop=100),
        environment=Environment(app_name="shop"),
    )

    content = card_content(format_results_adaptive_card(report))

    title = content["body"][0]
    assert title["style"] == "attention"
    assert title["items"][0]["text"] == "❌  shop Test Results"
    assert content["speak"] == "shop Test Results. 2 failed tests in <1s"


def test_skipped_only_run_is_passed() -> None:
    """Skipped, pending and other counts do not affect the banner."""
    report = make_report(
        summary=Summary(skipped=3, pending=2, other=1, start=0, stop=100)
    )
    content = card_content(format_results_adaptive_card(report))
    assert content["body"][0]["style"] == "good"


def test_donut_chart() -> None:
    """Chart holds one data point per status in fixed order."""
    content = card_content(format_results_adaptive_card(make_report()))

    columns = content["body"][1]["columns"]
    assert columns[0]["width"] == "100px"
    chart = columns[0]["items"][0]
    assert chart["type"] == "Chart.Donut"
    assert chart["title"] == "Summary"
    assert chart["data"] == [
        {"legend": "Passed", "color": "good", "value": 4},
        {"legend": "Failed", "color": "attention", "value": 0},
        {"legend": "Skipped", "color": "divergingCyan", "value": 2},
        {"legend": "Pending", "color": "neutral", "value": 1},
        {"legend": "Other", "color": "warning", "value": 3},
    ]


def test_details_column() -> None:
    """Details column holds tally, results and duration rows."""
    content = card_content(format_results_adaptive_card(make_report()))

    details = content["body"][1]["columns"][1]
    assert details["width"] == "stretch"
    assert details["verticalContentAlignment"] == "center"
    tally, results, duration = details["items"]

    tally_blocks = [column["items"][0] for column in tally["columns"]]
    assert tally_blocks[0] == {
        "type": "TextBlock",
        "text": "Summary:",
        "weight": "Bolder",
    }
    assert [block["text"] for block in tally_blocks[1:]] == [
        "✅ 4",
        "❌ 0",
        "⏩️ 2",
        "⌛ 1",
        "❓️ 3",
    ]
    assert [block["color"] for block in tally_blocks[1:]] == [
        "good",
        "attention",
        "accent",
        "default",
        "warning",
    ]

    assert [c["items"][0]["text"] for c in results["columns"]] == [
        "Results:",
        "Passed",
    ]
    assert [c["items"][0]["text"] for c in duration["columns"]] == [
        "Duration:",
        "00:01:05",
    ]


def test_build_action() -> None:
    """Build URL becomes an open URL action titled with the build."""
    report = make_report(
        environment=Environment(
            build_name="main", build_number="42", build_url="https://ci/42"
        )
    )

    content = card_content(format_results_adaptive_card(report))

    assert content["actions"] == [
        {"type": "Action.OpenUrl", "title": "main #42", "url": "https://ci/42"}
    ]


@pytest.mark.parametrize(
    ("environment", "expected_title"),
    [
        (Environment(build_name="main", build_url="https://ci"), "main"),
        (Environment(build_number="42", build_url="https://ci"), "42"),
        (Environment(build_url="https://ci"), "Build Info"),
    ],
)
def test_build_action_title_fallbacks(
    environment: Environment, expected_title: str
) -> None:
    """Action title falls back to whichever build field is present."""
    content = card_content(
        format_results_adaptive_card(make_report(environment=environment))
    )
    assert content["actions"][0]["title"] == expected_title


def test_no_action_without_build_url() -> None:
    """No actions without a build URL."""
    report = make_report(environment=Environment(build_name="main", build_number="1"))
    content = card_content(format_results_adaptive_card(report))
    assert content["actions"] == []


def test_adaptive_card_is_json_serializable() -> None:
    """Adaptive card survives a JSON round trip."""
    envelope = format_results_adaptive_card(
        make_report(environment=Environment(build_url="https://ci"))
    )
    assert json.loads(json.dumps(envelope)) == envelope
