"""CLI entry point for the CTRF Teams reporter."""

import asyncio
import logging
import sys
from pathlib import Path
from typing import NoReturn

import typer

from ctrf.teams_reporter.delivery.teams import TeamsWebhookSender
from ctrf.teams_reporter.formatters.plain_text import format_failed_tests_message
from ctrf.teams_reporter.models.report import CtrfReport
from ctrf.teams_reporter.models.webhook_config import WebhookConfig
from ctrf.teams_reporter.report_loader import load_report
from ctrf.teams_reporter.reporter import TeamsReporter

# Configure logging - force reconfiguration
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    stream=sys.stderr,
    force=True,
)
logger = logging.getLogger(__name__)

app = typer.Typer(help="Send CTRF test results to Microsoft Teams.")

WEBHOOK_ENVVAR = "TEAMS_WEBHOOK_URL"


def _load(path: Path) -> CtrfReport:
    """Load the report or exit with an error."""
    try:
        return load_report(path)
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Failed to load report: {e}")
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


def _create_reporter(webhook_url: str | None) -> TeamsReporter:
    """Create a reporter posting to the configured webhook or exit."""
    if not webhook_url:
        message = f"Teams webhook URL is required (--webhook-url or {WEBHOOK_ENVVAR})"
        logger.error(message)
        typer.echo(f"Error: {message}", err=True)
        raise typer.Exit(code=1)

    config = WebhookConfig(webhook_url=webhook_url)
    return TeamsReporter(TeamsWebhookSender(config))


def _exit_on_send_error(e: Exception) -> NoReturn:
    logger.exception("Failed to send message")
    typer.echo(f"Error: {e}", err=True)
    raise typer.Exit(code=1)


@app.command()
def results(
    path: Path = typer.Argument(..., help="Path to the CTRF file"),  # noqa: B008
    on_fail_only: bool = typer.Option(
        False,
        "--on-fail-only",
        "-f",
        help="Send message only if there are failed tests",
    ),
    use_adaptive_card: bool = typer.Option(
        False, "--use-adaptive-card", "-a", help="Send message as adaptive card"
    ),
    webhook_url: str | None = typer.Option(
        None, envvar=WEBHOOK_ENVVAR, help="Teams incoming webhook URL"
    ),
) -> None:
    """Send test results summary to Teams."""
    report = _load(path)
    reporter = _create_reporter(webhook_url)

    try:
        sent = asyncio.run(
            reporter.send_results(
                report,
                on_fail_only=on_fail_only,
                use_adaptive_card=use_adaptive_card,
            )
        )
    except Exception as e:
        _exit_on_send_error(e)

    if not sent:
        typer.echo("No failed tests, message not sent")


@app.command("fail-details")
def fail_details(
    path: Path = typer.Argument(..., help="Path to the CTRF file"),  # noqa: B008
) -> None:
    """Print failed test details."""
    report = _load(path)
    typer.echo(format_failed_tests_message(report))


@app.command()
def flaky(
    path: Path = typer.Argument(..., help="Path to the CTRF file"),  # noqa: B008
    webhook_url: str | None = typer.Option(
        None, envvar=WEBHOOK_ENVVAR, help="Teams incoming webhook URL"
    ),
) -> None:
    """Send flaky test results to Teams."""
    report = _load(path)
    reporter = _create_reporter(webhook_url)

    try:
        sent = asyncio.run(reporter.send_flaky(report))
    except Exception as e:
        _exit_on_send_error(e)

    if not sent:
        typer.echo("No flaky tests detected, message not sent")


@app.command()
def ai(
    path: Path = typer.Argument(..., help="Path to the CTRF file"),  # noqa: B008
    webhook_url: str | None = typer.Option(
        None, envvar=WEBHOOK_ENVVAR, help="Teams incoming webhook URL"
    ),
) -> None:
    """Send AI failure test summaries to Teams."""
    report = _load(path)
    reporter = _create_reporter(webhook_url)

    try:
        sent = asyncio.run(reporter.send_ai_summaries(report))
    except Exception as e:
        _exit_on_send_error(e)

    typer.echo(f"Sent {sent} AI summary messages")


if __name__ == "__main__":  # pragma: no cover
    app()
