"""Load and parse CTRF reports from JSON files."""

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from ctrf.teams_reporter.models.report import CtrfReport

logger = logging.getLogger(__name__)


def load_report(report_path: Path) -> CtrfReport:
    """Load a CTRF report from disk.

    Args:
        report_path: Path to the CTRF JSON file

    Returns:
        Parsed report

    Raises:
        FileNotFoundError: If the report file doesn't exist
        ValueError: If the file can't be read, the JSON is invalid or doesn't
            match the CTRF schema

    """
    if not report_path.exists():
        raise FileNotFoundError(f"Report file not found: {report_path}")

    try:
        with report_path.open(encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {report_path}: {e}") from e
    except OSError as e:
        raise ValueError(f"Cannot read {report_path}: {e}") from e

    try:
        report = CtrfReport.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Invalid CTRF report schema in {report_path}: {e}") from e

    logger.info(
        f"Loaded report {report_path} with {len(report.results.tests)} tests"
    )
    return report
