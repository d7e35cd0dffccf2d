"""Plain text rendering of failed tests."""

from ctrf.teams_reporter.models.report import CtrfReport, TestStatus

NO_FAILED_TESTS = "No failed tests."


def format_failed_tests_message(report: CtrfReport) -> str:
    """List the name and message of every failed test, in report order."""
    failed_tests = [
        test for test in report.results.tests if test.status == TestStatus.FAILED
    ]
    if not failed_tests:
        return NO_FAILED_TESTS

    message = "\n".join(
        f"Test: {test.name}\nMessage: {test.message or ''}\n" for test in failed_tests
    )
    return f"Failed Tests:\n{message}"
