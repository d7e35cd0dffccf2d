"""Helpers shared by the Teams message formatters."""

from pydantic import BaseModel, Field

from ctrf.teams_reporter.models.report import Environment

NO_BUILD_INFO = "No build information provided"
BUILD_FIELDS = ("buildName", "buildNumber", "buildUrl")
MESSAGE_CARD_CONTEXT = "http://schema.org/extensions"
FOOTER_TEXT = "[A CTRF plugin](https://github.com/ctrf-io/teams-ctrf)"


class EnvironmentInfo(BaseModel, frozen=True):
    """Build details resolved from a report environment."""

    build_info: str = Field(..., description="Markdown build label")
    build_url: str | None = Field(default=None, description="Link to the build")
    missing: tuple[str, ...] = Field(
        default=(), description="Environment properties absent from the report"
    )


def resolve_environment(environment: Environment | None) -> EnvironmentInfo:
    """Resolve the build label and missing properties of an environment.

    Args:
        environment: Environment block of the report, if any

    Returns:
        Build label (a markdown link when a build URL is known) and the
        names of build properties that are absent or empty

    """
    if environment is None:
        return EnvironmentInfo(build_info=NO_BUILD_INFO, missing=BUILD_FIELDS)

    name = environment.build_name
    number = environment.build_number
    url = environment.build_url

    build_info = NO_BUILD_INFO
    if name and number:
        label = f"{name} #{number}"
        build_info = f"[{label}]({url})" if url else label
    elif name or number:
        build_info = f"{name or ''} {number or ''}"

    values = (name, number, url)
    missing = tuple(
        field for field, value in zip(BUILD_FIELDS, values, strict=True) if not value
    )

    return EnvironmentInfo(
        build_info=build_info, build_url=url or None, missing=missing
    )


def format_duration(start: int, stop: int) -> str:
    """Format the elapsed time between two epoch millisecond timestamps.

    Returns "<1s" for runs shorter than a second, otherwise HH:MM:SS.
    Hours keep counting past 24.
    """
    seconds = (stop - start) / 1000
    if seconds < 1:
        return "<1s"

    hours, remainder = divmod(int(seconds), 3600)
    minutes, secs = divmod(remainder, 60)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"


def result_text(failed: int) -> str:
    """Describe the run outcome from its failed test count."""
    return f"{failed} failed tests" if failed > 0 else "Passed"


def missing_properties_section(missing: tuple[str, ...]) -> dict[str, object]:
    """Build the MessageCard section warning about missing properties."""
    return {
        "activitySubtitle": (
            f"&#x26A0; Missing environment properties: {', '.join(missing)}. "
            "Add these to your CTRF report for a better experience."
        ),
        "markdown": True,
    }


def footer_section() -> dict[str, object]:
    """Build the MessageCard attribution footer."""
    return {"text": FOOTER_TEXT, "markdown": True}


def message_card(
    title: str,
    theme_color: str,
    facts: list[dict[str, object]],
    env_info: EnvironmentInfo,
) -> dict[str, object]:
    """Assemble a MessageCard from its title, color and facts.

    The facts section is followed by the missing properties warning (when
    any build property is absent) and the attribution footer.
    """
    sections: list[dict[str, object]] = [
        {"activityTitle": title, "facts": facts, "markdown": True}
    ]

    if env_info.missing:
        sections.append(missing_properties_section(env_info.missing))

    sections.append(footer_section())

    return {
        "@type": "MessageCard",
        "@context": MESSAGE_CARD_CONTEXT,
        "summary": title,
        "themeColor": theme_color,
        "sections": sections,
    }
