"""Models for CTRF (Common Test Report Format) reports."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TestStatus(str, Enum):
    """Outcome of a single test case."""

    __test__ = False

    PASSED = "passed"
    FAILED = "failed"
    SKIPPED = "skipped"
    PENDING = "pending"
    OTHER = "other"


class CtrfModel(BaseModel):
    """Base model accepting both camelCase CTRF keys and field names."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class Tool(CtrfModel):
    """Tool that produced the report."""

    name: str = Field(default="", description="Test tool name")
    version: str | None = Field(default=None, description="Test tool version")


class Summary(CtrfModel):
    """Aggregate counts and timing of a test run."""

    tests: int = Field(default=0, description="Total number of tests")
    passed: int = Field(default=0, description="Number of passed tests")
    failed: int = Field(default=0, description="Number of failed tests")
    skipped: int = Field(default=0, description="Number of skipped tests")
    pending: int = Field(default=0, description="Number of pending tests")
    other: int = Field(default=0, description="Number of tests with other status")
    start: int = Field(..., description="Run start, milliseconds since epoch")
    stop: int = Field(..., description="Run stop, milliseconds since epoch")


class Environment(CtrfModel):
    """Descriptive metadata about the environment the tests ran in."""

    app_name: str | None = Field(default=None, alias="appName")
    app_version: str | None = Field(default=None, alias="appVersion")
    build_name: str | None = Field(default=None, alias="buildName")
    build_number: str | None = Field(default=None, alias="buildNumber")
    build_url: str | None = Field(default=None, alias="buildUrl")
    repository_name: str | None = Field(default=None, alias="repositoryName")
    repository_url: str | None = Field(default=None, alias="repositoryUrl")
    branch_name: str | None = Field(default=None, alias="branchName")
    test_environment: str | None = Field(default=None, alias="testEnvironment")

    @field_validator("app_name", "build_name", "build_number", mode="before")
    @classmethod
    def _stringify_numbers(cls, value: object) -> object:
        # CI systems commonly emit build numbers and names as integers
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


class CtrfTest(CtrfModel):
    """Single test case result."""

    name: str = Field(default="", description="Test name")
    status: TestStatus = Field(default=TestStatus.OTHER, description="Test outcome")
    duration: float = Field(default=0, description="Test duration in milliseconds")
    message: str | None = Field(default=None, description="Failure message")
    trace: str | None = Field(default=None, description="Failure stack trace")
    flaky: bool = Field(default=False, description="Result varied across retries")
    retries: int = Field(default=0, description="Number of retries")
    ai: str | None = Field(default=None, description="AI generated failure summary")

    @field_validator("name", mode="before")
    @classmethod
    def _name_or_empty(cls, value: object) -> object:
        return "" if value is None else value


class Results(CtrfModel):
    """Results block of a CTRF report."""

    tool: Tool | None = Field(default=None, description="Reporting tool")
    summary: Summary = Field(..., description="Aggregate run summary")
    tests: list[CtrfTest] = Field(default_factory=list, description="Test cases")
    environment: Environment | None = Field(
        default=None, description="Run environment metadata"
    )


class CtrfReport(CtrfModel):
    """Root object of a CTRF JSON report."""

    results: Results = Field(..., description="Test run results")
