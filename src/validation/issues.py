"""Validation issues and the failure shapes produced by the request gate."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

FALLBACK_MESSAGE = "Validation error"
ISSUE_SEPARATOR = ", "


class ValidationIssue(BaseModel):
    """One violated constraint."""

    model_config = ConfigDict(frozen=True)

    message: str
    path: tuple[str, ...] = Field(
        default=(),
        description="Region followed by field name, e.g. ('body', 'name')",
    )


class IssueList(BaseModel):
    """Structured failure: every issue collected while evaluating a schema."""

    model_config = ConfigDict(frozen=True)

    issues: tuple[ValidationIssue, ...] = Field(..., min_length=1)


class GenericFailure(BaseModel):
    """Unstructured failure, e.g. an undecodable body."""

    model_config = ConfigDict(frozen=True)

    message: str | None = None


ValidationFailure = IssueList | GenericFailure
"""Either a list of issues or a single message, never both."""


def describe_failure(failure: ValidationFailure) -> str:
    """Render the client-facing text for a failure."""

    if isinstance(failure, IssueList):
        return ISSUE_SEPARATOR.join(issue.message for issue in failure.issues)
    return failure.message or FALLBACK_MESSAGE


class RequestValidationFailure(Exception):
    """Raised by the gate to short-circuit a request with a 400 response."""

    def __init__(self, failure: ValidationFailure) -> None:
        super().__init__(describe_failure(failure))
        self.failure = failure

    @property
    def detail(self) -> str:
        return describe_failure(self.failure)
