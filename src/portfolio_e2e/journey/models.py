"""Journey result models."""

from enum import Enum

from pydantic import BaseModel, Field


class StepStatus(str, Enum):
    """Outcome of a journey step that did not fail hard."""

    PASSED = "passed"
    SKIPPED = "skipped"
    SOFT_FAILED = "soft_failed"


class StepOutcome(BaseModel):
    """Recorded outcome of one journey step.

    Attributes:
        step: Step name, e.g. "send_message".
        status: passed, skipped or soft_failed.
        detail: Human readable notes, also attached to the report.
    """

    step: str
    status: StepStatus
    detail: str = ""


class JourneyReport(BaseModel):
    """Everything observed during one user journey.

    Hard failures never produce a report; they raise. Soft observations
    (login redirect, success banner, admin visibility) are kept here so
    tests can look at them without failing on them.
    """

    username: str
    steps: list[StepOutcome] = Field(default_factory=list)
    login_redirected: bool | None = None
    message_submitted: bool = False
    success_banner_shown: bool | None = None
    admin_dashboard_reachable: bool = False
    admin_message_found: bool | None = None

    def outcome(self, step: str) -> StepOutcome | None:
        for outcome in self.steps:
            if outcome.step == step:
                return outcome
        return None

    @property
    def soft_failures(self) -> list[StepOutcome]:
        return [s for s in self.steps if s.status is StepStatus.SOFT_FAILED]
