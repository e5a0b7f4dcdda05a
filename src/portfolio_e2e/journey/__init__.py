"""Multi-actor journey: a user sends a message, an admin looks for it."""

from portfolio_e2e.journey.models import JourneyReport, StepOutcome, StepStatus
from portfolio_e2e.journey.orchestrator import UserJourney

__all__ = ["JourneyReport", "StepOutcome", "StepStatus", "UserJourney"]
