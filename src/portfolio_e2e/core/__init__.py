"""Core definitions shared across the suite."""

from portfolio_e2e.core.exceptions import (
    ConfigurationError,
    FixtureDataError,
    PortfolioE2EError,
    StepAssertionError,
    UserNotFoundError,
)

__all__ = [
    "ConfigurationError",
    "FixtureDataError",
    "PortfolioE2EError",
    "StepAssertionError",
    "UserNotFoundError",
]
