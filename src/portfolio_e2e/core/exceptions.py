"""Portfolio E2E exception hierarchy.

Hard failures raise one of these (or a Playwright error, which is left
untouched). Soft checks never raise; they return False and log instead.
"""


class PortfolioE2EError(Exception):
    """Base exception for all suite errors."""

    pass


class ConfigurationError(PortfolioE2EError):
    """Raised when configuration is invalid or missing.

    Example:
        raise ConfigurationError("Selector override file is not valid JSON")
    """

    pass


class FixtureDataError(PortfolioE2EError):
    """Raised when the JSON test fixture is missing, malformed or inconsistent.

    Example:
        raise FixtureDataError("Expected exactly one adminUser, found 2")
    """

    pass


class UserNotFoundError(FixtureDataError, LookupError):
    """Raised when a fixture user lookup has no match.

    Attributes:
        username: The username that was looked up, None for admin lookups.
    """

    def __init__(self, message: str, username: str | None = None) -> None:
        self.username = username
        super().__init__(message)


class StepAssertionError(PortfolioE2EError, AssertionError):
    """Raised when a hard journey assertion fails.

    Subclasses AssertionError so pytest reports it as a test failure
    rather than an error.

    Attributes:
        step: Name of the journey step that failed.
    """

    def __init__(self, step: str, message: str) -> None:
        self.step = step
        super().__init__(f"[{step}] {message}")
