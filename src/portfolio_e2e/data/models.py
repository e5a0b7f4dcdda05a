"""Fixture data Pydantic models.

The JSON fixture uses camelCase keys (``userType``, ``expectedResult``);
the models expose snake_case attributes and accept both spellings.
"""

from collections import Counter
from enum import Enum

import structlog
from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from portfolio_e2e.core.exceptions import FixtureDataError, UserNotFoundError

logger = structlog.get_logger(__name__)


class UserType(str, Enum):
    """Role of a fixture user."""

    STANDARD = "standardUser"
    ADMIN = "adminUser"


class ExpectedResult(str, Enum):
    """Expected outcome category of a login credential scenario."""

    SUCCESS = "success"
    VALIDATION_ERROR = "validation_error"
    EMPTY_FIELDS = "empty_fields"


class _FixtureModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class TestUser(_FixtureModel):
    """A user record from the fixture file.

    Attributes:
        username: Unique lookup key.
        user_type: standardUser or adminUser.
        name: Display name, also what the admin searches for.
        email: Login email.
        password: Login password.
        phone: Phone number for the contact form.
        message: Body of the contact message this user sends.
    """

    __test__ = False  # not a pytest test class

    username: str = Field(min_length=1)
    user_type: UserType = UserType.STANDARD
    name: str
    email: str
    password: str
    phone: str = ""
    message: str = ""

    @property
    def is_admin(self) -> bool:
        return self.user_type is UserType.ADMIN


class LoginCredentialScenario(_FixtureModel):
    """Credentials paired with the login outcome they should produce."""

    email: str = ""
    password: str = ""
    expected_result: ExpectedResult


class TestDataSet(_FixtureModel):
    """The whole fixture document.

    Invariants checked at construction:
        - usernames are unique
        - exactly one adminUser exists
    Duplicate expected_result categories are allowed; lookups return the
    first entry in file order.
    """

    __test__ = False

    test_users: tuple[TestUser, ...] = ()
    login_credentials: tuple[LoginCredentialScenario, ...] = ()

    @model_validator(mode="after")
    def check_invariants(self) -> "TestDataSet":
        counts = Counter(user.username for user in self.test_users)
        duplicates = sorted(name for name, count in counts.items() if count > 1)
        if duplicates:
            raise FixtureDataError(f"Duplicate usernames in fixture: {duplicates}")

        admins = [user for user in self.test_users if user.is_admin]
        if len(admins) != 1:
            raise FixtureDataError(
                f"Expected exactly one {UserType.ADMIN.value}, found {len(admins)}"
            )

        categories = Counter(c.expected_result for c in self.login_credentials)
        for category, count in categories.items():
            if count > 1:
                logger.warning(
                    "duplicate_credential_category",
                    expected_result=category.value,
                    count=count,
                    using="first",
                )
        return self

    def resolve_user(self, username: str) -> TestUser:
        """Return the user with this username.

        Raises:
            UserNotFoundError: If no user has that username.
        """
        for user in self.test_users:
            if user.username == username:
                logger.debug("user_resolved", username=username)
                return user
        logger.error("user_not_found", username=username)
        raise UserNotFoundError(f"User not found: {username}", username=username)

    def resolve_admin(self) -> TestUser:
        """Return the single admin user."""
        for user in self.test_users:
            if user.is_admin:
                return user
        raise UserNotFoundError("Admin user not found")

    def credentials_for(
        self, expected_result: ExpectedResult | str
    ) -> LoginCredentialScenario:
        """Return the first credential scenario of a category, in file order."""
        category = ExpectedResult(expected_result)
        for scenario in self.login_credentials:
            if scenario.expected_result is category:
                return scenario
        raise FixtureDataError(f"No login credentials with expectedResult={category.value}")

    def usernames(self, user_type: UserType | str | None = None) -> list[str]:
        """Usernames in file order, optionally filtered by user type."""
        if user_type is None:
            return [user.username for user in self.test_users]
        wanted = UserType(user_type)
        return [user.username for user in self.test_users if user.user_type is wanted]
