"""Fixture data: test users and login credential scenarios."""

from portfolio_e2e.data.loader import load_test_data
from portfolio_e2e.data.models import (
    ExpectedResult,
    LoginCredentialScenario,
    TestDataSet,
    TestUser,
    UserType,
)

__all__ = [
    "ExpectedResult",
    "LoginCredentialScenario",
    "TestDataSet",
    "TestUser",
    "UserType",
    "load_test_data",
]
