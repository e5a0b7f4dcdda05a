"""
Test Data Factories

Factory-boy based factories for generating fixture users.
Follows the pattern: Faker + overrides.

Usage:
    from tests.support.factories import UserFactory

    user = UserFactory.build()
    admin = AdminUserFactory.build()
    data = build_test_data([user])  # adds the admin
"""

from tests.support.factories.user_factory import (
    AdminUserFactory,
    LoginCredentialFactory,
    UserFactory,
    build_test_data,
)

__all__ = ["AdminUserFactory", "LoginCredentialFactory", "UserFactory", "build_test_data"]
