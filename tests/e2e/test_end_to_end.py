"""Complete user -> admin journey against the live site.

Run with:
    pytest tests/e2e/test_end_to_end.py -m e2e -v --headed
"""

import pytest
from playwright.sync_api import Page

from portfolio_e2e.config.settings import get_settings
from portfolio_e2e.context import SuiteContext
from portfolio_e2e.data.loader import load_test_data
from portfolio_e2e.data.models import UserType
from portfolio_e2e.journey.models import StepStatus
from portfolio_e2e.journey.orchestrator import UserJourney
from portfolio_e2e.reporting.artifacts import ArtifactReporter

pytestmark = pytest.mark.e2e


def pytest_generate_tests(metafunc: pytest.Metafunc) -> None:
    """One journey per standard user in the fixture file."""
    if "username" in metafunc.fixturenames:
        data_path = metafunc.config.rootpath / get_settings().test_data_path
        usernames = load_test_data(data_path).usernames(UserType.STANDARD)
        metafunc.parametrize("username", usernames)


class TestCompleteUserJourney:
    def test_complete_user_journey(
        self,
        site_page: Page,
        suite_context: SuiteContext,
        reporter: ArtifactReporter,
        username: str,
    ) -> None:
        report = UserJourney(site_page, suite_context, reporter).run(username)

        assert report.outcome("home_page").status is StepStatus.PASSED
        assert report.outcome("developer_page").status is StepStatus.PASSED
        # Messaging and admin checks are recorded, never asserted
        assert report.outcome("send_message") is not None
        assert report.outcome("admin_verification") is not None
        assert reporter.names()[:3] == ["user_login", "home_page", "developer_page"]
