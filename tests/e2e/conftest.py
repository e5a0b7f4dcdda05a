"""Playwright E2E test fixtures for the portfolio website.

This module provides fixtures for:
- Browser and context setup driven by E2E_* settings
- A SuiteContext built once per session
- Per-test artifact reporter
- Screenshot capture on failure

Browser, context and page lifecycle come from pytest-playwright: one
browser per session, a fresh context and page per test, closed on pass and
failure alike.

Usage:
    @pytest.mark.e2e
    def test_home_loads(site_page, suite_context):
        home = HomePage.from_context(site_page, suite_context)
        assert home.navigate_to_home(suite_context.base_url).is_header_visible()
"""

from collections.abc import Generator
from typing import Any

import httpx
import pytest
import structlog
from playwright.sync_api import Page

from portfolio_e2e.config.settings import get_settings
from portfolio_e2e.context import SuiteContext
from portfolio_e2e.pages.developer_page import DeveloperPage
from portfolio_e2e.pages.home_page import HomePage
from portfolio_e2e.pages.login_page import LoginPage
from portfolio_e2e.reporting.artifacts import ArtifactReporter

logger = structlog.get_logger(__name__)

REACHABILITY_TIMEOUT = 10.0  # seconds


# =============================================================================
# pytest-playwright Configuration
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Fill pytest-playwright options from settings unless given on the CLI."""
    settings = get_settings()
    if not config.option.browser:
        config.option.browser = [settings.browser]
    if settings.video_on_failure and config.option.video == "off":
        config.option.video = "retain-on-failure"
    if config.option.output == "test-results":
        config.option.output = str(settings.artifacts_dir)


@pytest.fixture(scope="session")
def browser_type_launch_args(
    browser_type_launch_args: dict[str, Any], pytestconfig: pytest.Config
) -> dict[str, Any]:
    """Configure browser launch arguments."""
    settings = get_settings()
    return {
        **browser_type_launch_args,
        "headless": settings.headless and not pytestconfig.getoption("headed"),
        "slow_mo": settings.slow_mo,
    }


@pytest.fixture(scope="session")
def browser_context_args(browser_context_args: dict[str, Any]) -> dict[str, Any]:
    """Configure browser context viewport."""
    return {
        **browser_context_args,
        "viewport": get_settings().viewport,
        "ignore_https_errors": True,
    }


# =============================================================================
# Suite Fixtures
# =============================================================================


@pytest.fixture(scope="session")
def suite_context() -> SuiteContext:
    """Settings, fixture users and selectors, loaded once per session."""
    return SuiteContext.load()


@pytest.fixture(scope="session", autouse=True)
def site_available(suite_context: SuiteContext) -> str:
    """Skip the E2E tests when the site under test cannot be reached."""
    try:
        response = httpx.get(
            suite_context.base_url, timeout=REACHABILITY_TIMEOUT, follow_redirects=True
        )
    except httpx.HTTPError as e:
        pytest.skip(f"Site not reachable at {suite_context.base_url}: {e}")
    logger.info("site_reachable", url=suite_context.base_url, status=response.status_code)
    return suite_context.base_url


@pytest.fixture
def reporter(request: pytest.FixtureRequest, suite_context: SuiteContext) -> ArtifactReporter:
    """Attachment sink for the current test."""
    return ArtifactReporter(suite_context.settings.artifacts_dir, request.node.name)


@pytest.fixture
def site_page(
    request: pytest.FixtureRequest,
    page: Page,
    suite_context: SuiteContext,
    reporter: ArtifactReporter,
) -> Generator[Page, None, None]:
    """Page with the configured default timeout.

    This fixture:
    1. Applies the per-action timeout from settings
    2. Yields the page for testing
    3. Attaches a screenshot if the test failed
    """
    settings = suite_context.settings
    page.set_default_timeout(settings.timeout)

    yield page

    report = getattr(request.node, "rep_call", None)
    if settings.screenshot_on_failure and report is not None and report.failed:
        try:
            reporter.attach_screenshot(f"{request.node.name} - Screenshot", page.screenshot())
        except Exception as e:
            logger.error("screenshot_attach_failed", test=request.node.name, error=str(e))


# =============================================================================
# Page Object Fixtures
# =============================================================================


@pytest.fixture
def home_page(site_page: Page, suite_context: SuiteContext) -> HomePage:
    """Home page, already opened."""
    return HomePage.from_context(site_page, suite_context).navigate_to_home(
        suite_context.base_url
    )


@pytest.fixture
def login_page(site_page: Page, suite_context: SuiteContext) -> LoginPage:
    """Login page, already opened."""
    return LoginPage.from_context(site_page, suite_context).navigate_to_login(
        suite_context.base_url
    )


@pytest.fixture
def developer_page(site_page: Page, suite_context: SuiteContext) -> DeveloperPage:
    """Developer page, already opened."""
    return DeveloperPage.from_context(site_page, suite_context).navigate_to_developer(
        suite_context.base_url
    )


@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Hook to store test result for the site_page screenshot teardown."""
    outcome = yield
    rep = outcome.get_result()
    setattr(item, f"rep_{rep.when}", rep)
