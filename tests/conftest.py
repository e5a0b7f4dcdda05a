"""Shared pytest fixtures for the portfolio E2E suite.

This module provides fixtures for:
- Environment and logging setup
- The JSON fixture file and fast settings for unit tests
- A SuiteContext wired to a scripted FakePage instead of a browser
- Test data factories

Usage:
    @pytest.mark.unit
    def test_something(fake_context, fake_page):
        home = HomePage.from_context(fake_page, fake_context)
"""

import os
from collections.abc import Generator
from pathlib import Path

import pytest

from portfolio_e2e.config.logging import configure_logging
from portfolio_e2e.config.settings import Settings, SettleTiming, get_settings
from portfolio_e2e.context import SuiteContext
from tests.support.factories import AdminUserFactory, LoginCredentialFactory, UserFactory
from tests.support.fake_page import FakePage

FIXTURE_PATH = Path(__file__).parent / "e2e" / "fixtures" / "test_data.json"
FAKE_BASE_URL = "https://portfolio.test"

# =============================================================================
# Environment Configuration
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment() -> Generator[None, None, None]:
    """Set up test environment variables.

    Loads .env file first, then sets defaults for any missing variables.
    """
    from dotenv import load_dotenv

    original_env = os.environ.copy()

    # Load .env file if it exists (won't override existing env vars)
    load_dotenv()

    os.environ.setdefault("E2E_TEST_DATA_PATH", str(FIXTURE_PATH))
    get_settings.cache_clear()
    configure_logging(get_settings())

    yield

    # Restore original environment
    os.environ.clear()
    os.environ.update(original_env)
    get_settings.cache_clear()


# =============================================================================
# Unit Test Context
# =============================================================================


@pytest.fixture
def fast_timing() -> SettleTiming:
    """Settle timing short enough that polling tests finish immediately."""
    return SettleTiming(timeout_ms=50, poll_interval_ms=5)


@pytest.fixture
def unit_settings(tmp_path: Path) -> Settings:
    """Settings independent of the environment and .env file."""
    return Settings(
        _env_file=None,
        base_url=FAKE_BASE_URL,
        settle_timeout=50,
        poll_interval=5,
        test_data_path=FIXTURE_PATH,
        artifacts_dir=tmp_path / "artifacts",
    )


@pytest.fixture
def fake_context(unit_settings: Settings) -> SuiteContext:
    """SuiteContext loaded from the real fixture file with fast timing."""
    return SuiteContext.load(unit_settings)


@pytest.fixture
def fake_page() -> FakePage:
    """Empty FakePage; tests add scenes for the paths they visit."""
    return FakePage(FAKE_BASE_URL)


# =============================================================================
# Factory Fixtures
# =============================================================================


@pytest.fixture
def user_factory() -> type[UserFactory]:
    """Provide user factory for creating fixture users."""
    return UserFactory


@pytest.fixture
def admin_factory() -> type[AdminUserFactory]:
    return AdminUserFactory


@pytest.fixture
def credential_factory() -> type[LoginCredentialFactory]:
    return LoginCredentialFactory
