"""Configuration module for the portfolio E2E suite.

Usage:
    from portfolio_e2e.config import get_settings

    settings = get_settings()  # Cached singleton
    print(settings.base_url)

Note:
    Page objects and the journey never call get_settings() themselves.
    The pytest session builds a SuiteContext once and passes it in.
"""

from portfolio_e2e.config.settings import Settings, SettleTiming, get_settings

__all__ = ["Settings", "SettleTiming", "get_settings"]
