"""
Page Objects

Page Object Model (POM) for the portfolio site.
Encapsulates page interactions and locators.

Usage:
    from portfolio_e2e.pages import HomePage

    home = HomePage.from_context(page, suite_context)
    home.navigate_to_home(suite_context.settings.base_url)
    assert home.is_header_visible()

Pattern:
    - One class per page
    - Methods for actions (click, fill) and boolean queries (is_*_visible)
    - Element keys resolved through the SelectorRegistry
    - Queries never raise; actions do
"""

from portfolio_e2e.pages.admin_dashboard_page import AdminDashboardPage
from portfolio_e2e.pages.base_page import BasePage, Visibility
from portfolio_e2e.pages.contact_page import ContactPage
from portfolio_e2e.pages.developer_page import DeveloperPage
from portfolio_e2e.pages.home_page import HomePage
from portfolio_e2e.pages.login_page import LoginPage
from portfolio_e2e.pages.selectors import DEFAULT_SELECTORS, Matcher, SelectorRegistry

__all__ = [
    "AdminDashboardPage",
    "BasePage",
    "ContactPage",
    "DEFAULT_SELECTORS",
    "DeveloperPage",
    "HomePage",
    "LoginPage",
    "Matcher",
    "SelectorRegistry",
    "Visibility",
]
