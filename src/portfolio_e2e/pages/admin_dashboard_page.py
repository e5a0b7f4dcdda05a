"""Page object for the admin dashboard and its message inbox."""

from __future__ import annotations

from playwright.sync_api import Error as PlaywrightError

from portfolio_e2e.pages.base_page import BasePage


class AdminDashboardPage(BasePage):
    """Admin dashboard.

    The inbox markup is loosely known, so message checks search the whole
    page HTML (case-insensitive) instead of a specific message list.
    """

    page_name = "admin"
    path = "/admin"

    def navigate_to_admin_dashboard(self, base_url: str) -> AdminDashboardPage:
        self.open(base_url)
        return self

    def is_admin_dashboard_displayed(self) -> bool:
        return (
            self.is_element_visible("admin.heading")
            or self.is_text_present("Admin")
            or self.is_text_present("Dashboard")
        )

    def go_to_messages_section(self) -> AdminDashboardPage:
        if self.is_element_visible("admin.messages_tab"):
            self.click("admin.messages_tab")
            self.wait_for_page_load()
        else:
            self.log.info("messages_tab_absent")
        return self

    def search_message(self, search_text: str) -> AdminDashboardPage:
        """Type into the search box, if there is one, and let filtering settle."""
        if not self.is_element_visible("admin.search_input"):
            self.log.info("search_input_absent", query=search_text)
            return self
        self.fill("admin.search_input", search_text)
        self.wait_for_network_idle()
        self.log.info("messages_searched", query=search_text)
        return self

    def _content_contains_all(self, *fragments: str) -> bool:
        try:
            return all(self.page_contains(*fragments).values())
        except Exception as e:
            self.log.error("page_content_unavailable", error=str(e))
            return False

    def is_message_visible(self, message_content: str) -> bool:
        found = self.wait_until(
            lambda: self._content_contains_all(message_content), "message in page"
        )
        if found:
            self.log.info("message_found", content=message_content)
        else:
            self.log.warning("message_not_found", content=message_content)
        return found

    def is_message_from_user_visible(self, user_name: str, message_content: str) -> bool:
        """Whether both the user name and the message body are on the page."""
        found = self.wait_until(
            lambda: self._content_contains_all(user_name, message_content),
            "user message in page",
        )
        if found:
            self.log.info("user_message_found", user=user_name, content=message_content)
        else:
            self.log.warning("user_message_not_found", user=user_name)
        return found

    def get_message_count(self) -> int:
        if not self.is_element_visible("admin.message_item"):
            return 0
        try:
            return self.count("admin.message_item")
        except PlaywrightError as e:
            self.log.warning("message_count_failed", error=str(e))
            return 0

    def get_latest_message_content(self) -> str:
        if not self.is_element_visible("admin.message_item"):
            return ""
        try:
            return self.get_text("admin.message_item").strip()
        except PlaywrightError as e:
            self.log.warning("latest_message_unreadable", error=str(e))
            return ""
