"""Page object for the home page."""

from __future__ import annotations

from typing import TYPE_CHECKING

from portfolio_e2e.pages.base_page import BasePage

if TYPE_CHECKING:
    from portfolio_e2e.pages.developer_page import DeveloperPage
    from portfolio_e2e.pages.login_page import LoginPage


class HomePage(BasePage):
    page_name = "home"
    path = "/"

    def navigate_to_home(self, base_url: str) -> HomePage:
        self.open(base_url)
        return self

    def is_header_visible(self) -> bool:
        return self.is_element_visible("home.header")

    def is_join_circle_section_visible(self) -> bool:
        return self.is_element_visible("home.join_circle")

    def is_about_me_section_visible(self) -> bool:
        return self.is_element_visible("home.about_me")

    def is_who_i_am_section_visible(self) -> bool:
        return self.is_element_visible("home.who_i_am")

    def is_what_i_do_section_visible(self) -> bool:
        return self.is_element_visible("home.what_i_do")

    def are_all_main_sections_visible(self) -> bool:
        return (
            self.is_join_circle_section_visible()
            and self.is_about_me_section_visible()
            and self.is_who_i_am_section_visible()
            and self.is_what_i_do_section_visible()
        )

    def get_welcome_message(self) -> str:
        return self.get_text("home.header").strip()

    def click_login_link(self) -> LoginPage:
        from portfolio_e2e.pages.login_page import LoginPage

        self.click("home.login_link")
        self.page.wait_for_url("**/login**")
        return self._sibling(LoginPage)

    def click_developer_link(self) -> DeveloperPage:
        from portfolio_e2e.pages.developer_page import DeveloperPage

        self.click("home.developer_link")
        self.page.wait_for_url("**/developer**")
        return self._sibling(DeveloperPage)
