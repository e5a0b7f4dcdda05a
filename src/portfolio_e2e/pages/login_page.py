"""Page object for the sign-in page."""

from __future__ import annotations

from typing import TYPE_CHECKING

from portfolio_e2e.pages.base_page import BasePage

if TYPE_CHECKING:
    from portfolio_e2e.pages.home_page import HomePage


class LoginPage(BasePage):
    """Sign-in form.

    ``login`` only submits the form. Callers that care about the outcome
    poll for it afterwards, typically with ``wait_for_login_redirect``.
    """

    page_name = "login"
    path = "/login"

    def navigate_to_login(self, base_url: str) -> LoginPage:
        self.open(base_url)
        return self

    def is_login_page_displayed(self) -> bool:
        return self.is_element_visible("login.heading")

    def enter_email(self, email: str) -> LoginPage:
        self.fill("login.email_input", email)
        return self

    def enter_password(self, password: str) -> LoginPage:
        self.fill("login.password_input", password)
        return self

    def click_sign_in(self) -> None:
        self.click("login.sign_in_button")

    def login(self, email: str, password: str) -> None:
        """Fill both credentials and submit."""
        self.enter_email(email)
        self.enter_password(password)
        self.click_sign_in()
        self.log.info("login_submitted", email=email)

    def wait_for_login_redirect(self) -> bool:
        """Poll until the URL leaves /login. False if it never does."""
        return self.wait_until(
            lambda: "/login" not in self.current_url, "redirect away from /login"
        )

    def is_email_field_visible(self) -> bool:
        return self.is_element_visible("login.email_input")

    def is_password_field_visible(self) -> bool:
        return self.is_element_visible("login.password_input")

    def is_sign_in_button_visible(self) -> bool:
        return self.is_element_visible("login.sign_in_button")

    def is_sign_up_link_visible(self) -> bool:
        return self.is_element_visible("login.sign_up_link")

    def is_google_sign_in_visible(self) -> bool:
        return self.is_element_visible("login.google_button")

    def are_all_login_elements_present(self) -> bool:
        return (
            self.is_email_field_visible()
            and self.is_password_field_visible()
            and self.is_sign_in_button_visible()
            and self.is_sign_up_link_visible()
        )

    def is_error_message_displayed(self) -> bool:
        return self.is_element_visible("login.error_message")

    def get_error_message(self) -> str:
        if self.is_error_message_displayed():
            return self.get_text("login.error_message").strip()
        return ""

    def click_sign_up_link(self) -> None:
        self.click("login.sign_up_link")

    def click_back_to_home(self) -> HomePage:
        from portfolio_e2e.pages.home_page import HomePage

        self.click("login.back_to_home_link")
        self.wait_for_page_load()
        return self._sibling(HomePage)
