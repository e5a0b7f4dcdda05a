"""Page object for the contact / message form."""

from __future__ import annotations

from playwright.sync_api import Error as PlaywrightError

from portfolio_e2e.pages.base_page import BasePage

SUCCESS_TEXTS = ("success", "sent", "thank")


class ContactPage(BasePage):
    """Contact form.

    Name, email and phone inputs are optional on the form; the message
    textarea is required and filling it fails hard when it is missing.
    """

    page_name = "contact"
    path = "/contact"

    def navigate_to_contact(self, base_url: str) -> ContactPage:
        self.open(base_url)
        return self

    def is_contact_form_visible(self) -> bool:
        return self.is_element_visible("contact.form")

    def _fill_optional(self, key: str, value: str) -> None:
        if self.is_element_visible(key):
            self.fill(key, value)
        else:
            self.log.debug("optional_field_absent", element=key)

    def fill_contact_form(
        self, name: str, email: str, phone: str, message: str
    ) -> ContactPage:
        self._fill_optional("contact.name_input", name)
        self._fill_optional("contact.email_input", email)
        self._fill_optional("contact.phone_input", phone)
        self.fill("contact.message_input", message)
        return self

    def send_message(self, name: str, email: str, phone: str, message: str) -> ContactPage:
        self.fill_contact_form(name, email, phone, message)
        self.click("contact.send_button")
        self.log.info("message_sent", sender=name)
        return self

    def is_success_message_displayed(self) -> bool:
        """Poll for any success banner text within the settle timeout."""
        return self.wait_until(
            lambda: any(self.is_text_present(t) for t in SUCCESS_TEXTS),
            "contact success message",
        )

    def get_success_message(self) -> str:
        if not self.is_element_visible("contact.success_message"):
            return ""
        try:
            return self.get_text("contact.success_message").strip()
        except PlaywrightError as e:
            self.log.warning("success_message_unreadable", error=str(e))
            return ""
