"""Page object for the developer portfolio page."""

from __future__ import annotations

from typing import TYPE_CHECKING

from portfolio_e2e.pages.base_page import BasePage

if TYPE_CHECKING:
    from portfolio_e2e.pages.login_page import LoginPage

# Resource name -> link element key
RESOURCE_LINKS = {
    "My Projects": "developer.projects_link",
    "Documentation": "developer.documentation_link",
    "Tutorials": "developer.tutorials_link",
}


class DeveloperPage(BasePage):
    page_name = "developer"
    path = "/developer"

    def navigate_to_developer(self, base_url: str) -> DeveloperPage:
        self.open(base_url)
        return self

    def is_developer_page_displayed(self) -> bool:
        return self.is_element_visible("developer.heading")

    def is_technical_expertise_section_visible(self) -> bool:
        return self.is_element_visible("developer.technical_expertise")

    # Expertise areas

    def is_full_stack_dev_mentioned(self) -> bool:
        return self.is_element_visible("developer.full_stack")

    def is_ai_chatbot_mentioned(self) -> bool:
        return self.is_element_visible("developer.ai_chatbot")

    def is_database_design_mentioned(self) -> bool:
        return self.is_element_visible("developer.database_design")

    def is_api_dev_mentioned(self) -> bool:
        return self.is_element_visible("developer.api_development")

    # Skills

    def is_skills_section_visible(self) -> bool:
        return self.is_element_visible("developer.skills")

    def is_frontend_section_visible(self) -> bool:
        return self.is_element_visible("developer.frontend")

    def is_backend_section_visible(self) -> bool:
        return self.is_element_visible("developer.backend")

    def is_devops_section_visible(self) -> bool:
        return self.is_element_visible("developer.devops")

    def is_developer_resources_visible(self) -> bool:
        return self.is_element_visible("developer.resources")

    def are_all_main_sections_visible(self) -> bool:
        return (
            self.is_technical_expertise_section_visible()
            and self.is_skills_section_visible()
            and self.is_developer_resources_visible()
        )

    def are_all_expertise_areas_mentioned(self) -> bool:
        return (
            self.is_full_stack_dev_mentioned()
            and self.is_ai_chatbot_mentioned()
            and self.is_database_design_mentioned()
            and self.is_api_dev_mentioned()
        )

    def are_all_skill_sections_present(self) -> bool:
        return (
            self.is_frontend_section_visible()
            and self.is_backend_section_visible()
            and self.is_devops_section_visible()
        )

    # Navigation

    def click_my_projects(self) -> None:
        self.click("developer.projects_link")

    def click_documentation(self) -> None:
        self.click("developer.documentation_link")

    def click_tutorials(self) -> None:
        self.click("developer.tutorials_link")

    def click_login_to_connect(self) -> LoginPage:
        from portfolio_e2e.pages.login_page import LoginPage

        self.click("developer.login_to_connect")
        self.page.wait_for_url("**/login**")
        return self._sibling(LoginPage)

    def explore_resource(self, name: str) -> bool:
        """Open a resource link and come back.

        Resource pages may be gated behind authentication, so any failure is
        logged and reported as False instead of raised.
        """
        key = RESOURCE_LINKS[name]
        try:
            self.click(key)
            self.wait_for_page_load()
            self.log.info("resource_opened", resource=name, url=self.current_url)
            self.go_back()
        except Exception as e:
            self.log.warning("resource_not_reachable", resource=name, error=str(e))
            return False
        return True
