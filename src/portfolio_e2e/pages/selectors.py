"""Selector registry for the portfolio site.

Each semantic element maps to an ordered list of matchers. Page objects
try them in order and use the first one that is visible, so UI drift on the
target site is fixed here (or in an override file) rather than in page code.

Override file format (JSON), replacing whole entries by key:

    {
        "contact.message_input": [
            {"engine": "css", "value": "textarea#message"},
            {"engine": "role", "role": "textbox", "value": "Message"}
        ]
    }
"""

from collections.abc import Iterator, Mapping
from pathlib import Path
from typing import Literal

import structlog
from pydantic import BaseModel, TypeAdapter, ValidationError, model_validator

from portfolio_e2e.core.exceptions import ConfigurationError

logger = structlog.get_logger(__name__)


class Matcher(BaseModel):
    """One locator strategy.

    Attributes:
        engine: css (any Playwright selector string), text (get_by_text) or
            role (get_by_role).
        value: Selector, text, or accessible name for role matchers.
        role: ARIA role, required for role matchers.
        exact: Exact text/name match instead of case-insensitive substring.
    """

    model_config = {"frozen": True}

    engine: Literal["css", "text", "role"] = "css"
    value: str
    role: str | None = None
    exact: bool = False

    @model_validator(mode="after")
    def check_role(self) -> "Matcher":
        if self.engine == "role" and not self.role:
            raise ValueError("role matchers need a 'role'")
        return self

    def __str__(self) -> str:
        if self.engine == "role":
            return f"role={self.role}[name={self.value!r}]"
        return f"{self.engine}={self.value}"


def css(value: str) -> Matcher:
    return Matcher(engine="css", value=value)


def text(value: str, exact: bool = False) -> Matcher:
    return Matcher(engine="text", value=value, exact=exact)


def role(role_name: str, name: str, exact: bool = False) -> Matcher:
    return Matcher(engine="role", role=role_name, value=name, exact=exact)


_OVERRIDES_ADAPTER = TypeAdapter(dict[str, tuple[Matcher, ...]])


class SelectorRegistry(Mapping[str, tuple[Matcher, ...]]):
    """Read-only mapping of element key to ordered matchers."""

    def __init__(self, entries: Mapping[str, tuple[Matcher, ...]]) -> None:
        self._entries = {key: tuple(matchers) for key, matchers in entries.items()}
        empty = [key for key, matchers in self._entries.items() if not matchers]
        if empty:
            raise ConfigurationError(f"Selector entries without matchers: {empty}")

    def __getitem__(self, key: str) -> tuple[Matcher, ...]:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def with_overrides(
        self, overrides: Mapping[str, tuple[Matcher, ...]]
    ) -> "SelectorRegistry":
        """Return a new registry where ``overrides`` replace entries by key."""
        unknown = sorted(set(overrides) - set(self._entries))
        if unknown:
            logger.warning("selector_override_unknown_keys", keys=unknown)
        return SelectorRegistry({**self._entries, **overrides})

    @classmethod
    def load(cls, overrides_path: Path | None = None) -> "SelectorRegistry":
        """Default registry, with overrides from a JSON file when given."""
        registry = cls(DEFAULT_SELECTORS)
        if overrides_path is None:
            return registry

        try:
            overrides = _OVERRIDES_ADAPTER.validate_json(
                Path(overrides_path).read_text(encoding="utf-8")
            )
        except OSError as e:
            raise ConfigurationError(
                f"Cannot read selector overrides {overrides_path}: {e}"
            ) from e
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid selector overrides in {overrides_path}: {e}"
            ) from e

        logger.info(
            "selector_overrides_loaded",
            path=str(overrides_path),
            keys=sorted(overrides),
        )
        return registry.with_overrides(overrides)


# =============================================================================
# Default selectors
# =============================================================================

DEFAULT_SELECTORS: dict[str, tuple[Matcher, ...]] = {
    # Home
    "home.header": (
        css("h1:has-text(\"Hello! I'm Chiran\")"),
        role("heading", "Hello! I'm Chiran"),
    ),
    "home.join_circle": (text("Join My Circle"),),
    "home.about_me": (text("A Little About Me"),),
    "home.who_i_am": (text("Who I Am"),),
    "home.what_i_do": (text("What I Do"),),
    "home.login_link": (css("nav a[href='/login']"),),
    "home.developer_link": (css("nav a[href='/developer']"),),
    # Login
    "login.heading": (text("Sign in to your account"),),
    "login.email_input": (css("input[type='email']"), css("input[name='email']")),
    "login.password_input": (
        css("input[type='password']"),
        css("input[name='password']"),
    ),
    "login.sign_in_button": (
        css("button:has-text('Sign in')"),
        role("button", "Sign in"),
    ),
    "login.sign_up_link": (text("Sign up"),),
    "login.google_button": (text("Google"),),
    "login.back_to_home_link": (css("a:has-text('Back to Home')"),),
    "login.error_message": (css(".error-message"), css("[role='alert']")),
    # Developer
    "developer.heading": (
        css("h1:has-text('Developer Portfolio')"),
        text("Developer Portfolio"),
    ),
    "developer.technical_expertise": (text("Technical Expertise"),),
    "developer.full_stack": (text("Full-Stack Development"),),
    "developer.ai_chatbot": (text("AI & Chatbot Integration"),),
    "developer.database_design": (text("Database Design & Optimization"),),
    "developer.api_development": (text("API Development & Integration"),),
    "developer.skills": (text("Skills & Technologies"),),
    "developer.frontend": (text("Frontend"),),
    "developer.backend": (text("Backend"),),
    "developer.devops": (text("DevOps & Tools"),),
    "developer.resources": (text("Developer Resources"),),
    "developer.projects_link": (css("a:has-text('My Projects')"),),
    "developer.documentation_link": (css("a:has-text('Documentation')"),),
    "developer.tutorials_link": (css("a:has-text('Tutorials')"),),
    "developer.login_to_connect": (css("a:has-text('Login to Connect')"),),
    # Contact
    "contact.form": (css("form"),),
    "contact.name_input": (
        css("input[name='name']"),
        css("input[placeholder*='name']"),
    ),
    "contact.email_input": (
        css("input[name='email']"),
        css("input[type='email']"),
        css("input[placeholder*='email']"),
    ),
    "contact.phone_input": (
        css("input[name='phone']"),
        css("input[type='tel']"),
        css("input[placeholder*='phone']"),
    ),
    "contact.message_input": (
        css("textarea[name='message']"),
        css("textarea[placeholder*='message']"),
        css("textarea"),
    ),
    "contact.send_button": (
        css("button:has-text('Send')"),
        css("button[type='submit']"),
    ),
    "contact.success_message": (text("success"), text("sent"), text("thank")),
    # Admin
    "admin.heading": (css("h1:has-text('Admin')"), css("h1:has-text('Dashboard')")),
    "admin.messages_tab": (
        css("a:has-text('Messages')"),
        css("button:has-text('Messages')"),
    ),
    "admin.search_input": (
        css("input[type='search']"),
        css("input[placeholder*='Search']"),
    ),
    "admin.message_item": (
        css(".message-item"),
        css("[data-testid='message-item']"),
        css(".message"),
    ),
}
