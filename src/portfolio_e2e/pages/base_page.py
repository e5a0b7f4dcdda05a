"""Base page object with the shared Playwright primitives.

Two error policies live here:
    - Queries (check_visibility, is_element_visible, is_text_present) never raise.
      Any failure becomes a Visibility tag and a warning log.
    - Actions (open, click, fill, get_text) let Playwright errors propagate.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Callable, TypeVar

import structlog
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator, Page
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from portfolio_e2e.config.settings import SettleTiming
from portfolio_e2e.pages.selectors import (
    DEFAULT_SELECTORS,
    Matcher,
    SelectorRegistry,
    css,
    text,
)
from portfolio_e2e.pages.waits import poll_until

if TYPE_CHECKING:
    from portfolio_e2e.context import SuiteContext

logger = structlog.get_logger(__name__)

P = TypeVar("P", bound="BasePage")

_SELECTOR_ERROR_MARKERS = ("selector", "unexpected token", "while parsing")


class Visibility(str, Enum):
    """Outcome of a visibility check. Only VISIBLE is truthy."""

    VISIBLE = "visible"
    NOT_FOUND = "not_found"
    TIMEOUT = "timeout"
    SELECTOR_ERROR = "selector_error"

    def __bool__(self) -> bool:
        return self is Visibility.VISIBLE


def _is_selector_error(error: PlaywrightError) -> bool:
    message = str(error).lower()
    return any(marker in message for marker in _SELECTOR_ERROR_MARKERS)


class BasePage:
    """Common functionality for all page objects.

    Attributes:
        page: The Playwright page of the current test session.
        selectors: Element key to ordered matchers.
        timing: Bounds for condition polling.
    """

    page_name = "page"
    path = "/"

    def __init__(
        self,
        page: Page,
        selectors: SelectorRegistry | None = None,
        timing: SettleTiming | None = None,
    ) -> None:
        self.page = page
        self.selectors = (
            selectors if selectors is not None else SelectorRegistry(DEFAULT_SELECTORS)
        )
        self.timing = timing if timing is not None else SettleTiming()
        self.log = logger.bind(page_object=type(self).__name__)

    @classmethod
    def from_context(cls: type[P], page: Page, context: SuiteContext) -> P:
        """Build a page object with the suite's selectors and timing."""
        return cls(page, context.selectors, context.settings.settle_timing)

    def _sibling(self, page_cls: type[P]) -> P:
        """Page object for the page we just navigated to, same session."""
        return page_cls(self.page, self.selectors, self.timing)

    # -------------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------------

    def open(self, base_url: str) -> None:
        """Navigate to this page under ``base_url`` and wait for load."""
        url = f"{base_url.rstrip('/')}{self.path}"
        self.page.goto(url)
        self.wait_for_page_load()
        self.log.info("page_navigated", page=self.page_name, url=url)

    def wait_for_page_load(self) -> None:
        self.page.wait_for_load_state()

    def go_back(self) -> None:
        self.page.go_back()
        self.wait_for_page_load()

    def title(self) -> str:
        return self.page.title()

    @property
    def current_url(self) -> str:
        return self.page.url

    # -------------------------------------------------------------------------
    # Locating
    # -------------------------------------------------------------------------

    def _matchers(self, key_or_selector: str) -> tuple[Matcher, ...]:
        if key_or_selector in self.selectors:
            return self.selectors[key_or_selector]
        return (css(key_or_selector),)

    def _build_all(self, matcher: Matcher) -> Locator:
        if matcher.engine == "text":
            return self.page.get_by_text(matcher.value, exact=matcher.exact)
        if matcher.engine == "role":
            return self.page.get_by_role(
                matcher.role, name=matcher.value, exact=matcher.exact
            )
        return self.page.locator(matcher.value)

    def _build(self, matcher: Matcher) -> Locator:
        return self._build_all(matcher).first

    def _matcher_visibility(self, matcher: Matcher) -> Visibility:
        try:
            visible = self._build(matcher).is_visible()
        except PlaywrightTimeoutError as e:
            self.log.warning("visibility_check_timeout", selector=str(matcher), error=str(e))
            return Visibility.TIMEOUT
        except PlaywrightError as e:
            outcome = (
                Visibility.SELECTOR_ERROR if _is_selector_error(e) else Visibility.NOT_FOUND
            )
            self.log.warning(
                "visibility_check_failed",
                selector=str(matcher),
                outcome=outcome.value,
                error=str(e),
            )
            return outcome
        except Exception as e:
            self.log.warning(
                "visibility_check_failed",
                selector=str(matcher),
                outcome=Visibility.NOT_FOUND.value,
                error=str(e),
            )
            return Visibility.NOT_FOUND
        return Visibility.VISIBLE if visible else Visibility.NOT_FOUND

    def check_visibility(self, key_or_selector: str) -> Visibility:
        """Visibility of an element key or raw selector. Never raises.

        Matchers are tried in order; the first visible one wins. When none is
        visible the first failure more specific than NOT_FOUND is reported.
        """
        result = Visibility.NOT_FOUND
        for matcher in self._matchers(key_or_selector):
            outcome = self._matcher_visibility(matcher)
            if outcome is Visibility.VISIBLE:
                return outcome
            if result is Visibility.NOT_FOUND:
                result = outcome
        self.log.debug("element_not_visible", element=key_or_selector, outcome=result.value)
        return result

    def is_element_visible(self, key_or_selector: str) -> bool:
        return self.check_visibility(key_or_selector) is Visibility.VISIBLE

    def is_text_present(self, content: str) -> bool:
        """Whether text (case-insensitive substring) is visible on the page."""
        return self._matcher_visibility(text(content)) is Visibility.VISIBLE

    def _resolve(self, key_or_selector: str) -> Matcher:
        matchers = self._matchers(key_or_selector)
        for matcher in matchers:
            if self._matcher_visibility(matcher) is Visibility.VISIBLE:
                return matcher
        return matchers[0]

    def locate(self, key_or_selector: str) -> Locator:
        """Locator for the first visible matcher, else the first matcher.

        With no visible matcher, actions on the returned locator fail with
        Playwright's own timeout error.
        """
        return self._build(self._resolve(key_or_selector))

    def count(self, key_or_selector: str) -> int:
        """Number of elements matched by the resolved matcher."""
        return self._build_all(self._resolve(key_or_selector)).count()

    # -------------------------------------------------------------------------
    # Actions
    # -------------------------------------------------------------------------

    def click(self, key_or_selector: str) -> None:
        self.locate(key_or_selector).click()
        self.log.info("element_clicked", element=key_or_selector)

    def fill(self, key_or_selector: str, value: str) -> None:
        self.locate(key_or_selector).fill(value)
        # Values can be passwords; only the length is logged
        self.log.info("input_filled", element=key_or_selector, length=len(value))

    def get_text(self, key_or_selector: str) -> str:
        return self.locate(key_or_selector).text_content() or ""

    # -------------------------------------------------------------------------
    # Settling
    # -------------------------------------------------------------------------

    def wait_until(self, condition: Callable[[], bool], description: str) -> bool:
        """Poll ``condition`` within the settle timeout. Never raises on timeout."""
        met = poll_until(
            condition,
            timeout_seconds=self.timing.timeout_seconds,
            poll_interval_seconds=self.timing.poll_interval_seconds,
        )
        if not met:
            self.log.warning(
                "settle_condition_not_met",
                condition=description,
                timeout_ms=self.timing.timeout_ms,
            )
        return met

    def wait_for_network_idle(self) -> bool:
        try:
            self.page.wait_for_load_state("networkidle", timeout=self.timing.timeout_ms)
        except PlaywrightTimeoutError:
            self.log.warning("network_idle_timeout", timeout_ms=self.timing.timeout_ms)
            return False
        return True

    def page_contains(self, *fragments: str) -> dict[str, bool]:
        """Case-insensitive containment of each fragment in the page HTML."""
        content = self.page.content().lower()
        return {fragment: fragment.lower() in content for fragment in fragments}
