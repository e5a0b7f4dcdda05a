"""Suite context: settings, fixture data and selectors, loaded once."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from portfolio_e2e.config.settings import Settings, get_settings
from portfolio_e2e.data.loader import load_test_data
from portfolio_e2e.data.models import TestDataSet
from portfolio_e2e.pages.selectors import SelectorRegistry


class SuiteContext(BaseModel):
    """Immutable bundle injected into page objects and the journey.

    Example:
        context = SuiteContext.load()
        home = HomePage.from_context(page, context)
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    settings: Settings
    test_data: TestDataSet
    selectors: SelectorRegistry

    @classmethod
    def load(cls, settings: Settings | None = None) -> SuiteContext:
        settings = settings or get_settings()
        return cls(
            settings=settings,
            test_data=load_test_data(settings.test_data_path),
            selectors=SelectorRegistry.load(settings.selector_overrides_path),
        )

    @property
    def base_url(self) -> str:
        return self.settings.base_url
