"""Unit tests for SuiteContext loading."""

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from portfolio_e2e.config.settings import Settings
from portfolio_e2e.context import SuiteContext
from portfolio_e2e.core.exceptions import ConfigurationError, FixtureDataError
from portfolio_e2e.pages.selectors import DEFAULT_SELECTORS, css


@pytest.mark.unit
class TestSuiteContext:
    def test_load_builds_everything(self, unit_settings: Settings) -> None:
        context = SuiteContext.load(unit_settings)

        assert context.base_url == "https://portfolio.test"
        assert context.test_data.resolve_user("johndoe").name == "John Doe"
        assert dict(context.selectors) == DEFAULT_SELECTORS

    def test_selector_overrides_applied(self, unit_settings: Settings, tmp_path: Path) -> None:
        overrides = tmp_path / "selectors.json"
        overrides.write_text(
            json.dumps({"contact.form": [{"value": "form#contact"}]}), encoding="utf-8"
        )
        settings = unit_settings.model_copy(update={"selector_overrides_path": overrides})

        context = SuiteContext.load(settings)

        assert context.selectors["contact.form"] == (css("form#contact"),)

    def test_bad_overrides_fail_loading(self, unit_settings: Settings, tmp_path: Path) -> None:
        settings = unit_settings.model_copy(
            update={"selector_overrides_path": tmp_path / "missing.json"}
        )

        with pytest.raises(ConfigurationError):
            SuiteContext.load(settings)

    def test_missing_fixture_fails_loading(self, unit_settings: Settings, tmp_path: Path) -> None:
        settings = unit_settings.model_copy(update={"test_data_path": tmp_path / "none.json"})

        with pytest.raises(FixtureDataError):
            SuiteContext.load(settings)

    def test_context_is_frozen(self, fake_context: SuiteContext) -> None:
        with pytest.raises(ValidationError):
            fake_context.settings = fake_context.settings  # type: ignore[misc]
