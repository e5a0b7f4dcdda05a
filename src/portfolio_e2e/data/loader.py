"""Load the JSON test fixture."""

from pathlib import Path

import structlog
from pydantic import ValidationError

from portfolio_e2e.core.exceptions import FixtureDataError
from portfolio_e2e.data.models import TestDataSet

logger = structlog.get_logger(__name__)


def load_test_data(path: Path | str) -> TestDataSet:
    """Read and validate the fixture document at ``path``.

    Raises:
        FixtureDataError: If the file is missing, is not valid JSON, does not
            match the schema, or breaks the user invariants.
    """
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise FixtureDataError(f"Cannot read test data {path}: {e}") from e

    try:
        data = TestDataSet.model_validate_json(raw)
    except ValidationError as e:
        raise FixtureDataError(f"Invalid test data in {path}: {e}") from e

    logger.info(
        "test_data_loaded",
        path=str(path),
        users=len(data.test_users),
        login_credentials=len(data.login_credentials),
    )
    return data
