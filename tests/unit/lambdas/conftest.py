from typing import cast
from unittest.mock import MagicMock

import pytest
from pytest import MonkeyPatch

from dynashort.types import LambdaContext
from dynashort.services import ShortenerService


@pytest.fixture(autouse=True)
def deployed_environment(monkeypatch: MonkeyPatch) -> None:
    """Run handlers as if deployed, so unexpected errors become 500 responses."""
    monkeypatch.delenv('APP_ENV', raising=False)
    monkeypatch.delenv('AWS_SAM_LOCAL', raising=False)


@pytest.fixture
def service() -> MagicMock:
    return MagicMock(spec=ShortenerService)


@pytest.fixture
def context() -> LambdaContext:
    return cast(LambdaContext, {'function_name': 'test'})
