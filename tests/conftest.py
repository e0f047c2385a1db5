from datetime import datetime, timezone

import pytest

from tests.fakes import build_scenario


@pytest.fixture
def fixed_now():
    return datetime(2025, 3, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def scenario():
    return build_scenario()
