import pytest

from heatindex.models import InputRecord
from heatindex.settings import HeatIndexSettings


@pytest.fixture
def settings() -> HeatIndexSettings:
    return HeatIndexSettings()


@pytest.fixture
def record() -> InputRecord:
    return InputRecord()
