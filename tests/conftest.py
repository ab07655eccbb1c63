from datetime import date

import pytest

from lifegrid.calendar_math import DateSnapshot, snapshot_for
from lifegrid.params import RenderParams


@pytest.fixture
def april_2026() -> DateSnapshot:
    # 30-day month whose 1st is a Wednesday
    return snapshot_for(date(2026, 4, 15))


@pytest.fixture
def october_2026() -> DateSnapshot:
    return snapshot_for(date(2026, 10, 18))


@pytest.fixture
def small_params() -> RenderParams:
    return RenderParams(width=360, height=780, radius=3, spacing=2)
