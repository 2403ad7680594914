from datetime import date

import pytest

from models.schemas import Preferences


@pytest.fixture
def make_prefs():
    def _make(**overrides):
        data = {
            "guest_name":    "Sam",
            "interests":     ["wine"],
            "travel_style":  "moderate",
            "trip_duration": 2,
            "group_size":    2,
            "start_date":    date(2026, 10, 19),
        }
        data.update(overrides)
        return Preferences(**data)
    return _make
