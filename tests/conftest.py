"""Shared test fixtures for holiday_rules tests."""

import pytest

from holiday_rules import config
from holiday_rules.models.holiday import Month, NthWeekday, Weekday, new_fixed, new_nth


@pytest.fixture(autouse=True)
def _isolated_settings(tmp_path, monkeypatch):
    """Ignore any real ~/.holiday_rules/config.yaml and reload defaults per test."""
    monkeypatch.setattr(config, "_USER_CONFIG_PATH", tmp_path / "no-such-config.yaml")
    config.reset_settings()
    yield
    config.reset_settings()


@pytest.fixture
def pastover():
    """First Friday in April."""
    return new_nth("Pastover", NthWeekday.FIRST, Weekday.FRIDAY, Month.APRIL)


@pytest.fixture
def leap_day():
    return new_fixed("Leap Day", Month.FEBRUARY, 29)


@pytest.fixture
def fifth_wednesday_december():
    return new_nth("Fifth Wednesday in December", NthWeekday.FIFTH, Weekday.WEDNESDAY, Month.DECEMBER)
