"""Shared fixtures for the datetime-helper test suite."""

from datetime import date

import pytest

from datetime_helper import DateTimeHelper
from datetime_helper.config.settings import Settings

FIXED_TODAY = date(2019, 9, 6)


@pytest.fixture
def today() -> date:
    return FIXED_TODAY


@pytest.fixture
def helper(today) -> DateTimeHelper:
    """Helper whose clock always reports FIXED_TODAY."""
    return DateTimeHelper(clock=lambda: today)


@pytest.fixture
def system_helper(monkeypatch) -> DateTimeHelper:
    """Helper reading the real system clock in host local time."""
    monkeypatch.setattr(Settings, "SERVER_TZ", None)
    return DateTimeHelper()
