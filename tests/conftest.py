"""
Pytest Configuration and Fixtures.

Shared fixtures for the alarm threshold test suite.
"""

import pytest
from typing import Dict

from alarm_thresholds.common.config import get_settings
from alarm_thresholds.models.alarm import AlarmKind


@pytest.fixture
def all_kinds_env() -> Dict[str, str]:
    """Every alarm kind's base key set to "3"."""
    return {kind.value: "3" for kind in AlarmKind}


@pytest.fixture
def custom_env() -> Dict[str, str]:
    """Global tunables plus one fully overridden and one base-only kind."""
    return {
        "PERIOD_MINUTES": "3",
        "DATA_POINTS": "2",
        "DATA_POINTS_TO_ALARM": "2",
        "CPU_LOWER_LIMIT_VCPUS": "1",
        "CPU_LOWER_LIMIT_VCPUS_PERIOD_MINUTES": "5",
        "CPU_LOWER_LIMIT_VCPUS_DATA_POINTS": "6",
        "CPU_LOWER_LIMIT_VCPUS_DATA_POINTS_TO_ALARM": "1",
        "CPU_UPPER_LIMIT_VCPUS": "4",
    }


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Drop cached settings between tests."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
