"""
Tests for key lookups.
"""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from alarm_thresholds.models.alarm import AlarmKind
from alarm_thresholds.services.lookup import (
    as_lookup,
    chained_lookup,
    dotenv_lookup,
    environ_lookup,
    environment_lookup,
    mapping_lookup,
)
from alarm_thresholds.services.threshold_resolver import resolve_thresholds


class TestMappingLookups:
    """Tests for mapping and chained lookups."""

    def test_mapping_lookup(self):
        """Test present and absent keys."""
        lookup = mapping_lookup({"DATA_POINTS": "4"})
        assert lookup("DATA_POINTS") == "4"
        assert lookup("PERIOD_MINUTES") is None

    def test_chained_first_wins(self):
        """Test earlier lookups take precedence."""
        lookup = chained_lookup(
            mapping_lookup({"DATA_POINTS": "4"}),
            mapping_lookup({"DATA_POINTS": "9", "PERIOD_MINUTES": "2"}),
        )
        assert lookup("DATA_POINTS") == "4"
        assert lookup("PERIOD_MINUTES") == "2"
        assert lookup("DATA_POINTS_TO_ALARM") is None

    def test_chained_empty_string_is_a_value(self):
        """Test an empty string shadows later lookups."""
        lookup = chained_lookup(
            mapping_lookup({"DATA_POINTS": ""}),
            mapping_lookup({"DATA_POINTS": "9"}),
        )
        assert lookup("DATA_POINTS") == ""

    def test_as_lookup(self):
        """Test mappings and callables are both accepted."""
        env = {"DATA_POINTS": "4"}
        assert as_lookup(env)("DATA_POINTS") == "4"
        assert as_lookup(env.get)("DATA_POINTS") == "4"

    def test_as_lookup_rejects_other_types(self):
        """Test unsupported sources raise TypeError."""
        with pytest.raises(TypeError):
            as_lookup(42)


class TestEnvironmentLookups:
    """Tests for process environment and dotenv lookups."""

    def test_environ_lookup(self):
        """Test reading the process environment."""
        with patch.dict(os.environ, {"CPU_UPPER_LIMIT_VCPUS": "4"}, clear=True):
            lookup = environ_lookup()
            assert lookup("CPU_UPPER_LIMIT_VCPUS") == "4"
            assert lookup("CPU_LOWER_LIMIT_VCPUS") is None

    def test_resolve_from_environment(self):
        """Test resolution against the real process environment."""
        env_vars = {
            "PERIOD_MINUTES": "3",
            "CPU_UPPER_LIMIT_VCPUS": "4",
        }

        with patch.dict(os.environ, env_vars, clear=True):
            configs = resolve_thresholds(environment_lookup())

        assert list(configs) == [AlarmKind.CPU_UPPER_LIMIT_VCPUS]
        assert configs[AlarmKind.CPU_UPPER_LIMIT_VCPUS].period_minutes == 3

    def test_dotenv_lookup(self, tmp_path: Path):
        """Test reading values from a .env file."""
        env_file = tmp_path / ".env"
        env_file.write_text(
            "# thresholds\n"
            "MEMORY_UPPER_LIMIT_GB=8\n"
            "MEMORY_UPPER_LIMIT_GB_DATA_POINTS='4'\n"
            "EMPTY_KEY\n",
            encoding="utf-8",
        )

        lookup = dotenv_lookup(env_file)
        assert lookup("MEMORY_UPPER_LIMIT_GB") == "8"
        assert lookup("MEMORY_UPPER_LIMIT_GB_DATA_POINTS") == "4"
        assert lookup("EMPTY_KEY") is None

    def test_dotenv_missing_file(self, tmp_path: Path):
        """Test a missing .env file behaves as empty."""
        lookup = dotenv_lookup(tmp_path / "nope.env")
        assert lookup("MEMORY_UPPER_LIMIT_GB") is None

    def test_process_environment_wins_over_dotenv(self, tmp_path: Path):
        """Test process environment takes precedence over the .env file."""
        env_file = tmp_path / ".env"
        env_file.write_text(
            "CPU_UPPER_LIMIT_VCPUS=2\nDATA_POINTS=7\n",
            encoding="utf-8",
        )

        with patch.dict(os.environ, {"CPU_UPPER_LIMIT_VCPUS": "4"}, clear=True):
            configs = resolve_thresholds(environment_lookup(env_file))

        config = configs[AlarmKind.CPU_UPPER_LIMIT_VCPUS]
        assert config.value == "4"
        assert config.data_points == 7
