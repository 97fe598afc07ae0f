"""
Alarm Kind Definitions.

Closed set of monitorable conditions. The member value is the stable name
used to derive environment variable keys.
"""

from enum import Enum
from typing import Dict


class AlarmCategory(str, Enum):
    """How an alarm's configured value is interpreted."""

    NUMERIC = "numeric"  # Value must be a float threshold
    SIGNAL = "signal"    # Value is an opaque string (e.g. health check)


class AlarmKind(str, Enum):
    """Alarm kinds in resolution order."""

    CPU_LOWER_LIMIT_VCPUS = "CPU_LOWER_LIMIT_VCPUS"
    CPU_UPPER_LIMIT_VCPUS = "CPU_UPPER_LIMIT_VCPUS"
    MEMORY_LOWER_LIMIT_GB = "MEMORY_LOWER_LIMIT_GB"
    MEMORY_UPPER_LIMIT_GB = "MEMORY_UPPER_LIMIT_GB"
    DISK_USAGE_LOWER_LIMIT_GB = "DISK_USAGE_LOWER_LIMIT_GB"
    DISK_USAGE_UPPER_LIMIT_GB = "DISK_USAGE_UPPER_LIMIT_GB"
    NETWORK_RX_LOWER_LIMIT_GB = "NETWORK_RX_LOWER_LIMIT_GB"
    NETWORK_RX_UPPER_LIMIT_GB = "NETWORK_RX_UPPER_LIMIT_GB"
    NETWORK_TX_LOWER_LIMIT_GB = "NETWORK_TX_LOWER_LIMIT_GB"
    NETWORK_TX_UPPER_LIMIT_GB = "NETWORK_TX_UPPER_LIMIT_GB"
    HEALTH_CHECK_FAILED = "HEALTH_CHECK_FAILED"

    def __str__(self) -> str:
        return self.value

    @property
    def category(self) -> AlarmCategory:
        """Category of this alarm kind."""
        return _CATEGORIES.get(self, AlarmCategory.NUMERIC)

    @property
    def is_numeric(self) -> bool:
        """Check if the configured value must parse as a float."""
        return self.category == AlarmCategory.NUMERIC

    def env_key(self, suffix: str) -> str:
        """Build a kind-scoped key, e.g. ``CPU_UPPER_LIMIT_VCPUS_DATA_POINTS``."""
        return f"{self.value}_{suffix}"


# Kinds not listed here are numeric
_CATEGORIES: Dict[AlarmKind, AlarmCategory] = {
    AlarmKind.HEALTH_CHECK_FAILED: AlarmCategory.SIGNAL,
}
