"""
Common components: settings and logging setup.
"""

from alarm_thresholds.common.config import AlarmSettings, get_settings
from alarm_thresholds.common.logging_config import setup_logging

__all__ = [
    "AlarmSettings",
    "get_settings",
    "setup_logging",
]
