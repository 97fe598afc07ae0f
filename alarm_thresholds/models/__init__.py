"""
Alarm Threshold Models.

This module exports the data models used throughout the resolver.
"""

from alarm_thresholds.models.alarm import AlarmCategory, AlarmKind
from alarm_thresholds.models.threshold_config import (
    ResolvedConfiguration,
    ThresholdConfig,
)

__all__ = [
    # Alarm kinds
    "AlarmCategory",
    "AlarmKind",
    # Resolved records
    "ThresholdConfig",
    "ResolvedConfiguration",
]
