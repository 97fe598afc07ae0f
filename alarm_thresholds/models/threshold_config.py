"""
Threshold Configuration Models.

Pydantic models for resolved per-alarm threshold settings.
"""

from typing import Dict

from pydantic import BaseModel, ConfigDict, Field

from alarm_thresholds.models.alarm import AlarmKind

UINT16_MAX = 65535


class ThresholdConfig(BaseModel):
    """
    Resolved configuration for a single alarm kind.

    The raw value is kept as configured; numeric kinds are validated to
    hold a float literal before a record is built.
    """

    model_config = ConfigDict(frozen=True)

    value: str
    period_minutes: int = Field(ge=1, le=UINT16_MAX)
    data_points: int = Field(ge=1, le=UINT16_MAX)
    data_points_to_alarm: int = Field(ge=1, le=UINT16_MAX)

    @property
    def numeric_value(self) -> float:
        """Threshold as a float. Raises ValueError for signal values."""
        return float(self.value)


ResolvedConfiguration = Dict[AlarmKind, ThresholdConfig]
