"""
Threshold resolution services.
"""

from alarm_thresholds.services.errors import (
    InvalidFloatError,
    InvalidIntegerError,
    ThresholdResolutionError,
)
from alarm_thresholds.services.lookup import (
    Lookup,
    as_lookup,
    chained_lookup,
    dotenv_lookup,
    environ_lookup,
    environment_lookup,
    mapping_lookup,
)
from alarm_thresholds.services.threshold_resolver import (
    ThresholdResolver,
    resolve_thresholds,
)

__all__ = [
    # Errors
    "ThresholdResolutionError",
    "InvalidIntegerError",
    "InvalidFloatError",
    # Lookups
    "Lookup",
    "as_lookup",
    "chained_lookup",
    "dotenv_lookup",
    "environ_lookup",
    "environment_lookup",
    "mapping_lookup",
    # Resolver
    "ThresholdResolver",
    "resolve_thresholds",
]
