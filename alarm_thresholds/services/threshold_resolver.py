"""
Threshold Resolver.

Resolves per-alarm threshold configuration from flat keys using layered
defaults:

1. Kind-scoped override (``<KIND>_PERIOD_MINUTES`` ...)
2. Global default (``PERIOD_MINUTES`` ...)
3. Built-in default

An alarm kind appears in the result only when its base key is set. Tuning
parameters below their minimum are clamped with a warning; any malformed
value aborts the whole resolution.
"""

import logging
import re
from dataclasses import dataclass
from typing import Iterable, Mapping, Optional, Union

from alarm_thresholds.models.alarm import AlarmKind
from alarm_thresholds.models.threshold_config import (
    UINT16_MAX,
    ResolvedConfiguration,
    ThresholdConfig,
)
from alarm_thresholds.services.errors import InvalidFloatError, InvalidIntegerError
from alarm_thresholds.services.lookup import Lookup, as_lookup

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Tunable:
    """A tuning parameter with its key suffix, default and minimum."""

    key: str
    default: int
    minimum: int = 1


PERIOD_MINUTES = Tunable(key="PERIOD_MINUTES", default=1)
DATA_POINTS = Tunable(key="DATA_POINTS", default=5)
DATA_POINTS_TO_ALARM = Tunable(key="DATA_POINTS_TO_ALARM", default=3)

TUNABLES = (PERIOD_MINUTES, DATA_POINTS, DATA_POINTS_TO_ALARM)

_UINT_PATTERN = re.compile(r"\+?[0-9]+")
_FLOAT_PATTERN = re.compile(
    r"[+-]?(?:inf|infinity|nan|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:e[+-]?[0-9]+)?)",
    re.IGNORECASE,
)


def parse_uint16(key: str, raw: str) -> int:
    """
    Parse an unsigned 16-bit integer.

    Args:
        key: Key the value was read from, used in errors
        raw: Raw string value

    Returns:
        Parsed integer

    Raises:
        InvalidIntegerError: If the value is empty, non-numeric or too large
    """
    if raw == "":
        raise InvalidIntegerError(key, "cannot parse integer from empty string")
    if not _UINT_PATTERN.fullmatch(raw):
        raise InvalidIntegerError(key, "invalid digit found in string")

    # Leading zeros are insignificant; check magnitude before converting
    digits = raw.lstrip("+").lstrip("0") or "0"
    if len(digits) > len(str(UINT16_MAX)) or int(digits) > UINT16_MAX:
        raise InvalidIntegerError(key, "number too large to fit in target type")
    return int(digits)


def validate_float(key: str, raw: str) -> str:
    """Check that raw is a float literal, returning it unchanged."""
    if not _FLOAT_PATTERN.fullmatch(raw):
        raise InvalidFloatError(key, "invalid float literal")
    return raw


class ThresholdResolver:
    """
    Resolves alarm threshold configuration from a key lookup.

    Usage:
        resolver = ThresholdResolver({"CPU_UPPER_LIMIT_VCPUS": "4"})
        configs = resolver.resolve()
    """

    def __init__(
        self,
        lookup: Union[Lookup, Mapping[str, str]],
        kinds: Optional[Iterable[AlarmKind]] = None,
    ):
        """
        Initialize resolver.

        Args:
            lookup: Callable returning a key's raw value or None, or a mapping
            kinds: Alarm kinds to resolve, in order (defaults to all)
        """
        self._lookup = as_lookup(lookup)
        self._kinds = list(kinds) if kinds is not None else list(AlarmKind)

    def resolve(self) -> ResolvedConfiguration:
        """
        Resolve configuration for every alarm kind whose base key is set.

        Returns:
            Mapping of alarm kind to its resolved configuration

        Raises:
            InvalidIntegerError: If a period or data points key is malformed
            InvalidFloatError: If a numeric alarm's value is malformed
        """
        defaults = {
            tunable.key: self._read_uint16(tunable.key, tunable.default)
            for tunable in TUNABLES
        }

        configs: ResolvedConfiguration = {}
        for kind in self._kinds:
            config = self._resolve_kind(kind, defaults)
            if config is not None:
                configs[kind] = config

        logger.debug(f"Configs: {self._describe(configs)}")
        return configs

    def _resolve_kind(
        self, kind: AlarmKind, defaults: Mapping[str, int]
    ) -> Optional[ThresholdConfig]:
        value = self._lookup(kind.value)
        if value is None:
            return None

        if kind.is_numeric:
            validate_float(kind.value, value)

        tunables = {}
        for tunable in TUNABLES:
            key = kind.env_key(tunable.key)
            resolved = self._read_uint16(key, defaults[tunable.key])
            if resolved < tunable.minimum:
                logger.warning(
                    f"{key} can't be below {tunable.minimum}, "
                    f"setting it to {tunable.minimum}"
                )
                resolved = tunable.minimum
            tunables[tunable.key.lower()] = resolved

        return ThresholdConfig(value=value, **tunables)

    def _read_uint16(self, key: str, default: int) -> int:
        raw = self._lookup(key)
        if raw is None:
            return default
        return parse_uint16(key, raw)

    @staticmethod
    def _describe(configs: ResolvedConfiguration) -> dict:
        return {kind.value: config.model_dump() for kind, config in configs.items()}


def resolve_thresholds(
    lookup: Union[Lookup, Mapping[str, str]],
    kinds: Optional[Iterable[AlarmKind]] = None,
) -> ResolvedConfiguration:
    """
    Resolve alarm threshold configuration.

    Args:
        lookup: Callable returning a key's raw value or None, or a mapping
        kinds: Alarm kinds to resolve, in order (defaults to all)

    Returns:
        Mapping of alarm kind to its resolved configuration
    """
    return ThresholdResolver(lookup, kinds=kinds).resolve()
