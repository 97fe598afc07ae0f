"""
Key Lookups for threshold resolution.

A lookup is any callable mapping a key to its raw string value, or None
when the key is absent. Keeping the source behind this capability lets the
resolver run against a plain dict in tests and against the process
environment in production.
"""

import logging
import os
from pathlib import Path
from typing import Callable, Mapping, Optional, Union

from dotenv import dotenv_values

logger = logging.getLogger(__name__)

Lookup = Callable[[str], Optional[str]]


def mapping_lookup(mapping: Mapping[str, str]) -> Lookup:
    """Look keys up in a fixed mapping."""
    return mapping.get


def environ_lookup() -> Lookup:
    """Look keys up in the process environment at call time."""
    return os.environ.get


def dotenv_lookup(path: Union[str, Path]) -> Lookup:
    """
    Look keys up in a ``.env`` file.

    The file is read once. A missing file yields an empty lookup, matching
    how pydantic-settings treats a missing ``env_file``.

    Args:
        path: Path to the dotenv file

    Returns:
        Lookup over the file's values
    """
    path = Path(path)
    if not path.is_file():
        logger.warning(f"Env file not found: {path}")
        return mapping_lookup({})

    # Keys without a value ("KEY" alone on a line) load as None
    values = {k: v for k, v in dotenv_values(path).items() if v is not None}
    logger.debug(f"Loaded {len(values)} keys from {path}")
    return mapping_lookup(values)


def chained_lookup(*lookups: Lookup) -> Lookup:
    """Combine lookups; the first one returning a value wins."""

    def _lookup(key: str) -> Optional[str]:
        for lookup in lookups:
            value = lookup(key)
            if value is not None:
                return value
        return None

    return _lookup


def as_lookup(source: Union[Lookup, Mapping[str, str]]) -> Lookup:
    """Accept either a lookup callable or a mapping."""
    if isinstance(source, Mapping):
        return mapping_lookup(source)
    if callable(source):
        return source
    raise TypeError(f"Expected a mapping or callable, got {type(source).__name__}")


def environment_lookup(env_file: Optional[Union[str, Path]] = None) -> Lookup:
    """
    Build the production lookup.

    Process environment takes precedence over the optional env file.
    """
    if env_file is None:
        return environ_lookup()
    return chained_lookup(environ_lookup(), dotenv_lookup(env_file))
