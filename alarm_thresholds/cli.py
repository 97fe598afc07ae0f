"""
Command-line entry point.

Resolves alarm thresholds from the process environment and prints them
as JSON.

Usage:
    alarm-thresholds --env-file .env
    python -m alarm_thresholds.cli --kind CPU_UPPER_LIMIT_VCPUS
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from alarm_thresholds.common.config import get_settings
from alarm_thresholds.common.logging_config import setup_logging
from alarm_thresholds.models.alarm import AlarmKind
from alarm_thresholds.services.errors import ThresholdResolutionError
from alarm_thresholds.services.lookup import environment_lookup
from alarm_thresholds.services.threshold_resolver import resolve_thresholds

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="alarm-thresholds",
        description="Resolve alarm thresholds from environment variables",
    )
    parser.add_argument("--env-file", help="Additional .env file to read")
    parser.add_argument("--log-level", help="Logging level (default: INFO)")
    parser.add_argument(
        "--kind",
        action="append",
        choices=[kind.value for kind in AlarmKind],
        help="Alarm kind to resolve (repeatable, default: all)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run the CLI and return the exit code."""
    args = build_parser().parse_args(argv)
    settings = get_settings()

    setup_logging(args.log_level or settings.log_level)

    kinds = [AlarmKind(name) for name in args.kind] if args.kind else None
    lookup = environment_lookup(args.env_file or settings.env_file)

    try:
        configs = resolve_thresholds(lookup, kinds=kinds)
    except ThresholdResolutionError as e:
        logger.error(f"Threshold resolution failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    output = {kind.value: config.model_dump() for kind, config in configs.items()}
    print(json.dumps(output, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
