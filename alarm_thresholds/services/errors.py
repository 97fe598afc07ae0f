"""
Resolution errors.

Every error carries the environment key that failed to parse.
"""


class ThresholdResolutionError(Exception):
    """Raised when a threshold key holds a malformed value."""

    def __init__(self, key: str, detail: str):
        self.key = key
        self.detail = detail
        super().__init__(f"{detail} (key: {key})")


class InvalidIntegerError(ThresholdResolutionError):
    """Raised when a period or data points key is not a valid uint16."""
    pass


class InvalidFloatError(ThresholdResolutionError):
    """Raised when a numeric alarm's value is not a valid float."""
    pass
