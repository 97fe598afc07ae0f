"""
Alarm Thresholds - environment-driven alarm threshold resolution.

This package provides:
- Closed set of alarm kinds with numeric/signal categories
- Layered default resolution (kind override -> global default -> built-in default)
- Clamping of tuning parameters with warnings
- Structured errors naming the environment key that failed
"""

__version__ = "0.1.0"
