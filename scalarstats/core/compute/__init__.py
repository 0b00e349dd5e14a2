"""
Compute utilities shared by the descriptive routines.

Modules:
    timing: Timer with named sections for Result.timing
"""

from scalarstats.core.compute.timing import Timer

__all__ = [
    "Timer",
]
