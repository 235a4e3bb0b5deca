"""
Shared compute infrastructure for survcurve.

Submodules:
    timing: Execution timing utilities
"""

from survcurve.core.compute.timing import Timer, timed

__all__ = [
    "Timer",
    "timed",
]
