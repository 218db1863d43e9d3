"""
Domain models and value objects.

Contains the exclusive-lower-bound range types and the Bound model.
"""

from exclusive_ranges.domain.bounds import Bound, BoundKind, bounds_contain
from exclusive_ranges.domain.ranges import (
    LowerExclusiveRange,
    LowerExclusiveUpperExclusiveRange,
    LowerExclusiveUpperInclusiveRange,
)

__all__ = [
    # Bounds module
    "Bound",
    "BoundKind",
    "bounds_contain",
    # Range models
    "LowerExclusiveRange",
    "LowerExclusiveUpperExclusiveRange",
    "LowerExclusiveUpperInclusiveRange",
]
