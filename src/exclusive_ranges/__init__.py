"""
Range value types bounded exclusively below.

(start..)     LowerExclusiveRange
(start..end)  LowerExclusiveUpperExclusiveRange
(start..=end) LowerExclusiveUpperInclusiveRange
"""

from exclusive_ranges.domain import (
    Bound,
    BoundKind,
    LowerExclusiveRange,
    LowerExclusiveUpperExclusiveRange,
    LowerExclusiveUpperInclusiveRange,
    bounds_contain,
)

__all__ = [
    "Bound",
    "BoundKind",
    "bounds_contain",
    "LowerExclusiveRange",
    "LowerExclusiveUpperExclusiveRange",
    "LowerExclusiveUpperInclusiveRange",
]
