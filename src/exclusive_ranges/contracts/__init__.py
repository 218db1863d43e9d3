"""
Contract Validation Module

Валидация JSON (wire) форм интервалов по JSON Schema контрактам.
"""

from .validators import (
    ContractValidator,
    LowerExclusiveRangeValidator,
    LowerExclusiveUpperExclusiveRangeValidator,
    LowerExclusiveUpperInclusiveRangeValidator,
    SchemaLoader,
    validate_lower_exclusive_range,
    validate_lower_exclusive_upper_exclusive_range,
    validate_lower_exclusive_upper_inclusive_range,
    validate_range_model,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "LowerExclusiveRangeValidator",
    "LowerExclusiveUpperExclusiveRangeValidator",
    "LowerExclusiveUpperInclusiveRangeValidator",
    # Functions
    "validate_lower_exclusive_range",
    "validate_lower_exclusive_upper_exclusive_range",
    "validate_lower_exclusive_upper_inclusive_range",
    "validate_range_model",
]
