from condstyle.validation.rules import ALL_RULES, StyleSource
from condstyle.validation.validator import ValidationError, validate, validate_or_raise

__all__ = ["ALL_RULES", "StyleSource", "ValidationError", "validate", "validate_or_raise"]
