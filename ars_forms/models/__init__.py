from .document import DocumentKind, DocumentSpec
from .culture import Culture, normalize_culture_name, INVARIANT
from .field_config import FieldConfig, NumericKind, NumericRange
from .results import (
    DECIMAL_SENTINEL,
    INT_SENTINEL,
    EditOutcome,
    Failure,
    FieldEvaluation,
    FieldState,
    IntParseResult,
    NumericParseResult,
    ValidationResult,
)

__all__ = [
    "DocumentKind",
    "DocumentSpec",
    "Culture",
    "normalize_culture_name",
    "INVARIANT",
    "FieldConfig",
    "NumericKind",
    "NumericRange",
    "DECIMAL_SENTINEL",
    "INT_SENTINEL",
    "EditOutcome",
    "Failure",
    "FieldEvaluation",
    "FieldState",
    "IntParseResult",
    "NumericParseResult",
    "ValidationResult",
]
