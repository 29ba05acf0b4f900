from .checksums import (
    cnpj_check_digits,
    cpf_check_digits,
    is_cnpj,
    is_cpf,
    validate_cnpj,
    validate_cpf,
)
from .matchers import Pattern, is_cep, is_email, is_tracking_code, matches, validate_cep
from .documents import DOCUMENT_SPECS, spec_for, validate_document
from .masks import apply_mask, is_masked, strip_separators
from .cultures import available_cultures, clear_culture_cache, get_culture, load_cultures_yaml
from .numeric import (
    check_range,
    format_currency,
    parse_currency,
    parse_decimal,
    parse_integer,
    parse_numeric,
)
from .fields import evaluate_email_field, evaluate_numeric_field, evaluate_text_field
from .document_field import evaluate_document_field
from .edits import accept_numeric_edit, commit_currency
from .batch import validate_frame, validate_series

__all__ = [
    "cnpj_check_digits",
    "cpf_check_digits",
    "is_cnpj",
    "is_cpf",
    "validate_cnpj",
    "validate_cpf",
    "Pattern",
    "is_cep",
    "is_email",
    "is_tracking_code",
    "matches",
    "validate_cep",
    "DOCUMENT_SPECS",
    "spec_for",
    "validate_document",
    "apply_mask",
    "is_masked",
    "strip_separators",
    "available_cultures",
    "clear_culture_cache",
    "get_culture",
    "load_cultures_yaml",
    "check_range",
    "format_currency",
    "parse_currency",
    "parse_decimal",
    "parse_integer",
    "parse_numeric",
    "evaluate_email_field",
    "evaluate_numeric_field",
    "evaluate_text_field",
    "evaluate_document_field",
    "accept_numeric_edit",
    "commit_currency",
    "validate_frame",
    "validate_series",
]
