"""Núcleo de validação e máscara dos campos de formulário ARS.

Funções puras sobre (texto, configuração): documentos brasileiros (CPF, CNPJ,
CEP), e-mail, números e moeda com cultura explícita.

    from ars_forms import is_cpf, evaluate_document_field, DocumentKind
    is_cpf("111.444.777-35")                                   # True
    evaluate_document_field(DocumentKind.CPF, "11144477735").display_text
    # '111.444.777-35'
"""
from .models import (
    Culture,
    DocumentKind,
    DocumentSpec,
    EditOutcome,
    Failure,
    FieldConfig,
    FieldEvaluation,
    FieldState,
    IntParseResult,
    NumericKind,
    NumericParseResult,
    NumericRange,
    ValidationResult,
    DECIMAL_SENTINEL,
    INT_SENTINEL,
)
from .services import (
    accept_numeric_edit,
    apply_mask,
    available_cultures,
    check_range,
    commit_currency,
    evaluate_document_field,
    evaluate_email_field,
    evaluate_numeric_field,
    evaluate_text_field,
    format_currency,
    get_culture,
    is_cep,
    is_cnpj,
    is_cpf,
    is_email,
    is_tracking_code,
    matches,
    parse_currency,
    parse_decimal,
    parse_integer,
    strip_separators,
    validate_document,
    validate_frame,
    validate_series,
)
from .utils import first_letter_to_upper, to_title_case

__all__ = [
    "Culture",
    "DocumentKind",
    "DocumentSpec",
    "EditOutcome",
    "Failure",
    "FieldConfig",
    "FieldEvaluation",
    "FieldState",
    "IntParseResult",
    "NumericKind",
    "NumericParseResult",
    "NumericRange",
    "ValidationResult",
    "DECIMAL_SENTINEL",
    "INT_SENTINEL",
    "accept_numeric_edit",
    "apply_mask",
    "available_cultures",
    "check_range",
    "commit_currency",
    "evaluate_document_field",
    "evaluate_email_field",
    "evaluate_numeric_field",
    "evaluate_text_field",
    "format_currency",
    "get_culture",
    "is_cep",
    "is_cnpj",
    "is_cpf",
    "is_email",
    "is_tracking_code",
    "matches",
    "parse_currency",
    "parse_decimal",
    "parse_integer",
    "strip_separators",
    "validate_document",
    "validate_frame",
    "validate_series",
    "first_letter_to_upper",
    "to_title_case",
]
