from __future__ import annotations
from typing import Optional

from ..models.field_config import FieldConfig, NumericKind, NumericRange
from ..models.results import Failure, FieldEvaluation, FieldState
from ..utils.text import as_text
from .matchers import is_email
from .numeric import check_range, format_currency, parse_numeric

def blank_evaluation(raw: str, config: FieldConfig) -> Optional[FieldEvaluation]:
    """
    Regra comum a todos os campos: texto em branco é EMPTY, ou INVALID
    quando obrigatório. Retorna None se o texto não está em branco.
    """
    if raw.strip():
        return None
    if config.is_required:
        return FieldEvaluation(state=FieldState.INVALID, display_text=raw, error=Failure.REQUIRED_MISSING)
    return FieldEvaluation(state=FieldState.EMPTY)

def evaluate_text_field(text, config: FieldConfig | None = None) -> FieldEvaluation:
    raw = as_text(text)
    return blank_evaluation(raw, config or FieldConfig()) or FieldEvaluation(
        state=FieldState.RAW_TYPING, normalized_value=raw, display_text=raw
    )

def evaluate_email_field(text, config: FieldConfig | None = None) -> FieldEvaluation:
    raw = as_text(text)
    blank = blank_evaluation(raw, config or FieldConfig())
    if blank is not None:
        return blank
    if not is_email(raw):
        return FieldEvaluation(state=FieldState.INVALID, display_text=raw, error=Failure.FORMAT_MISMATCH)
    return FieldEvaluation(state=FieldState.RAW_TYPING, normalized_value=raw, display_text=raw)

def evaluate_numeric_field(
    text,
    kind: NumericKind,
    config: FieldConfig | None = None,
    numeric_range: NumericRange | None = None,
) -> FieldEvaluation:
    """
    Commit de campo numérico: parsing na cultura do campo e checagem de faixa
    (padrão do tipo quando numeric_range não é informado). Moeda é reformatada.
    """
    config = config or FieldConfig()
    raw = as_text(text)
    blank = blank_evaluation(raw, config)
    if blank is not None:
        return blank

    result = parse_numeric(kind, raw, config.culture)
    if not result.succeeded:
        return FieldEvaluation(state=FieldState.INVALID, display_text=raw, error=Failure.PARSE_FAILURE)

    error = check_range(result.value, numeric_range or NumericRange.for_kind(kind))
    if error is not None:
        return FieldEvaluation(state=FieldState.INVALID, display_text=raw, error=error)

    display = format_currency(result.value, config.culture) if kind == NumericKind.CURRENCY else raw
    return FieldEvaluation(state=FieldState.RAW_TYPING, normalized_value=str(result.value), display_text=display)
