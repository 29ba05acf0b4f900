from __future__ import annotations

from ..models.field_config import NumericKind
from ..models.results import EditOutcome
from ..utils.text import as_text
from .numeric import CultureLike, format_currency, parse_currency, parse_numeric

def accept_numeric_edit(
    text,
    former_text: str = "",
    kind: NumericKind = NumericKind.DECIMAL,
    culture: CultureLike = None,
) -> EditOutcome:
    """
    Decide uma edição durante a digitação:
    - pending ("", "," ou "."): aceita, sem atualizar o último texto aceito;
    - número válido: aceita e vira o novo texto aceito;
    - resto: rejeita e volta ao último texto aceito.
    """
    raw = as_text(text)
    former = as_text(former_text)
    result = parse_numeric(kind, raw, culture)
    if result.pending:
        return EditOutcome(display_text=raw, former_text=former, result=result)
    if result.succeeded:
        return EditOutcome(display_text=raw, former_text=raw, result=result)
    return EditOutcome(display_text=former, former_text=former, rejected=True, result=result)

def commit_currency(text, culture: CultureLike = None) -> str:
    """Ao sair do campo, reescreve o valor no formato monetário da cultura."""
    raw = as_text(text)
    result = parse_currency(raw, culture)
    return format_currency(result.value, culture) if result.succeeded else raw
