from __future__ import annotations
from typing import Union

from ..models.document import DocumentKind
from ..utils.text import only_digits
from .documents import spec_for

def strip_separators(kind: Union[DocumentKind, str], text) -> str:
    """Remove a máscara (e qualquer outro não-dígito), sobrando só os dígitos."""
    spec_for(kind)  # rejeita tipo desconhecido
    return only_digits(text)

def apply_mask(kind: Union[DocumentKind, str], raw_digits: str) -> str:
    """
    Insere os separadores nas posições do documento, em sequência.
    Se o tamanho não bater com o documento, devolve o texto sem máscara.
    """
    spec = spec_for(kind)
    raw = raw_digits or ""
    if len(raw) != spec.unmasked_length:
        return raw
    out = raw
    for pos, literal in spec.mask_positions:
        out = out[:pos] + literal + out[pos:]
    return out

def is_masked(kind: Union[DocumentKind, str], text: str) -> bool:
    """True quando o texto já está no formato mascarado completo do documento."""
    spec = spec_for(kind)
    return len(text or "") == spec.masked_length and apply_mask(kind, only_digits(text)) == text
