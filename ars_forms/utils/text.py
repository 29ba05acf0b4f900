from __future__ import annotations
import re
from typing import Optional

_WORD_START = re.compile(r"(^|[\s-])([^\s-])")

def as_text(s) -> str:
    """None vira "", qualquer outro valor vira str."""
    if s is None:
        return ""
    return s if isinstance(s, str) else str(s)

def only_digits(s: Optional[str]) -> str:
    return re.sub(r"[^0-9]", "", as_text(s))

def to_title_case(s: Optional[str]) -> str:
    """
    Primeira letra de cada palavra em maiúscula, restante minúsculo.
    Palavras começam após espaço ou hífen ("ana-maria" -> "Ana-Maria").
    """
    low = as_text(s).lower()
    return _WORD_START.sub(lambda m: m.group(1) + m.group(2).upper(), low)

def first_letter_to_upper(s: Optional[str]) -> Optional[str]:
    if not s:
        return s
    return s[0].upper() + s[1:]
