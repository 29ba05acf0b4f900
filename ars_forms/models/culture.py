from __future__ import annotations
import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

INVARIANT = "invariant"

_NAME_RE = re.compile(r"^([A-Za-z]{2,3})(?:[-_]([A-Za-z]{2}))?$")


def normalize_culture_name(name: Any) -> str:
    """
    'pt_br' / 'PT-br' -> 'pt-BR'; vazio ou 'invariant' -> 'invariant'.
    Nomes fora do padrão idioma-REGIÃO são devolvidos apenas sem espaços.
    """
    s = str(name or "").strip()
    if not s or s.lower() == INVARIANT:
        return INVARIANT
    m = _NAME_RE.match(s)
    if not m:
        return s
    lang, region = m.group(1).lower(), m.group(2)
    return f"{lang}-{region.upper()}" if region else lang


class Culture(BaseModel):
    """
    Convenções numéricas/monetárias de uma cultura.
    Os padrões usam {symbol} e {number}; o negativo recebe o número sem sinal.
    """
    model_config = ConfigDict(frozen=True)

    name: str
    decimal_separator: str = "."
    group_separator: str = ","
    currency_symbol: str = "¤"
    currency_positive_pattern: str = "{symbol}{number}"
    currency_negative_pattern: str = "-{symbol}{number}"
    currency_decimals: int = Field(default=2, ge=0, le=8)

    @field_validator("name", mode="before")
    @classmethod
    def _norm_name(cls, v: Any):
        return normalize_culture_name(v)

    @field_validator("currency_positive_pattern", "currency_negative_pattern")
    @classmethod
    def _has_number(cls, v: str):
        if "{number}" not in v:
            raise ValueError("padrão monetário precisa conter {number}")
        return v

    @property
    def uses_comma_decimal(self) -> bool:
        return self.decimal_separator == ","
