from __future__ import annotations
import sys
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..utils.config import setting
from .culture import normalize_culture_name


class NumericKind(str, Enum):
    INTEGER = "integer"
    DECIMAL = "decimal"
    CURRENCY = "currency"


def _default_culture() -> str:
    return normalize_culture_name(setting("ARS_DEFAULT_CULTURE"))


class FieldConfig(BaseModel):
    """Configuração de um campo de entrada (obrigatoriedade, máscara e cultura)."""
    model_config = ConfigDict(frozen=True)

    is_required: bool = False
    apply_mask_on_blur: bool = True
    culture: str = Field(default_factory=_default_culture)

    @field_validator("culture", mode="before")
    @classmethod
    def _norm_culture(cls, v: Any):
        return normalize_culture_name(v)


class NumericRange(BaseModel):
    """Faixa [min_value, max_value] aplicada pelo chamador após o parsing."""
    model_config = ConfigDict(frozen=True)

    min_value: float = -sys.float_info.max
    max_value: float = sys.float_info.max

    @model_validator(mode="after")
    def _ordered(self):
        if self.min_value > self.max_value:
            raise ValueError(f"min_value ({self.min_value}) maior que max_value ({self.max_value})")
        return self

    def contains(self, value: float) -> bool:
        return self.min_value <= value <= self.max_value

    @classmethod
    def for_kind(cls, kind: NumericKind) -> "NumericRange":
        """Faixas padrão de cada tipo de campo numérico."""
        if kind == NumericKind.INTEGER:
            return cls(min_value=-(2 ** 31), max_value=2 ** 31 - 1)
        if kind == NumericKind.CURRENCY:
            return cls(min_value=0)
        return cls()
