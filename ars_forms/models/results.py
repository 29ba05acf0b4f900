from __future__ import annotations
import sys
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

# Sentinelas de falha: menor valor representável do tipo.
# O sinal primário de falha é sempre `succeeded`, nunca o sentinela.
INT_SENTINEL: int = -(2 ** 31)
DECIMAL_SENTINEL: float = -sys.float_info.max


class Failure(str, Enum):
    FORMAT_MISMATCH = "format_mismatch"      # não casa com o formato esperado
    CHECKSUM_MISMATCH = "checksum_mismatch"  # formato ok, dígitos verificadores errados
    OUT_OF_RANGE = "out_of_range"            # fora de [min, max]
    PARSE_FAILURE = "parse_failure"          # texto não é um número
    REQUIRED_MISSING = "required_missing"    # campo obrigatório vazio


class ValidationResult(BaseModel):
    """
    Resultado da validação de um documento.
    normalized_value só é preenchido quando válido e contém apenas dígitos.
    """
    model_config = ConfigDict(frozen=True)

    is_valid: bool
    normalized_value: str | None = None
    error: Failure | None = None

    @classmethod
    def ok(cls, digits: str) -> "ValidationResult":
        return cls(is_valid=True, normalized_value=digits)

    @classmethod
    def fail(cls, error: Failure) -> "ValidationResult":
        return cls(is_valid=False, error=error)


class NumericParseResult(BaseModel):
    """
    Resultado de parsing numérico.
    pending=True indica edição intermediária (ex.: "," sozinha): nem sucesso nem falha.
    """
    model_config = ConfigDict(frozen=True)

    succeeded: bool
    value: float = DECIMAL_SENTINEL
    pending: bool = False
    error: Failure | None = None

    @property
    def failed(self) -> bool:
        return not self.succeeded and not self.pending


class IntParseResult(NumericParseResult):
    value: int = INT_SENTINEL


class FieldState(str, Enum):
    EMPTY = "empty"
    RAW_TYPING = "raw_typing"        # válido, mantido como digitado (sem máscara)
    VALID_MASKED = "valid_masked"
    INVALID = "invalid"


class FieldEvaluation(BaseModel):
    """Estado de um campo após o commit (perda de foco)."""
    model_config = ConfigDict(frozen=True)

    state: FieldState
    normalized_value: str | None = None
    display_text: str = ""
    error: Failure | None = None

    @property
    def is_valid(self) -> bool:
        return self.state != FieldState.INVALID

    @property
    def typed_value(self) -> str | None:
        """Valor só com dígitos quando válido; nunca o texto mascarado."""
        if self.state in (FieldState.RAW_TYPING, FieldState.VALID_MASKED):
            return self.normalized_value
        return None


class EditOutcome(BaseModel):
    """
    Decisão sobre uma edição interativa.
    former_text é o último texto aceito, que o chamador deve guardar.
    """
    model_config = ConfigDict(frozen=True)

    display_text: str = ""
    former_text: str = ""
    rejected: bool = False
    result: NumericParseResult | None = Field(default=None)
