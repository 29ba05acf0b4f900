from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable, Tuple

if TYPE_CHECKING:
    from .results import ValidationResult


class DocumentKind(str, Enum):
    """Documentos brasileiros suportados pelos campos com máscara."""
    CPF = "cpf"
    CNPJ = "cnpj"
    CEP = "cep"


@dataclass(frozen=True)
class DocumentSpec:
    """
    Descritor de um tipo de documento (tabela de estratégias, sem herança).
    mask_positions: pares (índice, literal) aplicados em sequência sobre a
    string que cresce a cada inserção.
    """
    kind: DocumentKind
    unmasked_length: int
    masked_length: int
    mask_positions: Tuple[Tuple[int, str], ...]
    validator: Callable[[str], "ValidationResult"]

    @property
    def separators(self) -> str:
        return "".join(sorted({lit for _, lit in self.mask_positions}))
