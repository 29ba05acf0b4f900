from __future__ import annotations
from typing import Tuple

from ..models.results import Failure, ValidationResult
from ..utils.log import get_logger
from ..utils.text import as_text, only_digits

log = get_logger(__name__)

# pesos do CNPJ: o 1º DV usa a tabela a partir do índice 1, o 2º a partir do 0
CNPJ_WEIGHTS: Tuple[int, ...] = (6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)

def _mod11_digit(total: int) -> int:
    r = total % 11
    return 0 if r < 2 else 11 - r

# ---------------- CPF ----------------

def _cpf_digit(base: str, factor: int) -> int:
    return _mod11_digit(sum(int(ch) * (factor - i) for i, ch in enumerate(base)))

def cpf_check_digits(base: str) -> Tuple[int, int]:
    """
    Calcula os dois DVs do CPF a partir dos 9 primeiros dígitos.
    1º DV: pesos 10..2; 2º DV: pesos 11..2 sobre os 9 dígitos + 1º DV.
    """
    base = base[:9]
    d1 = _cpf_digit(base, 10)
    d2 = _cpf_digit(base + str(d1), 11)
    return d1, d2

def _cpf_body(cpf) -> str:
    return as_text(cpf).strip().replace(".", "").replace("-", "")

def validate_cpf(cpf) -> ValidationResult:
    """
    Valida CPF com cálculo de dígitos verificadores.
    Aceita com/sem máscara ('.' e '-'). Sequências repetidas não são rejeitadas
    de antemão: valem se o módulo 11 fechar (ex.: 111.111.111-11).
    """
    n = _cpf_body(cpf)
    if len(n) != 11 or not (n.isascii() and n.isdigit()):
        return ValidationResult.fail(Failure.FORMAT_MISMATCH)

    d1, d2 = cpf_check_digits(n)
    if not n.endswith(f"{d1}{d2}"):
        log.debug("CPF com DV inválido: esperado %d%d, recebido %s", d1, d2, n[-2:])
        return ValidationResult.fail(Failure.CHECKSUM_MISMATCH)
    return ValidationResult.ok(n)

def is_cpf(cpf) -> bool:
    return validate_cpf(cpf).is_valid

# ---------------- CNPJ ----------------

def cnpj_check_digits(base: str) -> Tuple[int, int]:
    """Calcula os dois DVs do CNPJ a partir dos 12 primeiros dígitos."""
    digits = [int(ch) for ch in base[:12]]
    s1 = sum(d * CNPJ_WEIGHTS[i + 1] for i, d in enumerate(digits))
    d1 = _mod11_digit(s1)
    s2 = sum(d * CNPJ_WEIGHTS[i] for i, d in enumerate(digits + [d1]))
    return d1, _mod11_digit(s2)

def validate_cnpj(cnpj) -> ValidationResult:
    """
    Valida CNPJ com dígitos verificadores.
    Qualquer caractere não numérico é descartado antes da conferência.
    """
    n = only_digits(cnpj)
    if len(n) != 14:
        return ValidationResult.fail(Failure.FORMAT_MISMATCH)

    d1, d2 = cnpj_check_digits(n)
    if int(n[12]) != d1 or int(n[13]) != d2:
        log.debug("CNPJ com DV inválido: esperado %d%d, recebido %s", d1, d2, n[-2:])
        return ValidationResult.fail(Failure.CHECKSUM_MISMATCH)
    return ValidationResult.ok(n)

def is_cnpj(cnpj) -> bool:
    return validate_cnpj(cnpj).is_valid
