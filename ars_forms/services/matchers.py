from __future__ import annotations
import re
from enum import Enum
from typing import Callable, Dict, Union

from ..models.document import DocumentKind
from ..models.results import Failure, ValidationResult
from ..utils.text import as_text, only_digits
from .checksums import validate_cnpj, validate_cpf


class Pattern(str, Enum):
    CEP = "cep"
    EMAIL = "email"
    TRACKING_CODE = "tracking_code"


# casamento sempre de ponta a ponta (fullmatch), sem diferenciar maiúsculas
_PATTERNS: Dict[Pattern, re.Pattern] = {
    Pattern.CEP: re.compile(r"[0-9]{5}-[0-9]{3}|[0-9]{8}", re.IGNORECASE),
    Pattern.EMAIL: re.compile(r"\w+([-+.']\w+)*@\w+([-.]\w+)*\.\w+([-.]\w+)*", re.IGNORECASE),
    Pattern.TRACKING_CODE: re.compile(r"\D{2}\d+\D{2}", re.IGNORECASE),
}

def _match(pattern: Pattern, text) -> bool:
    return _PATTERNS[pattern].fullmatch(as_text(text)) is not None

def is_cep(cep) -> bool:
    """NNNNN-NNN ou 8 dígitos."""
    return _match(Pattern.CEP, cep)

def is_email(email) -> bool:
    return _match(Pattern.EMAIL, email)

def is_tracking_code(code) -> bool:
    """Código de rastreio: 2 não-dígitos, dígitos, 2 não-dígitos (ex.: AA123456789BR)."""
    return _match(Pattern.TRACKING_CODE, code)

def validate_cep(cep) -> ValidationResult:
    if not is_cep(cep):
        return ValidationResult.fail(Failure.FORMAT_MISMATCH)
    return ValidationResult.ok(only_digits(cep))

_DOCUMENT_VALIDATORS: Dict[DocumentKind, Callable[[str], ValidationResult]] = {
    DocumentKind.CPF: validate_cpf,
    DocumentKind.CNPJ: validate_cnpj,
    DocumentKind.CEP: validate_cep,
}

def matches(purpose: Union[Pattern, DocumentKind, str], text) -> bool:
    """
    Predicado único: aceita um Pattern ('email', 'tracking_code', ...) ou um
    DocumentKind (para CPF/CNPJ inclui a conferência dos DVs). Nunca lança para
    texto; propósito desconhecido é erro de programação (ValueError).
    """
    if isinstance(purpose, DocumentKind):
        return _DOCUMENT_VALIDATORS[purpose](as_text(text)).is_valid
    if isinstance(purpose, Pattern):
        return _match(purpose, text)
    key = str(purpose).strip().lower()
    if key in {k.value for k in DocumentKind}:
        return matches(DocumentKind(key), text)
    return _match(Pattern(key), text)
