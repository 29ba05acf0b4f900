from __future__ import annotations
from typing import Dict, Union

from ..models.document import DocumentKind, DocumentSpec
from ..models.results import ValidationResult
from .checksums import validate_cnpj, validate_cpf
from .matchers import validate_cep

DOCUMENT_SPECS: Dict[DocumentKind, DocumentSpec] = {
    DocumentKind.CEP: DocumentSpec(
        kind=DocumentKind.CEP,
        unmasked_length=8,
        masked_length=9,
        mask_positions=((5, "-"),),
        validator=validate_cep,
    ),
    DocumentKind.CPF: DocumentSpec(
        kind=DocumentKind.CPF,
        unmasked_length=11,
        masked_length=14,
        mask_positions=((3, "."), (7, "."), (11, "-")),
        validator=validate_cpf,
    ),
    DocumentKind.CNPJ: DocumentSpec(
        kind=DocumentKind.CNPJ,
        unmasked_length=14,
        masked_length=18,
        mask_positions=((2, "."), (6, "."), (10, "/"), (15, "-")),
        validator=validate_cnpj,
    ),
}

def spec_for(kind: Union[DocumentKind, str]) -> DocumentSpec:
    """Descritor do documento; aceita o enum ou o nome ('cpf', 'CNPJ', ...)."""
    if not isinstance(kind, DocumentKind):
        kind = DocumentKind(str(kind).strip().lower())
    return DOCUMENT_SPECS[kind]

def validate_document(kind: Union[DocumentKind, str], text) -> ValidationResult:
    return spec_for(kind).validator(text)
