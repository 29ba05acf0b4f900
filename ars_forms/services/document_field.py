from __future__ import annotations
from typing import Union

from ..models.document import DocumentKind
from ..models.field_config import FieldConfig
from ..models.results import FieldEvaluation, FieldState
from ..utils.log import get_logger
from ..utils.text import as_text
from .documents import spec_for
from .fields import blank_evaluation
from .masks import apply_mask

log = get_logger(__name__)

def evaluate_document_field(
    kind: Union[DocumentKind, str],
    text,
    config: FieldConfig | None = None,
) -> FieldEvaluation:
    """
    Decide o estado de um campo de documento no commit (perda de foco).

    - em branco: EMPTY, ou INVALID (REQUIRED_MISSING) se obrigatório;
    - validador do documento falhou: INVALID com o motivo (formato ou DV);
    - válido: VALID_MASKED com a máscara aplicada quando apply_mask_on_blur,
      senão RAW_TYPING mantendo o texto como digitado.

    Função pura de (kind, text, config): o texto anterior válido fica a cargo
    de quem chama.
    """
    config = config or FieldConfig()
    spec = spec_for(kind)
    raw = as_text(text)

    blank = blank_evaluation(raw, config)
    if blank is not None:
        return blank

    result = spec.validator(raw)
    if not result.is_valid:
        log.debug("%s rejeitado (%s): %r", spec.kind.name, result.error.value, raw)
        return FieldEvaluation(state=FieldState.INVALID, display_text=raw, error=result.error)

    digits = result.normalized_value
    if config.apply_mask_on_blur and len(digits) == spec.unmasked_length:
        return FieldEvaluation(
            state=FieldState.VALID_MASKED,
            normalized_value=digits,
            display_text=apply_mask(spec.kind, digits),
        )
    return FieldEvaluation(state=FieldState.RAW_TYPING, normalized_value=digits, display_text=raw)
