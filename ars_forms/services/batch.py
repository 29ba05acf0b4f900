from __future__ import annotations
from typing import Mapping, Union

import pandas as pd

from ..models.document import DocumentKind
from ..models.field_config import FieldConfig
from ..utils.log import get_logger
from .document_field import evaluate_document_field

log = get_logger(__name__)

RESULT_COLUMNS = ["text", "state", "valid", "normalized", "display", "error"]

def _cell_text(v) -> str:
    if v is None:
        return ""
    try:
        if pd.isna(v):
            return ""
    except (TypeError, ValueError):
        pass
    return str(v)

def validate_series(
    series: pd.Series,
    kind: Union[DocumentKind, str],
    config: FieldConfig | None = None,
) -> pd.DataFrame:
    """
    Avalia cada célula de uma coluna como campo de documento.
    Retorna um DataFrame com as colunas RESULT_COLUMNS e o mesmo índice.
    """
    if series is None or series.empty:
        return pd.DataFrame(columns=RESULT_COLUMNS, dtype=object)

    rows = []
    for v in series.tolist():
        text = _cell_text(v)
        ev = evaluate_document_field(kind, text, config)
        rows.append({
            "text": text,
            "state": ev.state.value,
            "valid": ev.is_valid,
            "normalized": ev.normalized_value,
            "display": ev.display_text,
            "error": ev.error.value if ev.error else None,
        })
    # object: None precisa continuar None (pandas 3 infere dtype string)
    out = pd.DataFrame(rows, columns=RESULT_COLUMNS, index=series.index, dtype=object)
    out["valid"] = out["valid"].astype(bool)
    return out

def validate_frame(
    df: pd.DataFrame,
    columns: Mapping[str, Union[DocumentKind, str]],
    config: FieldConfig | None = None,
) -> pd.DataFrame:
    """
    Valida as colunas mapeadas (coluna -> tipo de documento) e devolve uma cópia
    com '<col>_valid' e '<col>_normalized'. Colunas ausentes são ignoradas.
    """
    if df is None or df.empty:
        return pd.DataFrame()

    view = df.copy()
    for col, kind in (columns or {}).items():
        if col not in view.columns:
            log.warning(f"Coluna ausente para validação: {col}")
            continue
        res = validate_series(view[col], kind, config)
        view[f"{col}_valid"] = res["valid"]
        view[f"{col}_normalized"] = res["normalized"]
        log.info(f"{col}: {int(res['valid'].sum())} válidos de {len(res)}")
    return view
