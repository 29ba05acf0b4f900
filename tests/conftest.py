from __future__ import annotations
from pathlib import Path
import pytest
import pandas as pd

from ars_forms.utils.config import reset_settings, _DEFAULTS
from ars_forms.services.cultures import clear_culture_cache

# ---------- AMBIENTE LIMPO ----------

@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """
    Garante que nenhum ARS_* do ambiente nem override de outro teste vaze.
    """
    for k in _DEFAULTS:
        monkeypatch.delenv(k, raising=False)
    reset_settings()
    clear_culture_cache()
    yield
    reset_settings()
    clear_culture_cache()

# ---------- FIXTURES DE DADOS ----------

@pytest.fixture
def cultures_yaml(tmp_path: Path) -> Path:
    out = tmp_path / "cultures.yaml"
    out.write_text(
        "cultures:\n"
        "  - name: pt_pt\n"
        "    decimal_separator: ','\n"
        "    group_separator: ' '\n"
        "    currency_symbol: '€'\n"
        "    currency_positive_pattern: '{number} {symbol}'\n"
        "    currency_negative_pattern: '-{number} {symbol}'\n",
        encoding="utf-8",
    )
    return out

@pytest.fixture
def cadastro_df() -> pd.DataFrame:
    # CPFs/CNPJs de teste amplamente usados
    return pd.DataFrame([
        {"nome": "Ana", "cpf": "111.444.777-35", "cnpj": "11.222.333/0001-81", "cep": "12345678"},
        {"nome": "Bruno", "cpf": "11144477736", "cnpj": "", "cep": "1234-567"},
        {"nome": "Carla", "cpf": None, "cnpj": "04252011000110", "cep": "01310-100"},
    ])
