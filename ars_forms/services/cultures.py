from __future__ import annotations
from functools import lru_cache
from pathlib import Path
from typing import Dict, List, Union

import yaml

from ..models.culture import Culture, normalize_culture_name
from ..utils.config import setting
from ..utils.log import get_logger

log = get_logger(__name__)

_BUILTIN: Dict[str, Culture] = {
    c.name: c
    for c in [
        Culture(name="invariant", currency_negative_pattern="({symbol}{number})"),
        Culture(
            name="pt-BR",
            decimal_separator=",",
            group_separator=".",
            currency_symbol="R$",
            currency_positive_pattern="{symbol} {number}",
            currency_negative_pattern="-{symbol} {number}",
        ),
        Culture(name="en-US", currency_symbol="$"),
        Culture(name="en-GB", currency_symbol="£"),
        Culture(
            name="es-ES",
            decimal_separator=",",
            group_separator=".",
            currency_symbol="€",
            currency_positive_pattern="{number} {symbol}",
            currency_negative_pattern="-{number} {symbol}",
        ),
        Culture(
            name="de-DE",
            decimal_separator=",",
            group_separator=".",
            currency_symbol="€",
            currency_positive_pattern="{number} {symbol}",
            currency_negative_pattern="-{number} {symbol}",
        ),
        Culture(
            name="fr-FR",
            decimal_separator=",",
            group_separator=" ",
            currency_symbol="€",
            currency_positive_pattern="{number} {symbol}",
            currency_negative_pattern="-{number} {symbol}",
        ),
    ]
}

def load_cultures_yaml(path: Union[str, Path]) -> Dict[str, Culture]:
    """
    Lê culturas extras de um YAML no formato:

        cultures:
          - name: pt-PT
            decimal_separator: ","
            group_separator: " "
            currency_symbol: "€"
            currency_positive_pattern: "{number} {symbol}"

    Arquivo ausente gera aviso e nenhum registro; conteúdo inválido lança erro.
    """
    p = Path(path)
    if not p.exists():
        log.warning(f"Arquivo de culturas não encontrado: {p}")
        return {}
    data = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    entries = data.get("cultures", []) if isinstance(data, dict) else data
    if not isinstance(entries, list):
        raise ValueError(f"{p.name}: 'cultures' deve ser uma lista")
    loaded = {c.name: c for c in (Culture.model_validate(e) for e in entries)}
    log.info(f"{len(loaded)} cultura(s) carregada(s) de {p.name}")
    return loaded

@lru_cache(maxsize=8)
def _registry(yaml_path: str) -> Dict[str, Culture]:
    merged = dict(_BUILTIN)
    if yaml_path:
        merged.update(load_cultures_yaml(yaml_path))
    return merged

def clear_culture_cache() -> None:
    _registry.cache_clear()

def available_cultures() -> List[str]:
    return sorted(_registry(setting("ARS_CULTURES_YAML")))

def get_culture(culture: Union[Culture, str, None] = None) -> Culture:
    """
    Resolve a cultura explicitamente (nunca via estado global de thread).
    None usa ARS_DEFAULT_CULTURE; nome desconhecido lança KeyError.
    """
    if isinstance(culture, Culture):
        return culture
    name = normalize_culture_name(setting("ARS_DEFAULT_CULTURE") if culture is None else culture)
    reg = _registry(setting("ARS_CULTURES_YAML"))
    if name not in reg:
        raise KeyError(f"Cultura '{name}' desconhecida. Culturas válidas: {', '.join(sorted(reg))}")
    return reg[name]

def comma_decimal_culture() -> Culture:
    return get_culture(setting("ARS_COMMA_DECIMAL_CULTURE"))
