from __future__ import annotations
import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Dict

_DEFAULTS: Dict[str, str] = {
    # Culturas
    "ARS_DEFAULT_CULTURE": "invariant",
    "ARS_COMMA_DECIMAL_CULTURE": "pt-BR",
    "ARS_CULTURES_YAML": "",
    # Log
    "ARS_LOG_LEVEL": "WARNING",
}

# armazenamento interno para overrides em tempo de execução
_runtime_overrides: Dict[str, str] = {}

PACKAGE_LOGGER = "ars_forms"

_PATH_KEYS = {"ARS_CULTURES_YAML"}

def _coerce(key: str, v: str) -> str:
    v = str(v).strip()
    if key in _PATH_KEYS and v:
        # expande ~ e vars apenas para chaves de arquivo
        return str(Path(os.path.expandvars(os.path.expanduser(v))))
    return v

@lru_cache(maxsize=1)
def settings() -> Dict[str, str]:
    """
    Retorna um dicionário de configurações:
    - ENV tem prioridade (chave igual ao nome exato, p.ex. ARS_DEFAULT_CULTURE)
    - overrides definidos via set_settings()
    - defaults do projeto
    """
    merged: Dict[str, str] = {}
    for k, default in _DEFAULTS.items():
        env_val = os.environ.get(k)
        if env_val:
            merged[k] = _coerce(k, env_val)
        elif k in _runtime_overrides:
            merged[k] = _coerce(k, _runtime_overrides[k])
        else:
            merged[k] = _coerce(k, default)
    return dict(merged)

def set_settings(overrides: Dict[str, str]) -> None:
    """
    Define overrides em tempo de execução (útil em testes).
    Invalida o cache de settings().
    """
    _runtime_overrides.update({k: str(v) for k, v in (overrides or {}).items()})
    settings.cache_clear()  # type: ignore[attr-defined]
    apply_log_level()

def reset_settings() -> None:
    """Descarta todos os overrides de execução."""
    _runtime_overrides.clear()
    settings.cache_clear()  # type: ignore[attr-defined]
    apply_log_level()

def setting(key: str) -> str:
    """Atalho: settings()[key] com KeyError amigável."""
    s = settings()
    if key not in s:
        raise KeyError(f"Configuração '{key}' inexistente. Chaves válidas: {', '.join(sorted(s.keys()))}")
    return s[key]

def apply_log_level() -> None:
    """Aplica ARS_LOG_LEVEL ao logger raiz do pacote; nível desconhecido vira WARNING."""
    root = logging.getLogger(PACKAGE_LOGGER)
    level = setting("ARS_LOG_LEVEL").upper() or "WARNING"
    try:
        root.setLevel(level)
    except (TypeError, ValueError):
        root.setLevel(logging.WARNING)
