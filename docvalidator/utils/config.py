from __future__ import annotations
import logging
import os
from functools import lru_cache
from typing import Dict

_DEFAULTS: Dict[str, str] = {
    # Logging
    "DOCVALIDATOR_LOG_LEVEL": "INFO",
    # Validação em lote
    "DOCVALIDATOR_DOCUMENT_COLUMN": "documento",
    "DOCVALIDATOR_KIND": "auto",  # auto | CPF | CNPJ
}

# armazenamento interno para overrides em tempo de execução
_runtime_overrides: Dict[str, str] = {}

@lru_cache(maxsize=1)
def settings() -> Dict[str, str]:
    """
    Retorna um dicionário de configurações:
    - ENV tem prioridade (chave igual ao nome exato, p.ex. DOCVALIDATOR_LOG_LEVEL)
    - overrides definidos via set_settings()
    - defaults do projeto
    """
    merged: Dict[str, str] = {}
    for k, default in _DEFAULTS.items():
        env_val = os.environ.get(k)
        if env_val:
            merged[k] = env_val.strip()
        elif k in _runtime_overrides:
            merged[k] = _runtime_overrides[k]
        else:
            merged[k] = default
    return dict(merged)

def set_settings(overrides: Dict[str, str]) -> None:
    """
    Define overrides em tempo de execução (útil em testes).
    Invalida o cache de settings().
    """
    unknown = set(overrides or {}) - set(_DEFAULTS)
    if unknown:
        raise KeyError(f"Configuração desconhecida: {', '.join(sorted(unknown))}")
    _runtime_overrides.update({k: str(v).strip() for k, v in (overrides or {}).items()})
    settings.cache_clear()  # type: ignore[attr-defined]

def reset_settings() -> None:
    _runtime_overrides.clear()
    settings.cache_clear()  # type: ignore[attr-defined]

def setting(key: str) -> str:
    """Atalho: settings()[key] com KeyError amigável."""
    s = settings()
    if key not in s:
        raise KeyError(f"Configuração '{key}' não existe. Chaves válidas: {', '.join(sorted(s.keys()))}")
    return s[key]

def log_level() -> int:
    name = setting("DOCVALIDATOR_LOG_LEVEL").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO
