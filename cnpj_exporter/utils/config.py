from __future__ import annotations
import os
from functools import lru_cache
from pathlib import Path
from typing import Dict

_DEFAULTS: Dict[str, str] = {
    # Entrada / saída do ETL
    "CNPJ_SOURCE": "data/raw/cnpjs.csv",
    "CNPJ_OUTPUT": "data/processed/cnpjs.csv",
    "CNPJ_REJECTS": "data/processed/cnpjs_rejeitados.csv",
    # Contratos de dados
    "DATA_CONTRACTS": "data/docs/data_contracts.yaml",
}

_SETTINGS_DEFAULTS: Dict[str, str] = {
    "CNPJ_COLUMN": "cnpj",
    "CSV_SEP": ",",
}

# armazenamento interno para overrides em tempo de execução
_runtime_overrides: Dict[str, str] = {}

def _coerce(p: str) -> str:
    # normaliza separador e expande ~ e vars
    return str(Path(os.path.expandvars(os.path.expanduser(p))))

def _merge(defaults: Dict[str, str], coerce) -> Dict[str, str]:
    merged: Dict[str, str] = {}
    for k, default in defaults.items():
        env_val = os.environ.get(k)
        if env_val:
            merged[k] = coerce(env_val)
        elif k in _runtime_overrides:
            merged[k] = coerce(_runtime_overrides[k])
        else:
            merged[k] = coerce(default)
    return merged

@lru_cache(maxsize=1)
def paths() -> Dict[str, str]:
    """
    Retorna um dicionário de paths:
    - ENV tem prioridade (chave igual ao nome exato, p.ex. CNPJ_SOURCE)
    - overrides definidos via set_paths()
    - defaults do projeto
    """
    return dict(_merge(_DEFAULTS, _coerce))

@lru_cache(maxsize=1)
def settings() -> Dict[str, str]:
    """Opções que não são paths (coluna do CNPJ, separador do CSV). Mesma prioridade de paths()."""
    return dict(_merge(_SETTINGS_DEFAULTS, str))

def set_paths(overrides: Dict[str, str]) -> None:
    """
    Define overrides em tempo de execução (útil em testes).
    Invalida o cache de paths() e settings().
    """
    _runtime_overrides.update({k: str(v) for k, v in (overrides or {}).items()})
    paths.cache_clear()  # type: ignore[attr-defined]
    settings.cache_clear()  # type: ignore[attr-defined]

def reset_paths() -> None:
    """Descarta overrides de set_paths()."""
    _runtime_overrides.clear()
    paths.cache_clear()  # type: ignore[attr-defined]
    settings.cache_clear()  # type: ignore[attr-defined]

def path(key: str) -> str:
    """Atalho: paths()[key] com KeyError amigável."""
    p = paths()
    if key not in p:
        raise KeyError(f"Path '{key}' não configurado. Chaves válidas: {', '.join(sorted(p.keys()))}")
    return p[key]

def setting(key: str) -> str:
    s = settings()
    if key not in s:
        raise KeyError(f"Opção '{key}' não configurada. Chaves válidas: {', '.join(sorted(s.keys()))}")
    return s[key]
