from __future__ import annotations
import sys
from pathlib import Path
from typing import Optional
import pandas as pd

from cnpj_exporter.utils.cnpj import is_valid_format
from cnpj_exporter.utils.config import path
from etl.common import get_logger

try:
    import yaml  # type: ignore
except Exception as e:
    raise SystemExit("Instale pyyaml para usar o validador: pip install pyyaml") from e

def check_columns(df: pd.DataFrame, required: list[str]) -> list[str]:
    missing = [c for c in required if c not in df.columns]
    return missing

def check_cnpjs(df: pd.DataFrame, column: str) -> list[str]:
    """CNPJs normalizados que não passam na validação de formato."""
    if column not in df.columns:
        return []
    return [v for v in df[column].tolist() if not is_valid_format(v)]

def resolve_entry(entry: dict, base: Optional[Path] = None) -> Path:
    """`path_key` via config (env > set_paths > default); senão `path` relativo a `base` (default: cwd)."""
    key = entry.get("path_key")
    p = Path(path(key)) if key else Path(entry["path"])
    if p.is_absolute():
        return p
    return (base or Path.cwd()) / p

def validate(contract_path: Path, base: Optional[Path] = None) -> int:
    """Confere cada entrada do contrato; retorna o número de erros."""
    log = get_logger("validate")
    contract = yaml.safe_load(contract_path.read_text(encoding="utf-8")) or {}

    errors = 0
    for name, entry in contract.items():
        f_path = resolve_entry(entry, base)
        if not f_path.exists():
            log.error(f"[{name}] Faltando: {f_path}")
            errors += 1
            continue
        df = pd.read_csv(f_path, dtype=str, keep_default_na=False)
        miss = check_columns(df, entry.get("required_columns", []))
        if miss:
            log.error(f"[{name}] Colunas faltando em {f_path.name}: {miss}")
            errors += 1
        col = entry.get("cnpj_column")
        if col:
            bad = check_cnpjs(df, col)
            if bad:
                log.error(f"[{name}] {len(bad)} CNPJs com formato inválido em {f_path.name}: {bad[:5]}")
                errors += 1
    return errors

def main(contract_path: Path, base: Optional[Path] = None) -> None:
    log = get_logger("validate")
    if validate(contract_path, base):
        sys.exit(1)
    else:
        log.info("✅ Todos os arquivos/colunas essenciais estão OK.")

if __name__ == "__main__":
    main(Path(path("DATA_CONTRACTS")))
