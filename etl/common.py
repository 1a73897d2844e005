from __future__ import annotations
import logging, re, sys
from pathlib import Path
from typing import Dict, Iterable

import pandas as pd

# ----------------- logging -----------------
def get_logger(name: str = "etl", level: int = logging.INFO) -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        fmt = logging.Formatter("[%(levelname)s] %(message)s")
        handler.setFormatter(fmt)
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger

# ----------------- paths -----------------
def ensure_parent(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)

# ----------------- io helpers -----------------
def read_table(path: Path, sep: str = ",", sheet: int | str = 0) -> pd.DataFrame:
    """CSV ou XLSX, sempre como texto (CNPJ numérico perderia zeros à esquerda)."""
    if path.suffix.lower() in (".xlsx", ".xls"):
        df = pd.read_excel(path, sheet_name=sheet, engine="openpyxl", dtype=str)
    else:
        df = pd.read_csv(path, sep=sep, dtype=str, keep_default_na=False)
    df.columns = [str(c).strip() for c in df.columns]
    return df

def write_csv(df: pd.DataFrame, path: Path, sep: str = ",") -> None:
    ensure_parent(path)
    df.to_csv(path, index=False, sep=sep, encoding="utf-8")

# ----------------- text/columns -----------------
def norm_token(s: str) -> str:
    return re.sub(r"\s+"," ", re.sub(r"[^a-z0-9_ ]","", (s or "").lower())).strip()

def rename_using_aliases(df: pd.DataFrame, aliases: Dict[str, Iterable[str]]) -> pd.DataFrame:
    mapping: Dict[str, str] = {}
    current = {norm_token(c): c for c in df.columns}
    for canon, al in aliases.items():
        wanted = {norm_token(canon), *[norm_token(a) for a in al]}
        for k, orig in current.items():
            if k in wanted:
                mapping[orig] = canon
                break
    return df.rename(columns=mapping)
