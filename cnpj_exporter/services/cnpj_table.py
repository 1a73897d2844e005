from __future__ import annotations
from typing import Any, Optional, Tuple
import pandas as pd

from cnpj_exporter.utils.cnpj import (
    MOTIVO_CARACTERE,
    MOTIVO_PADRAO,
    MOTIVO_REPETIDO,
    MOTIVO_TAMANHO,
    MOTIVO_VAZIO,
    invalid_reason,
    parse_cnpj,
    remove_mask,
)

# colunas acrescentadas por split_cnpj_column
OUT_COLS = ["cnpj_normalizado", "cnpj_valido", "cnpj_basico", "cnpj_ordem", "cnpj_dv", "motivo"]


def _cell(v: Any) -> Optional[str]:
    # NaN/None de planilhas viram None; números inteiros perdem o ".0"
    if v is None:
        return None
    if isinstance(v, float):
        if pd.isna(v):
            return None
        if v.is_integer():
            return str(int(v))
    return str(v)

def _split_value(v: Any) -> dict:
    s = _cell(v)
    motivo = invalid_reason(s)
    row = {
        "cnpj_normalizado": remove_mask(s),
        "cnpj_valido": motivo is None,
        "cnpj_basico": "",
        "cnpj_ordem": "",
        "cnpj_dv": "",
        "motivo": motivo or "",
    }
    if motivo is None:
        basico, ordem, dv = parse_cnpj(s)
        row.update(cnpj_basico=basico, cnpj_ordem=ordem, cnpj_dv=dv)
    return row

def split_cnpj_column(df: pd.DataFrame, column: str = "cnpj") -> pd.DataFrame:
    """
    Normaliza, valida e decompõe a coluna de CNPJ.
    Retorna uma cópia de `df` com as colunas de OUT_COLS; linhas inválidas ficam
    com partes vazias e o `motivo` preenchido. O DataFrame original não é alterado.
    """
    if column not in df.columns:
        raise KeyError(f"Coluna '{column}' não encontrada. Colunas: {list(df.columns)}")
    view = df.copy()
    parts = pd.DataFrame([_split_value(v) for v in view[column]], columns=OUT_COLS, index=view.index)
    for c in OUT_COLS:
        view[c] = parts[c]
    view["cnpj_valido"] = view["cnpj_valido"].astype(bool)
    return view

def partition_valid(df: pd.DataFrame) -> Tuple[pd.DataFrame, pd.DataFrame]:
    """Separa um DataFrame já decomposto em (válidos, inválidos)."""
    if df is None or df.empty:
        empty = pd.DataFrame(columns=list(df.columns) if df is not None else OUT_COLS)
        return empty, empty.copy()
    mask = df["cnpj_valido"].astype(bool)
    return df[mask].copy(), df[~mask].copy()

def deduplicate(df: pd.DataFrame) -> pd.DataFrame:
    """Remove CNPJs normalizados repetidos entre as linhas válidas (mantém a primeira)."""
    if df is None or df.empty:
        return df
    mask = df["cnpj_valido"].astype(bool)
    # só conta duplicata entre válidos
    dup = df[mask]["cnpj_normalizado"].duplicated(keep="first").reindex(df.index, fill_value=False)
    return df[~dup].copy()
