from __future__ import annotations
from pathlib import Path
import pytest
import pandas as pd

from cnpj_exporter.utils import config

CONFIG_KEYS = ["CNPJ_SOURCE", "CNPJ_OUTPUT", "CNPJ_REJECTS", "DATA_CONTRACTS", "CNPJ_COLUMN", "CSV_SEP"]

# ---------- AMOSTRAS ----------

@pytest.fixture
def valid_cnpjs() -> list[str]:
    return [
        "12.345.678/0001-95",
        "12345678000195",
        "04.252.011/0001-10",
        "AB.CDE.FGH/0001-30",
        "ab.cde.fgh/0001-30",
        "12ABC34501DE35",
        "00000000000191",
    ]

@pytest.fixture
def cnpjs_df() -> pd.DataFrame:
    return pd.DataFrame([
        {"razao_social": "Empresa Um", "cnpj": "12.345.678/0001-95"},      # válido
        {"razao_social": "Empresa Dois", "cnpj": "ab.cde.fgh/0002-30"},    # válido (alfanumérico)
        {"razao_social": "Placeholder", "cnpj": "11.111.111/1111-11"},     # sequência repetida
        {"razao_social": "DV letra", "cnpj": "12.345.678/0001-9A"},        # padrão
        {"razao_social": "Curto", "cnpj": "123"},                          # tamanho
        {"razao_social": "Vazio", "cnpj": ""},                             # vazio
        {"razao_social": "Nulo", "cnpj": None},                            # vazio
        {"razao_social": "Espaços", "cnpj": "12 345 678/0001-95"},         # caractere
        {"razao_social": "Empresa Um (repetida)", "cnpj": "12345678000195"},  # válido, duplicado
    ])

@pytest.fixture
def cnpjs_csv(tmp_path: Path, cnpjs_df: pd.DataFrame) -> Path:
    out = tmp_path / "raw" / "cnpjs.csv"
    out.parent.mkdir(parents=True)
    cnpjs_df.to_csv(out, index=False)
    return out

# ---------- AJUSTES DE AMBIENTE ----------

@pytest.fixture(autouse=True)
def isolate_config(monkeypatch):
    """Testes não herdam env nem overrides de outros testes."""
    for k in CONFIG_KEYS:
        monkeypatch.delenv(k, raising=False)
    config.reset_paths()
    yield
    config.reset_paths()
