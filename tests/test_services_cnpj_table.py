from __future__ import annotations
import pandas as pd
import pytest

from cnpj_exporter.services.cnpj_table import (
    OUT_COLS,
    deduplicate,
    invalid_reason,
    partition_valid,
    split_cnpj_column,
)
from cnpj_exporter.utils.cnpj import is_valid_format

def test_split_cnpj_column_adds_parts_and_reasons(cnpjs_df):
    out = split_cnpj_column(cnpjs_df)
    assert set(OUT_COLS).issubset(out.columns)
    assert list(out["motivo"]) == [
        "", "", "sequencia_repetida", "padrao_invalido", "tamanho_invalido",
        "vazio", "vazio", "caractere_invalido", "",
    ]
    first = out.iloc[0]
    assert first["cnpj_normalizado"] == "12345678000195"
    assert (first["cnpj_basico"], first["cnpj_ordem"], first["cnpj_dv"]) == ("12345678", "0001", "95")
    alnum = out.iloc[1]
    assert (alnum["cnpj_basico"], alnum["cnpj_ordem"], alnum["cnpj_dv"]) == ("ABCDEFGH", "0002", "30")
    bad = out.iloc[2]
    assert not bool(bad["cnpj_valido"])
    assert bad["cnpj_basico"] == "" and bad["cnpj_dv"] == ""

def test_split_cnpj_column_does_not_mutate_input(cnpjs_df):
    before = cnpjs_df.copy()
    split_cnpj_column(cnpjs_df)
    pd.testing.assert_frame_equal(cnpjs_df, before)

def test_split_cnpj_column_missing_column(cnpjs_df):
    with pytest.raises(KeyError):
        split_cnpj_column(cnpjs_df, column="documento")

def test_split_cnpj_column_numeric_and_nan_cells():
    df = pd.DataFrame({"cnpj": [12345678000195.0, float("nan")]})
    out = split_cnpj_column(df)
    assert out.iloc[0]["cnpj_normalizado"] == "12345678000195"
    assert bool(out.iloc[0]["cnpj_valido"]) is True
    assert out.iloc[1]["motivo"] == "vazio"

def test_invalid_reason_agrees_with_is_valid_format(cnpjs_df, valid_cnpjs):
    values = list(cnpjs_df["cnpj"]) + valid_cnpjs + ["AAAAAAAAAAAAAA", "00000000000000", "1ı345678000195"]
    for v in values:
        assert (invalid_reason(v) is None) == is_valid_format(v), v

def test_partition_valid(cnpjs_df):
    valid, invalid = partition_valid(split_cnpj_column(cnpjs_df))
    assert len(valid) == 3 and len(invalid) == 6
    assert valid["cnpj_valido"].all()
    assert set(invalid["motivo"]) == {"sequencia_repetida", "padrao_invalido", "tamanho_invalido", "vazio", "caractere_invalido"}

def test_deduplicate_keeps_first_valid_only(cnpjs_df):
    split = split_cnpj_column(cnpjs_df)
    out = deduplicate(split)
    assert len(out) == len(split) - 1
    assert list(out["razao_social"]).count("Empresa Um") == 1
    assert "Empresa Um (repetida)" not in set(out["razao_social"])
    # inválidos repetidos (dois "vazio") continuam
    assert (out["motivo"] == "vazio").sum() == 2

def test_services_reexport_utils_rules():
    from cnpj_exporter import services
    from cnpj_exporter.utils import cnpj
    assert services.invalid_reason is cnpj.invalid_reason
    assert services.MOTIVO_REPETIDO == cnpj.MOTIVO_REPETIDO == "sequencia_repetida"
