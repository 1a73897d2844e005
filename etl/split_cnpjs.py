# etl/split_cnpjs.py
"""
Normaliza, valida e decompõe uma coluna de CNPJ (básico/ordem/DV).

Gera:
  - CSV com as linhas válidas (+ cnpj_normalizado, cnpj_basico, cnpj_ordem, cnpj_dv)
  - CSV de rejeitados com o motivo de cada linha

Uso:
    python -m etl.split_cnpjs --src data/raw/cnpjs.csv --out data/processed/cnpjs.csv
"""
from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional, Sequence, Tuple

from cnpj_exporter.services.cnpj_table import deduplicate, partition_valid, split_cnpj_column
from cnpj_exporter.utils.config import path, setting
from etl.common import get_logger, read_table, rename_using_aliases, write_csv

# nomes comuns da coluna de CNPJ em planilhas recebidas
CNPJ_ALIASES = ("nr_cnpj", "num_cnpj", "numero_cnpj", "no do cnpj", "cnpj_empresa", "documento")

log = get_logger("split_cnpjs")


def run(src: Path, out: Path, rejects: Path, column: str = "cnpj",
        sep: str = ",", dedupe: bool = False) -> Tuple[int, int]:
    if not src.exists():
        log.error(f"Faltando: {src}")
        raise SystemExit(f"Arquivo não encontrado: {src}")

    df = read_table(src, sep=sep)
    if df.empty:
        raise SystemExit(f"Tabela vazia: {src}")

    if column not in df.columns:
        df = rename_using_aliases(df, {column: CNPJ_ALIASES})
    if column not in df.columns:
        log.error(f"Coluna '{column}' ausente em {src.name}: {list(df.columns)}")
        raise SystemExit(f"Coluna de CNPJ '{column}' não encontrada em {src}")

    log.info(f"Lidas {len(df)} linhas de {src}")
    split = split_cnpj_column(df, column=column)
    if dedupe:
        before = len(split)
        split = deduplicate(split)
        log.info(f"Duplicados removidos: {before - len(split)}")

    valid, invalid = partition_valid(split)
    write_csv(valid.drop(columns=["cnpj_valido", "motivo"]), out, sep=sep)
    write_csv(invalid, rejects, sep=sep)

    if not invalid.empty:
        counts = invalid["motivo"].value_counts().to_dict()
        log.warning(f"{len(invalid)} CNPJs rejeitados: {counts}")
    log.info(f"✅ salvo {out} ({len(valid)} linhas); rejeitados em {rejects}")
    return len(valid), len(invalid)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Normaliza/valida/decompõe CNPJs de um CSV ou XLSX")
    p.add_argument("--src", default=None, help="CSV/XLSX de entrada (default: CNPJ_SOURCE)")
    p.add_argument("--col", default=None, help="coluna com o CNPJ (default: CNPJ_COLUMN)")
    p.add_argument("--out", default=None, help="CSV de saída dos válidos (default: CNPJ_OUTPUT)")
    p.add_argument("--rejects", default=None, help="CSV dos rejeitados (default: CNPJ_REJECTS)")
    p.add_argument("--sep", default=None, help="separador do CSV (default: CSV_SEP)")
    p.add_argument("--dedupe", action="store_true", help="remove CNPJs repetidos entre os válidos")
    return p.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> Tuple[int, int]:
    args = parse_args(argv)
    return run(
        Path(args.src or path("CNPJ_SOURCE")),
        Path(args.out or path("CNPJ_OUTPUT")),
        Path(args.rejects or path("CNPJ_REJECTS")),
        column=args.col or setting("CNPJ_COLUMN"),
        sep=args.sep or setting("CSV_SEP"),
        dedupe=args.dedupe,
    )


if __name__ == "__main__":
    main()
