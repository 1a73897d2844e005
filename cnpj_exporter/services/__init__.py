from .cnpj_table import (
    OUT_COLS,
    MOTIVO_VAZIO,
    MOTIVO_CARACTERE,
    MOTIVO_TAMANHO,
    MOTIVO_PADRAO,
    MOTIVO_REPETIDO,
    invalid_reason,
    split_cnpj_column,
    partition_valid,
    deduplicate,
)

__all__ = [
    "OUT_COLS",
    "MOTIVO_VAZIO",
    "MOTIVO_CARACTERE",
    "MOTIVO_TAMANHO",
    "MOTIVO_PADRAO",
    "MOTIVO_REPETIDO",
    "invalid_reason",
    "split_cnpj_column",
    "partition_valid",
    "deduplicate",
]
