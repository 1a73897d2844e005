from .cnpj_record import CnpjRecord, MATRIZ_ORDEM

__all__ = [
    "CnpjRecord",
    "MATRIZ_ORDEM",
]
