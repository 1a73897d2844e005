"""Normalização, validação de formato e decomposição de CNPJ (inclusive alfanumérico)."""
from .utils.cnpj import CnpjFormatError, CnpjParts, remove_mask, is_valid_format, parse_cnpj

__all__ = ["CnpjFormatError", "CnpjParts", "remove_mask", "is_valid_format", "parse_cnpj"]
