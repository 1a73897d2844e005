from .config import paths, set_paths, reset_paths, path, settings, setting
from .cnpj import (
    CNPJ_LENGTH,
    CnpjFormatError,
    CnpjParts,
    remove_mask,
    invalid_reason,
    is_valid_format,
    is_repeated_sequence,
    parse_cnpj,
)

__all__ = [
    "paths", "set_paths", "reset_paths", "path", "settings", "setting",
    "CNPJ_LENGTH", "CnpjFormatError", "CnpjParts",
    "remove_mask", "invalid_reason", "is_valid_format", "is_repeated_sequence", "parse_cnpj",
]
