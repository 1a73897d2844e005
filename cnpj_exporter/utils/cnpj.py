from __future__ import annotations
import re
from typing import NamedTuple, Optional

# ---------------- Constantes ----------------

CNPJ_LENGTH = 14
BASICO_LENGTH = 8
ORDEM_LENGTH = 4
DV_LENGTH = 2

# compilados uma vez; somente leitura
_MASK_CHARS = re.compile(r"[./-]")
_INVALID_CHARS = re.compile(r"[^A-Za-z0-9./-]")
_FULL_CNPJ = re.compile(r"[A-Z0-9]{12}[0-9]{2}")


class CnpjFormatError(ValueError):
    """CNPJ com tamanho incompatível após a remoção da máscara."""

    def __init__(self, message: str, length: Optional[int] = None):
        super().__init__(message)
        self.length = length


class CnpjParts(NamedTuple):
    basico: str
    ordem: str
    dv: str


def _is_blank(s: Optional[str]) -> bool:
    return s is None or not str(s).strip()

# ---------------- Normalização ----------------

def remove_mask(cnpj: Optional[str]) -> str:
    """
    Remove a máscara (pontos, barras e hífens) e converte para maiúsculas.
    Espaços entre outros caracteres são preservados.
    Entrada vazia/None/só espaços -> "".
    """
    if _is_blank(cnpj):
        return ""
    raw = _MASK_CHARS.sub("", str(cnpj))
    # máscara + espaços vira "", para remove_mask(remove_mask(x)) == remove_mask(x)
    if not raw.strip():
        return ""
    # str.upper não depende de locale
    return raw.upper()

# ---------------- Validação ----------------

# motivos de rejeição, na ordem em que as regras são avaliadas
MOTIVO_VAZIO = "vazio"
MOTIVO_CARACTERE = "caractere_invalido"
MOTIVO_TAMANHO = "tamanho_invalido"
MOTIVO_PADRAO = "padrao_invalido"
MOTIVO_REPETIDO = "sequencia_repetida"

def is_repeated_sequence(cnpj: Optional[str]) -> bool:
    """True para sequências do mesmo caractere (ex.: 11111111111111, AAAAAAAAAAAAAA)."""
    if not cnpj or len(cnpj) < 2:
        return False
    return cnpj == cnpj[0] * len(cnpj)

def invalid_reason(cnpj: Optional[str]) -> Optional[str]:
    """
    Motivo da primeira regra de formato que falha, ou None se o CNPJ é válido.
    Regras: vazio, caracteres fora de [A-Za-z0-9./-], tamanho 14 sem máscara,
    12 caracteres [A-Z0-9] + 2 dígitos, sequência repetida.
    """
    if _is_blank(cnpj):
        return MOTIVO_VAZIO

    if _INVALID_CHARS.search(str(cnpj)):
        return MOTIVO_CARACTERE

    raw = remove_mask(cnpj)

    if len(raw) != CNPJ_LENGTH:
        return MOTIVO_TAMANHO

    if not _FULL_CNPJ.fullmatch(raw):
        return MOTIVO_PADRAO

    if is_repeated_sequence(raw):
        return MOTIVO_REPETIDO

    return None

def is_valid_format(cnpj: Optional[str]) -> bool:
    """
    Valida o formato do CNPJ (alfanumérico: 12 caracteres [A-Z0-9] + 2 dígitos).
    Aceita com/sem máscara. Não calcula dígitos verificadores.
    """
    return invalid_reason(cnpj) is None

# ---------------- Decomposição ----------------

def parse_cnpj(cnpj: Optional[str]) -> CnpjParts:
    """
    Extrai as partes do CNPJ: básico (8), ordem (4) e DV (2).
    Remove a máscara antes de extrair; só o tamanho é conferido
    (use is_valid_format antes para a validação completa).
    """
    raw = remove_mask(cnpj)

    if len(raw) != CNPJ_LENGTH:
        raise CnpjFormatError(
            f"CNPJ deve ter {CNPJ_LENGTH} caracteres após remover máscara. Recebido: {len(raw)}",
            length=len(raw),
        )

    basico = raw[:BASICO_LENGTH]
    ordem = raw[BASICO_LENGTH:BASICO_LENGTH + ORDEM_LENGTH]
    dv = raw[BASICO_LENGTH + ORDEM_LENGTH:]
    return CnpjParts(basico, ordem, dv)
