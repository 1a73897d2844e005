from __future__ import annotations
from typing import Any

from pydantic import BaseModel, Field, ConfigDict, field_validator, model_validator

from cnpj_exporter.utils.cnpj import (
    BASICO_LENGTH,
    CNPJ_LENGTH,
    DV_LENGTH,
    ORDEM_LENGTH,
    CnpjFormatError,
    invalid_reason,
    is_valid_format,
    parse_cnpj,
    remove_mask,
)

MATRIZ_ORDEM = "0001"


class CnpjRecord(BaseModel):
    """
    CNPJ já normalizado e decomposto em básico/ordem/DV.
    Use `from_raw` para construir a partir de texto digitado (com ou sem máscara).
    """
    model_config = ConfigDict(frozen=True, extra="ignore")

    cnpj: str = Field(..., min_length=CNPJ_LENGTH, max_length=CNPJ_LENGTH, description="CNPJ sem máscara, maiúsculo")
    basico: str = Field(..., min_length=BASICO_LENGTH, max_length=BASICO_LENGTH)
    ordem: str = Field(..., min_length=ORDEM_LENGTH, max_length=ORDEM_LENGTH)
    dv: str = Field(..., min_length=DV_LENGTH, max_length=DV_LENGTH, description="Dígitos verificadores (não conferidos)")

    @field_validator("cnpj", "basico", "ordem", "dv", mode="before")
    @classmethod
    def _unmask(cls, v: Any):
        if v is None:
            return v
        return remove_mask(str(v))

    @model_validator(mode="after")
    def _parts_match(self) -> "CnpjRecord":
        if self.basico + self.ordem + self.dv != self.cnpj:
            raise ValueError("basico + ordem + dv deve reproduzir o CNPJ normalizado")
        return self

    @classmethod
    def from_raw(cls, raw: str | None) -> "CnpjRecord":
        """Valida o formato e decompõe. Levanta CnpjFormatError se o formato for inválido."""
        if not is_valid_format(raw):
            motivo = invalid_reason(raw)
            normalized = remove_mask(raw)
            raise CnpjFormatError(f"CNPJ com formato inválido ({motivo}): {raw!r}", length=len(normalized))
        basico, ordem, dv = parse_cnpj(raw)
        return cls(cnpj=basico + ordem + dv, basico=basico, ordem=ordem, dv=dv)

    @property
    def is_matriz(self) -> bool:
        """Ordem 0001 = matriz; demais = filiais."""
        return self.ordem == MATRIZ_ORDEM

    def as_row(self) -> dict[str, Any]:
        """Dicionário com os mesmos nomes de coluna de services.cnpj_table."""
        return {
            "cnpj_normalizado": self.cnpj,
            "cnpj_basico": self.basico,
            "cnpj_ordem": self.ordem,
            "cnpj_dv": self.dv,
        }
