from __future__ import annotations
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, ConfigDict, field_validator, model_validator

from docvalidator.errors import InvalidKind


class DocumentKind(str, Enum):
    """Tipos de documento suportados."""
    CPF = "CPF"     # pessoa física, 11 dígitos
    CNPJ = "CNPJ"   # pessoa jurídica, 14 dígitos

    @property
    def length(self) -> int:
        return _LENGTHS[self]

    @property
    def base_length(self) -> int:
        """Dígitos antes dos 2 verificadores (9 no CPF, 12 no CNPJ)."""
        return _LENGTHS[self] - 2

    @classmethod
    def parse(cls, value: Any) -> "DocumentKind":
        """Aceita o enum ou texto sem diferenciar maiúsculas ('cpf', ' CNPJ ')."""
        if isinstance(value, cls):
            return value
        s = str(value).strip().upper() if value is not None else ""
        try:
            return cls(s)
        except ValueError:
            raise InvalidKind(f"Tipo de documento desconhecido: {value!r}. Use 'CPF' ou 'CNPJ'.") from None

    @classmethod
    def from_length(cls, n: int) -> "DocumentKind | None":
        for kind, size in _LENGTHS.items():
            if size == n:
                return kind
        return None


_LENGTHS = {DocumentKind.CPF: 11, DocumentKind.CNPJ: 14}


class DocumentCandidate(BaseModel):
    """
    Documento recebido numa chamada de validação.
    - raw: texto como veio
    - digits: sequência só de dígitos (None se o formato não bate)
    - kind: CPF, CNPJ ou None (formato inválido)
    Criado a cada chamada; imutável.
    """
    model_config = ConfigDict(frozen=True)

    raw: str = Field(default="", description="Entrada como recebida")
    digits: str | None = Field(default=None, description="Dígitos normalizados")
    kind: DocumentKind | None = Field(default=None)

    @field_validator("kind", mode="before")
    @classmethod
    def _upper(cls, v: Any):
        if v is None or isinstance(v, DocumentKind):
            return v
        s = str(v).strip().upper()
        return s or None

    @model_validator(mode="after")
    def _digits_match_kind(self):
        if self.digits is not None:
            if self.kind is None:
                raise ValueError("digits sem kind")
            if len(self.digits) != self.kind.length:
                raise ValueError(f"{self.kind.value} deve ter {self.kind.length} dígitos")
        return self

    # ---------------- Conveniências ----------------

    @property
    def is_well_formed(self) -> bool:
        return self.digits is not None

    @property
    def base(self) -> str | None:
        if self.digits is None or self.kind is None:
            return None
        return self.digits[: self.kind.base_length]

    @property
    def check(self) -> str | None:
        if self.digits is None or self.kind is None:
            return None
        return self.digits[self.kind.base_length:]


class ValidationResult(BaseModel):
    """Uma linha do relatório de validação em lote."""
    model_config = ConfigDict(use_enum_values=True)

    raw: str | None = None
    kind: DocumentKind | None = None
    digits: str | None = None
    valid: bool = False
    formatted: str | None = None

    def as_dict(self) -> dict[str, Any]:
        return self.model_dump()
