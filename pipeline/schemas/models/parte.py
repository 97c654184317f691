"""Polo / Parte (litigation role group and party) — Pydantic schemas."""

from __future__ import annotations

from datetime import date
from enum import StrEnum
from typing import Optional

from formatters import NOT_AVAILABLE, format_date, format_document, format_postal_code
from models.base import BaseSchema


class TipoPessoa(StrEnum):
    FISICA = "Física"
    JURIDICA = "Jurídica"


class TipoPolo(StrEnum):
    AUTOR = "Autor"
    PASSIVO = "Passivo"
    TERCEIRO = "Terceiro"
    UNKNOWN = "Unknown"


class EnderecoSchema(BaseSchema):
    logradouro: Optional[str] = None
    numero: Optional[str] = None
    complemento: Optional[str] = None
    bairro: Optional[str] = None
    cidade: Optional[str] = None
    estado: Optional[str] = None
    cep: Optional[str] = None

    @property
    def cep_formatado(self) -> str:
        return format_postal_code(self.cep)


class AdvogadoSchema(BaseSchema):
    nome: str
    inscricao: Optional[str] = None
    numero_documento: Optional[str] = None

    @property
    def documento_formatado(self) -> str:
        return format_document(self.numero_documento, is_legal_entity=False)


class ParteSchema(BaseSchema):
    """A party inside a polo.

    ``numero_documento`` keeps the raw digits as received; use
    ``documento_formatado`` for the CPF/CNPJ mask matching ``tipo_pessoa``.
    """

    nome: str
    tipo_pessoa: TipoPessoa = TipoPessoa.FISICA
    numero_documento: Optional[str] = None
    data_nascimento: Optional[date] = None
    endereco: Optional[EnderecoSchema] = None
    advogados: tuple[AdvogadoSchema, ...] = ()

    @property
    def is_pessoa_juridica(self) -> bool:
        return self.tipo_pessoa is TipoPessoa.JURIDICA

    @property
    def documento_formatado(self) -> str:
        return format_document(self.numero_documento, self.is_pessoa_juridica)

    @property
    def data_nascimento_formatada(self) -> str:
        if self.data_nascimento is None:
            return NOT_AVAILABLE
        return format_date(self.data_nascimento)


class PoloSchema(BaseSchema):
    """Role group; ``tipo`` is the label for ``codigo`` (or the code itself)."""

    codigo: Optional[str] = None
    tipo: str = TipoPolo.UNKNOWN
    partes: tuple[ParteSchema, ...] = ()
