"""MNI schemas — normalized Pydantic schemas for judicial case records."""

from models.base import BaseSchema
from models.documento import DocumentoSchema, ResumoDocumentosSchema
from models.movimento import MovimentoSchema
from models.parte import AdvogadoSchema, EnderecoSchema, ParteSchema, PoloSchema, TipoPessoa, TipoPolo
from models.processo_judicial import (
    AssuntoSchema,
    ClasseProcessualSchema,
    ProcessoJudicialSchema,
    ProcessoVinculadoSchema,
)

__all__ = [
    "BaseSchema",
    "AdvogadoSchema",
    "AssuntoSchema",
    "ClasseProcessualSchema",
    "DocumentoSchema",
    "EnderecoSchema",
    "MovimentoSchema",
    "ParteSchema",
    "PoloSchema",
    "ProcessoJudicialSchema",
    "ProcessoVinculadoSchema",
    "ResumoDocumentosSchema",
    "TipoPessoa",
    "TipoPolo",
]
