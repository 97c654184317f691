"""ProcessoJudicial (normalized MNI case record) — Pydantic schemas."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional

from pydantic import Field

from formatters import (
    NOT_AVAILABLE,
    format_currency,
    format_date,
    format_process_number,
)
from models.base import BaseSchema
from models.documento import DocumentoSchema, ResumoDocumentosSchema, index_by_movimento
from models.movimento import MovimentoSchema
from models.parte import PoloSchema


class ClasseProcessualSchema(BaseSchema):
    codigo: str = ""
    descricao: str = NOT_AVAILABLE


class AssuntoSchema(BaseSchema):
    """Subject-matter code; ``descricao`` falls back to the code itself."""

    codigo_nacional: str = ""
    principal: bool = False
    descricao: str = NOT_AVAILABLE


class ProcessoVinculadoSchema(BaseSchema):
    numero_processo: str = ""
    vinculo: str = NOT_AVAILABLE

    @property
    def numero_formatado(self) -> str:
        return format_process_number(self.numero_processo)


class ProcessoJudicialSchema(BaseSchema):
    """Version-agnostic case record built from an MNI 2.2 or 3.0 document.

    ``movimentos`` is ordered most recent first.  ``documentos`` keeps the
    input order; ``documentos_por_movimento`` indexes it by movement id.
    """

    numero: str = ""
    classe_processual: ClasseProcessualSchema = ClasseProcessualSchema()
    orgao_julgador: str = NOT_AVAILABLE
    valor_causa: Decimal = Decimal(0)
    nivel_sigilo: Optional[int] = Field(default=None, ge=0)
    data_ajuizamento: Optional[date] = None
    rito: Optional[str] = None
    competencia: Optional[str] = None
    codigo_localidade: Optional[str] = None
    prioridades: tuple[str, ...] = ()
    polos: tuple[PoloSchema, ...] = ()
    assuntos: tuple[AssuntoSchema, ...] = ()
    processos_vinculados: tuple[ProcessoVinculadoSchema, ...] = ()
    movimentos: tuple[MovimentoSchema, ...] = ()
    documentos: tuple[DocumentoSchema, ...] = ()

    # ------------------------------------------------------------------ #
    # Display helpers                                                      #
    # ------------------------------------------------------------------ #

    @property
    def numero_formatado(self) -> str:
        return format_process_number(self.numero)

    @property
    def valor_causa_formatado(self) -> str:
        return format_currency(self.valor_causa)

    @property
    def data_ajuizamento_formatada(self) -> str:
        if self.data_ajuizamento is None:
            return NOT_AVAILABLE
        return format_date(self.data_ajuizamento)

    @property
    def nivel_sigilo_formatado(self) -> str:
        return NOT_AVAILABLE if self.nivel_sigilo is None else str(self.nivel_sigilo)

    @property
    def assunto_principal(self) -> Optional[AssuntoSchema]:
        return next((a for a in self.assuntos if a.principal), None)

    # ------------------------------------------------------------------ #
    # Document / movement join                                             #
    # ------------------------------------------------------------------ #

    @property
    def documentos_por_movimento(self) -> dict[str, list[DocumentoSchema]]:
        """Documents grouped by ``movimento_id``; unlinked documents are left out."""
        return index_by_movimento(self.documentos)

    def timeline(self) -> list[tuple[MovimentoSchema, list[DocumentoSchema]]]:
        """Pair every movement, most recent first, with the documents it produced."""
        index = self.documentos_por_movimento
        return [(mov, index.get(mov.id, [])) for mov in self.movimentos]

    def resumo_documentos(self) -> ResumoDocumentosSchema:
        return ResumoDocumentosSchema(
            total=len(self.documentos),
            pdf=sum(1 for d in self.documentos if d.is_pdf),
            html=sum(1 for d in self.documentos if d.is_html),
            video=sum(1 for d in self.documentos if d.is_video),
            com_sigilo=sum(1 for d in self.documentos if d.tem_sigilo),
        )
