"""Documento (case document metadata) — Pydantic schemas."""

from __future__ import annotations

from typing import Iterable, Optional

from pydantic import Field

from formatters import format_byte_size, format_datetime
from models.base import BaseSchema

MIMETYPE_PDF = "application/pdf"
MIMETYPE_HTML = "text/html"


class DocumentoSchema(BaseSchema):
    id: str = ""
    descricao: str = ""
    mimetype: Optional[str] = None
    tamanho_bytes: int = Field(default=0, ge=0)
    nivel_sigilo: int = Field(default=0, ge=0)
    movimento_id: Optional[str] = None
    rotulo: Optional[str] = None
    data_hora: Optional[str] = None
    tipo_documento: Optional[str] = None

    @property
    def tem_sigilo(self) -> bool:
        return self.nivel_sigilo > 0

    @property
    def is_pdf(self) -> bool:
        return self.mimetype == MIMETYPE_PDF

    @property
    def is_html(self) -> bool:
        return self.mimetype == MIMETYPE_HTML

    @property
    def is_video(self) -> bool:
        return bool(self.mimetype) and self.mimetype.startswith("video/")

    @property
    def tamanho_formatado(self) -> str:
        return format_byte_size(self.tamanho_bytes)

    @property
    def data_hora_formatada(self) -> str:
        return format_datetime(self.data_hora)


class ResumoDocumentosSchema(BaseSchema):
    """Document counters shown on the case header."""

    total: int = 0
    pdf: int = 0
    html: int = 0
    video: int = 0
    com_sigilo: int = 0


def index_by_movimento(docs: Iterable[DocumentoSchema]) -> dict[str, list[DocumentoSchema]]:
    """Group documents by ``movimento_id``; unlinked documents are left out."""
    index: dict[str, list[DocumentoSchema]] = {}
    for doc in docs:
        if doc.movimento_id:
            index.setdefault(doc.movimento_id, []).append(doc)
    return index
