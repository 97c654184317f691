"""Documento extraction and the movement -> documents index."""

from __future__ import annotations

import logging
from typing import Any

from formatters import parse_int, to_compact_timestamp
from models.documento import DocumentoSchema, index_by_movimento

from normalization.resolvers import as_list, outro_parametro, resolve_field, resolve_text, to_text

logger = logging.getLogger(__name__)


def extract_documentos(raw: Any) -> list[DocumentoSchema]:
    docs = []
    for index, node in enumerate(as_list(raw), start=1):
        if not isinstance(node, dict):
            logger.debug("documento #%d is not an object, skipping", index)
            continue
        docs.append(extract_documento(node, index))
    return docs


def extract_documento(node: dict, index: int = 1) -> DocumentoSchema:
    data_hora = resolve_text(node, "dataHora")
    return DocumentoSchema(
        id=to_text(resolve_field(node, "documento.id")) or "",
        descricao=resolve_text(node, "descricao", "nome") or f"Documento {index}",
        mimetype=to_text(resolve_field(node, "documento.mimetype")),
        tamanho_bytes=parse_int(_tamanho(node)),
        nivel_sigilo=parse_int(resolve_text(node, "nivelSigilo")),
        movimento_id=to_text(resolve_field(node, "documento.movimento")),
        rotulo=to_text(outro_parametro(node, "rotulo")),
        data_hora=to_compact_timestamp(data_hora) if data_hora else None,
        tipo_documento=resolve_text(node, "tipoDocumento"),
    )


def _tamanho(node: dict) -> Any:
    # MNI 2.2 reports the size as an outroParametro; it wins over MNI 3.0's field.
    tamanho = outro_parametro(node, "tamanho")
    if tamanho is not None:
        return tamanho
    return resolve_field(node, "documento.tamanho")


def extract_documentos_indexados(
    raw: Any,
) -> tuple[list[DocumentoSchema], dict[str, list[DocumentoSchema]]]:
    """Flat document list plus its movement-id index."""
    docs = extract_documentos(raw)
    return docs, index_by_movimento(docs)
