"""Movimento extraction — the case timeline, most recent first."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from formatters import to_compact_timestamp
from models.movimento import MovimentoSchema

from normalization.resolvers import as_list, resolve, resolve_field, resolve_text, to_text

logger = logging.getLogger(__name__)


def extract_movimentos(raw: Any) -> list[MovimentoSchema]:
    movimentos = []
    for position, node in enumerate(as_list(raw), start=1):
        if not isinstance(node, dict):
            logger.debug("movimento #%d is not an object, skipping", position)
            continue
        movimentos.append(extract_movimento(node, position))
    return sort_movimentos(movimentos)


def sort_movimentos(movimentos: list[MovimentoSchema]) -> list[MovimentoSchema]:
    """Descending by canonical ``data_hora``; ties keep input order."""
    return sorted(movimentos, key=lambda m: m.data_hora, reverse=True)


def extract_movimento(node: dict, position: int = 1) -> MovimentoSchema:
    mov_id = to_text(resolve_field(node, "movimento.id"))
    if mov_id is None:
        mov_id = f"mov-{position}"
        logger.debug("movimento #%d has no identifier, using %s", position, mov_id)

    local = _bag(node, "movimentoLocal")
    nacional = _bag(node, "movimentoNacional")

    return MovimentoSchema(
        id=mov_id,
        data_hora=to_compact_timestamp(resolve_text(node, "dataHora")),
        descricao=resolve_text(local, "descricao") or resolve_text(node, "descricao") or "",
        codigo_movimento=(
            resolve_text(local, "codigoMovimento")
            or resolve_text(nacional, "codigoNacional")
        ),
        complementos=_complementos(node.get("complemento")),
    )


def _bag(node: dict, name: str) -> Optional[Mapping[str, Any]]:
    value = node.get(name)
    if isinstance(value, list):
        value = value[0] if value else None
    return value if isinstance(value, Mapping) else None


def _complementos(raw: Any) -> list[str]:
    result = []
    for item in as_list(raw):
        if isinstance(item, Mapping):
            text = to_text(resolve(item, "descricao", "valor", "nome"))
        else:
            text = to_text(item)
        if text:
            result.append(text)
    return result
