"""Extraction of the smaller ``dadosBasicos`` lists: assuntos, prioridades, vinculados."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from models.processo_judicial import ProcessoVinculadoSchema

from normalization.resolvers import as_list, parse_flag, resolve, resolve_text, to_text


@dataclass(frozen=True)
class AssuntoRaw:
    """Subject code before its label is looked up."""

    codigo_nacional: str
    principal: bool


def extract_assuntos(raw: Any) -> list[AssuntoRaw]:
    assuntos = []
    for node in as_list(raw):
        if isinstance(node, dict):
            codigo = resolve_text(node, "codigoNacional", "codigo")
            if codigo is None:
                local = node.get("assuntoLocal")
                codigo = resolve_text(local, "codigoAssunto", "codigoPaiNacional")
            principal = parse_flag(resolve(node, "principal"))
        else:
            codigo, principal = to_text(node), False
        assuntos.append(AssuntoRaw(codigo_nacional=codigo or "", principal=principal))
    return assuntos


def extract_prioridades(raw: Any) -> list[str]:
    """Priority labels, de-duplicated in first-seen order."""
    seen: dict[str, None] = {}
    for node in as_list(raw):
        label = resolve_text(node, "descricao", "valor", "nome") if isinstance(node, dict) else to_text(node)
        if label:
            seen.setdefault(label, None)
    return list(seen)


def extract_processos_vinculados(raw: Any) -> list[ProcessoVinculadoSchema]:
    return [
        ProcessoVinculadoSchema(
            numero_processo=resolve_text(node, "numeroProcesso", "numero") or "",
            vinculo=resolve_text(node, "vinculo", "modalidadeVinculacao") or "N/A",
        )
        for node in as_list(raw)
        if isinstance(node, dict)
    ]
