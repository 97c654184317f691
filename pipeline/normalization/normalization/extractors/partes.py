"""Polo / parte extraction from either MNI dialect."""

from __future__ import annotations

import logging
from typing import Any, Optional

from formatters import parse_date
from models.parte import (
    AdvogadoSchema,
    EnderecoSchema,
    ParteSchema,
    PoloSchema,
    TipoPessoa,
    TipoPolo,
)

from normalization.resolvers import as_list, first_of, resolve_field, resolve_text, to_text

logger = logging.getLogger(__name__)

POLO_TIPOS: dict[str, str] = {
    "AT": TipoPolo.AUTOR,
    "AO": TipoPolo.AUTOR,
    "PA": TipoPolo.PASSIVO,
    "TC": TipoPolo.TERCEIRO,
}

_PESSOA_JURIDICA = {"juridica", "jurídica", "jur"}

_ENDERECO_FIELDS = ("logradouro", "numero", "complemento", "bairro", "cidade", "estado", "cep")


def extract_polos(raw: Any) -> list[PoloSchema]:
    return [extract_polo(node) for node in as_list(raw) if isinstance(node, dict)]


def extract_polo(node: dict) -> PoloSchema:
    codigo = to_text(resolve_field(node, "polo.codigo"))
    if codigo is None:
        tipo = TipoPolo.UNKNOWN.value
    else:
        tipo = str(POLO_TIPOS.get(codigo.upper(), codigo))

    partes = [extract_parte(p) for p in as_list(node.get("parte")) if isinstance(p, dict)]
    return PoloSchema(codigo=codigo, tipo=tipo, partes=partes)


def extract_parte(node: dict) -> ParteSchema:
    pessoa = node.get("pessoa")
    if not isinstance(pessoa, dict):
        # Some MNI 3.0 payloads flatten the person onto the parte itself.
        pessoa = node

    nome = to_text(resolve_field(pessoa, "pessoa.nome"))
    if nome is None:
        logger.debug("parte without nome: keys=%s", sorted(pessoa))

    return ParteSchema(
        nome=nome or "N/A",
        tipo_pessoa=_tipo_pessoa(resolve_field(pessoa, "pessoa.tipo")),
        numero_documento=to_text(resolve_field(pessoa, "pessoa.documento")),
        data_nascimento=parse_date(resolve_field(pessoa, "pessoa.nascimento")),
        endereco=_extract_endereco(first_of(pessoa.get("endereco"))),
        advogados=[
            _extract_advogado(adv) for adv in as_list(node.get("advogado")) if isinstance(adv, dict)
        ],
    )


def _tipo_pessoa(value: Any) -> TipoPessoa:
    text = to_text(value)
    if text is not None and text.lower() in _PESSOA_JURIDICA:
        return TipoPessoa.JURIDICA
    return TipoPessoa.FISICA


def _extract_endereco(node: Any) -> Optional[EnderecoSchema]:
    if not isinstance(node, dict):
        return None
    return EnderecoSchema(**{f: resolve_text(node, f) for f in _ENDERECO_FIELDS})


def _extract_advogado(node: dict) -> AdvogadoSchema:
    return AdvogadoSchema(
        nome=resolve_text(node, "nome", bags=("attributes", "dadosBasicos")) or "N/A",
        inscricao=resolve_text(node, "inscricao", "numeroOAB"),
        numero_documento=resolve_text(
            node, "numeroDocumentoPrincipal", bags=("attributes", "dadosBasicos")
        ),
    )
