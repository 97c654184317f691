"""Process normalizer — one raw MNI 2.2 / 3.0 document in, one record out."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Optional

from formatters import NOT_AVAILABLE, parse_date, parse_decimal, parse_int
from models.processo_judicial import (
    AssuntoSchema,
    ClasseProcessualSchema,
    ProcessoJudicialSchema,
)
from models.raw.mni_raw import MniProcessoRaw

from normalization.exceptions import InvalidRecordError
from normalization.extractors import (
    extract_assuntos,
    extract_documentos,
    extract_movimentos,
    extract_polos,
    extract_prioridades,
    extract_processos_vinculados,
)
from normalization.lookup import CodeLookup
from normalization.resolvers import (
    first_of,
    is_present,
    outro_parametro,
    resolve,
    resolve_layers,
    resolve_text,
    to_text,
)

logger = logging.getLogger(__name__)


# -------------------------------------------------------------------- #
# Batch result data-classes                                             #
# -------------------------------------------------------------------- #


@dataclass
class RecordError:
    """A single raw document that failed normalization."""

    record: Any
    error: str


@dataclass
class NormalizationResult:
    records: list[ProcessoJudicialSchema] = field(default_factory=list)
    errors: list[RecordError] = field(default_factory=list)

    def add_record(self, record: ProcessoJudicialSchema) -> None:
        self.records.append(record)

    def add_error(self, record: Any, error: str) -> None:
        self.errors.append(RecordError(record=record, error=error))

    @property
    def total(self) -> int:
        return len(self.records) + len(self.errors)


# -------------------------------------------------------------------- #
# Normalizer                                                            #
# -------------------------------------------------------------------- #


class ProcessNormalizer:
    """Build a ``ProcessoJudicialSchema`` from either MNI dialect.

    Args:
        classes: Lookup for classe processual labels. Optional.
        assuntos: Lookup for assunto labels. Optional.
        lookup_timeout: Deadline in seconds for each single lookup; on
            expiry the raw code is used as the label.
    """

    def __init__(
        self,
        *,
        classes: CodeLookup | None = None,
        assuntos: CodeLookup | None = None,
        lookup_timeout: float | None = None,
    ) -> None:
        self._classes = classes
        self._assuntos = assuntos
        self._lookup_timeout = lookup_timeout

    async def normalize(self, raw: Any) -> ProcessoJudicialSchema:
        """Normalize one raw processo document.

        Never fails on malformed-but-well-typed input: missing pieces become
        empty lists or "N/A" defaults.

        Raises:
            InvalidRecordError: If *raw* is not a mapping.
        """
        if not isinstance(raw, Mapping):
            raise InvalidRecordError(
                f"processo root must be an object, got {type(raw).__name__}"
            )

        envelope = MniProcessoRaw.model_validate(dict(raw))
        camadas = envelope.dados_basicos_camadas

        def lista(key: str) -> Any:
            return resolve_layers(camadas, key, bags=())

        assuntos_raw = extract_assuntos(lista("assunto"))
        classe_codigo = to_text(resolve_layers(camadas, "classeProcessual")) or ""

        classe_label, assunto_labels = await self._resolve_labels(
            classe_codigo, [a.codigo_nacional for a in assuntos_raw]
        )

        movimento = envelope.movimento if is_present(envelope.movimento) else lista("movimento")
        documento = envelope.documento if is_present(envelope.documento) else lista("documento")

        record = ProcessoJudicialSchema(
            numero=self._numero(camadas, raw),
            classe_processual=ClasseProcessualSchema(
                codigo=classe_codigo,
                descricao=classe_label or NOT_AVAILABLE,
            ),
            orgao_julgador=self._orgao_julgador(lista("orgaoJulgador")),
            valor_causa=parse_decimal(resolve_layers(camadas, "valorCausa")),
            nivel_sigilo=self._nivel_sigilo(resolve_layers(camadas, "nivelSigilo")),
            data_ajuizamento=parse_date(resolve_layers(camadas, "dataAjuizamento")),
            rito=self._outro_parametro(camadas, "ritoProcessual"),
            competencia=to_text(resolve_layers(camadas, "competencia")),
            codigo_localidade=to_text(resolve_layers(camadas, "codigoLocalidade")),
            prioridades=extract_prioridades(lista("prioridade")),
            polos=extract_polos(lista("polo")),
            assuntos=[
                AssuntoSchema(
                    codigo_nacional=a.codigo_nacional,
                    principal=a.principal,
                    descricao=assunto_labels.get(a.codigo_nacional) or a.codigo_nacional or NOT_AVAILABLE,
                )
                for a in assuntos_raw
            ],
            processos_vinculados=extract_processos_vinculados(lista("processoVinculado")),
            movimentos=extract_movimentos(movimento),
            documentos=extract_documentos(documento),
        )

        logger.debug(
            "processo %s (%s): %d polos, %d assuntos, %d movimentos, %d documentos",
            record.numero or "?",
            envelope.dialeto,
            len(record.polos),
            len(record.assuntos),
            len(record.movimentos),
            len(record.documentos),
        )
        return record

    async def normalize_batch(self, raw_records: Iterable[Any]) -> NormalizationResult:
        """Normalize many documents; failures are collected, not raised."""
        result = NormalizationResult()

        for raw in raw_records:
            try:
                result.add_record(await self.normalize(raw))
            except Exception as exc:
                logger.warning("error normalizing processo record: %s", exc)
                result.add_error(raw, str(exc))

        logger.info(
            "normalized %d records, %d errors", len(result.records), len(result.errors)
        )
        return result

    # ------------------------------------------------------------------ #
    # Label lookups                                                        #
    # ------------------------------------------------------------------ #

    async def _resolve_labels(
        self, classe_codigo: str, assunto_codigos: list[str]
    ) -> tuple[Optional[str], dict[str, str]]:
        distintos = list(dict.fromkeys(c for c in assunto_codigos if c))
        labels = await asyncio.gather(
            self._label(self._classes, classe_codigo),
            *(self._label(self._assuntos, codigo) for codigo in distintos),
        )
        return labels[0], dict(zip(distintos, labels[1:]))

    async def _label(self, lookup: CodeLookup | None, codigo: str) -> Optional[str]:
        """Look *codigo* up, degrading to the code itself on any failure."""
        if not codigo:
            return None
        if lookup is None:
            return codigo
        try:
            if self._lookup_timeout is not None:
                label = await asyncio.wait_for(lookup.lookup(codigo), self._lookup_timeout)
            else:
                label = await lookup.lookup(codigo)
        except asyncio.TimeoutError:
            logger.warning("%s: lookup of %r timed out, using raw code", lookup.name, codigo)
            return codigo
        except Exception as exc:
            logger.warning("%s: lookup of %r failed (%s), using raw code", lookup.name, codigo, exc)
            return codigo
        return to_text(label) or codigo

    # ------------------------------------------------------------------ #
    # Header fields                                                        #
    # ------------------------------------------------------------------ #

    @staticmethod
    def _numero(camadas: list[dict[str, Any]], raw: Mapping[str, Any]) -> str:
        numero = to_text(resolve_layers(camadas, "numero", "numeroProcesso"))
        return numero or to_text(resolve(raw, "numero", "numeroProcesso")) or ""

    @staticmethod
    def _orgao_julgador(node: Any) -> str:
        node = first_of(node)
        if isinstance(node, Mapping):
            return resolve_text(node, "nome", "nomeOrgao") or NOT_AVAILABLE
        return to_text(node) or NOT_AVAILABLE

    @staticmethod
    def _nivel_sigilo(value: Any) -> Optional[int]:
        return None if value is None else parse_int(value)

    @staticmethod
    def _outro_parametro(camadas: list[dict[str, Any]], nome: str) -> Optional[str]:
        for camada in camadas:
            valor = to_text(outro_parametro(camada, nome))
            if valor:
                return valor
        return None
