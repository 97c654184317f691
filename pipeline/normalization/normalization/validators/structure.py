"""Structural checks on normalized records before they are exported."""

from __future__ import annotations

import logging
import re
from collections import Counter
from dataclasses import dataclass, field

from models.processo_judicial import ProcessoJudicialSchema

logger = logging.getLogger(__name__)

_NUMERO_CNJ_RE = re.compile(r"^\d{20}$")


@dataclass
class StructureIssue:
    """A single structural problem found in a record."""

    numero: str
    issue_type: str  # "numero_invalido", "movimento_duplicado", ...
    detail: str


@dataclass
class StructureStats:
    total_input: int = 0
    clean_count: int = 0
    issue_count: int = 0


@dataclass
class StructureReport:
    issues: list[StructureIssue] = field(default_factory=list)
    stats: StructureStats = field(default_factory=StructureStats)


class StructureValidator:
    """Reports structural problems in normalized records.

    Nothing here rejects a record: the dashboard must still render partial
    data, so issues are only reported and logged.
    - process number that is not exactly 20 digits
    - duplicated movement ids
    - documents pointing at a movement id that is not in the timeline
    - movements without a timestamp
    """

    def validate(self, record: ProcessoJudicialSchema) -> list[StructureIssue]:
        issues: list[StructureIssue] = []
        numero = record.numero

        if not _NUMERO_CNJ_RE.match(numero):
            issues.append(
                StructureIssue(numero, "numero_invalido", f"numero={numero!r} is not 20 digits")
            )

        counts = Counter(m.id for m in record.movimentos)
        for mov_id, count in counts.items():
            if count > 1:
                issues.append(
                    StructureIssue(
                        numero, "movimento_duplicado", f"movimento id={mov_id!r} appears {count} times"
                    )
                )

        for doc in record.documentos:
            if doc.movimento_id and doc.movimento_id not in counts:
                issues.append(
                    StructureIssue(
                        numero,
                        "documento_orfao",
                        f"documento id={doc.id!r} references unknown movimento {doc.movimento_id!r}",
                    )
                )

        for mov in record.movimentos:
            if not mov.data_hora:
                issues.append(
                    StructureIssue(numero, "movimento_sem_data", f"movimento id={mov.id!r} has no dataHora")
                )

        return issues

    def validate_batch(self, records: list[ProcessoJudicialSchema]) -> StructureReport:
        report = StructureReport(stats=StructureStats(total_input=len(records)))

        for record in records:
            issues = self.validate(record)
            if issues:
                report.stats.issue_count += 1
                report.issues.extend(issues)
                for issue in issues:
                    logger.warning("processo %s: [%s] %s", issue.numero, issue.issue_type, issue.detail)
            else:
                report.stats.clean_count += 1

        logger.info(
            "Structure check: %d records, %d clean, %d with issues",
            report.stats.total_input,
            report.stats.clean_count,
            report.stats.issue_count,
        )
        return report
