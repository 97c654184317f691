"""Code -> label lookups for classes processuais and assuntos.

The normalizer never talks to the network itself: it is handed a
``CodeLookup`` per code table.  ``TableLookup`` serves a local reference
table (the ``codigo,descricao`` CSVs exported from the gateway) and
``CachedLookup`` puts an explicit ``LabelCache`` in front of any lookup.
"""

from __future__ import annotations

import csv
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterator, Mapping, Optional

logger = logging.getLogger(__name__)


class CodeLookup(ABC):
    """Abstract async code -> human-readable label lookup."""

    name: str = "lookup"

    @abstractmethod
    async def lookup(self, code: str) -> Optional[str]:
        """Return the label for *code*, or None when unknown.

        Implementations may raise; the normalizer treats any exception as
        "no label" and falls back to the raw code.
        """


class LabelCache:
    """Explicit code -> label cache with a caller-controlled lifetime."""

    def __init__(self, initial: Mapping[str, str] | None = None) -> None:
        self._labels: dict[str, str] = {}
        if initial:
            self.preload(initial)

    def get(self, code: str) -> Optional[str]:
        return self._labels.get(code)

    def set(self, code: str, label: str) -> None:
        self._labels[code] = label

    def preload(self, labels: Mapping[str, str]) -> None:
        """Bulk-load a table, e.g. every classe of a localidade."""
        for code, label in labels.items():
            code = str(code).strip()
            if code:
                self._labels[code] = str(label or code).strip()
        logger.debug("label cache preloaded: %d entries", len(self._labels))

    def clear(self) -> None:
        self._labels.clear()

    def __contains__(self, code: object) -> bool:
        return code in self._labels

    def __len__(self) -> int:
        return len(self._labels)


class TableLookup(CodeLookup):
    """Lookup backed by an in-memory reference table."""

    def __init__(self, labels: Mapping[str, str], *, name: str = "table") -> None:
        self.name = name
        self._labels = {str(k).strip(): str(v).strip() for k, v in labels.items() if str(v).strip()}

    async def lookup(self, code: str) -> Optional[str]:
        return self._labels.get(str(code).strip())

    def __len__(self) -> int:
        return len(self._labels)

    @classmethod
    def from_csv(cls, path: Path, *, name: str | None = None) -> "TableLookup":
        """Load a ``codigo,descricao`` CSV reference table.

        Rows without a code are logged and skipped.
        """
        labels = dict(_read_table_csv(path))
        logger.info("%s: loaded %d labels from %s", name or path.stem, len(labels), path)
        return cls(labels, name=name or path.stem)


class CachedLookup(CodeLookup):
    """Wrap a lookup with a ``LabelCache``; only successful answers are cached."""

    def __init__(self, inner: CodeLookup, cache: LabelCache | None = None) -> None:
        self.name = inner.name
        self._inner = inner
        self.cache = cache if cache is not None else LabelCache()

    async def lookup(self, code: str) -> Optional[str]:
        cached = self.cache.get(code)
        if cached is not None:
            return cached
        label = await self._inner.lookup(code)
        if label:
            self.cache.set(code, label)
        return label

    def invalidate(self) -> None:
        self.cache.clear()


def _read_table_csv(path: Path) -> Iterator[tuple[str, str]]:
    with path.open("r", encoding="utf-8", newline="") as fh:
        reader = csv.DictReader(fh)
        for lineno, row in enumerate(reader, start=2):
            codigo = (row.get("codigo") or "").strip()
            descricao = (row.get("descricao") or "").strip()
            if not codigo:
                logger.warning("%s:%d — row without codigo, skipping", path.name, lineno)
                continue
            yield codigo, descricao or codigo
