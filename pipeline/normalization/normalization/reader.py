"""Input readers for raw processo documents (JSON or JSONL)."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterator

logger = logging.getLogger(__name__)


def read_jsonl(path: Path) -> Iterator[Any]:
    """Read a JSONL file line-by-line, yielding parsed values.

    Malformed lines are logged and skipped.
    """
    with path.open("r", encoding="utf-8") as fh:
        for lineno, line in enumerate(fh, start=1):
            line = line.strip()
            if not line:
                continue
            try:
                yield json.loads(line)
            except json.JSONDecodeError as exc:
                logger.warning("%s:%d — invalid JSON, skipping: %s", path.name, lineno, exc)


def read_records(path: Path) -> Iterator[Any]:
    """Yield raw documents from ``.jsonl`` or ``.json`` (one object or a list).

    A gateway response wrapper ``{"success": ..., "data": {...}}`` is unwrapped.
    """
    if path.suffix == ".jsonl":
        yield from read_jsonl(path)
        return

    with path.open("r", encoding="utf-8") as fh:
        data = json.load(fh)

    if isinstance(data, dict) and "data" in data and "success" in data:
        data = data["data"]
    if isinstance(data, list):
        yield from data
    else:
        yield data
