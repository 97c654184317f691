"""CLI entry point: python -m normalization INPUT

Runs the normalizer over a file of raw MNI processo documents:
  1. Read raw documents (.json or .jsonl)
  2. Normalize (class / subject labels from optional CSV reference tables)
  3. Structural check (reported, never blocking)
  4. Write normalized records as JSONL
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import os
import sys
from pathlib import Path
from typing import IO, Optional

from normalization.lookup import CachedLookup, TableLookup
from normalization.normalizer import NormalizationResult, ProcessNormalizer
from normalization.reader import read_records
from normalization.validators import StructureValidator

logger = logging.getLogger("normalization")


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s — %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def _env_float(name: str) -> Optional[float]:
    value = os.environ.get(name, "").strip()
    if not value:
        return None
    try:
        return float(value)
    except ValueError:
        logger.warning("Ignoring non-numeric $%s=%r", name, value)
        return None


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m normalization",
        description="MNI processo normalizer — MNI 2.2 / 3.0 documents to one record format.",
    )
    parser.add_argument(
        "input",
        type=Path,
        help="Raw processo documents: .json (object or list) or .jsonl.",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Output JSONL file (default: stdout).",
    )
    parser.add_argument(
        "--classes",
        type=Path,
        default=os.environ.get("MNI_CLASSES_CSV") or None,
        help="codigo,descricao CSV of classes processuais. Falls back to $MNI_CLASSES_CSV.",
    )
    parser.add_argument(
        "--assuntos",
        type=Path,
        default=os.environ.get("MNI_ASSUNTOS_CSV") or None,
        help="codigo,descricao CSV of assuntos. Falls back to $MNI_ASSUNTOS_CSV.",
    )
    parser.add_argument(
        "--lookup-timeout",
        type=float,
        default=_env_float("MNI_LOOKUP_TIMEOUT"),
        help="Per-label lookup deadline in seconds. Falls back to $MNI_LOOKUP_TIMEOUT.",
    )
    parser.add_argument(
        "--no-validate",
        action="store_true",
        help="Skip the structural check of normalized records.",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def _build_normalizer(args: argparse.Namespace) -> ProcessNormalizer:
    classes = assuntos = None
    if args.classes:
        classes = CachedLookup(TableLookup.from_csv(args.classes, name="classes"))
    if args.assuntos:
        assuntos = CachedLookup(TableLookup.from_csv(args.assuntos, name="assuntos"))
    return ProcessNormalizer(
        classes=classes,
        assuntos=assuntos,
        lookup_timeout=args.lookup_timeout,
    )


def _write_jsonl(result: NormalizationResult, fh: IO[str]) -> None:
    for record in result.records:
        fh.write(json.dumps(record.model_dump(mode="json"), ensure_ascii=False) + "\n")


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    if not args.input.is_file():
        logger.error("Input file not found: %s", args.input)
        sys.exit(1)

    for label, table in (("classes", args.classes), ("assuntos", args.assuntos)):
        if table is not None and not table.is_file():
            logger.error("Reference table for %s not found: %s", label, table)
            sys.exit(1)

    try:
        raw_records = list(read_records(args.input))
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        logger.error("Cannot parse input %s: %s", args.input, exc)
        sys.exit(1)

    logger.info("=== MNI normalization: %s ===", args.input)

    normalizer = _build_normalizer(args)
    result = asyncio.run(normalizer.normalize_batch(raw_records))

    if not args.no_validate:
        StructureValidator().validate_batch(result.records)

    if args.output is None:
        _write_jsonl(result, sys.stdout)
    else:
        with args.output.open("w", encoding="utf-8") as fh:
            _write_jsonl(result, fh)
        logger.info("Wrote %d records to %s", len(result.records), args.output)

    if result.errors:
        logger.warning("  errors: %d", len(result.errors))
    logger.info("=== Done ===")


if __name__ == "__main__":
    main()
