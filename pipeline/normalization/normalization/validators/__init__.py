"""Validators — structural checks on normalized records."""

from normalization.validators.structure import (
    StructureIssue,
    StructureReport,
    StructureStats,
    StructureValidator,
)

__all__ = [
    "StructureIssue",
    "StructureReport",
    "StructureStats",
    "StructureValidator",
]
