"""MNI processo normalization — MNI 2.2 / 3.0 documents to ``ProcessoJudicialSchema``."""

from normalization.exceptions import InvalidRecordError, NormalizationError
from normalization.lookup import CachedLookup, CodeLookup, LabelCache, TableLookup
from normalization.normalizer import NormalizationResult, ProcessNormalizer, RecordError

__all__ = [
    "CachedLookup",
    "CodeLookup",
    "InvalidRecordError",
    "LabelCache",
    "NormalizationError",
    "NormalizationResult",
    "ProcessNormalizer",
    "RecordError",
    "TableLookup",
]
