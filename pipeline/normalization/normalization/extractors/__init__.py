"""Extractors — build normalized sub-structures from either MNI dialect."""

from normalization.extractors.dados_basicos import (
    AssuntoRaw,
    extract_assuntos,
    extract_prioridades,
    extract_processos_vinculados,
)
from normalization.extractors.documentos import (
    extract_documento,
    extract_documentos,
    extract_documentos_indexados,
)
from normalization.extractors.movimentos import extract_movimento, extract_movimentos, sort_movimentos
from normalization.extractors.partes import POLO_TIPOS, extract_parte, extract_polo, extract_polos

__all__ = [
    "AssuntoRaw",
    "POLO_TIPOS",
    "extract_assuntos",
    "extract_documento",
    "extract_documentos",
    "extract_documentos_indexados",
    "extract_movimento",
    "extract_movimentos",
    "extract_parte",
    "extract_polo",
    "extract_polos",
    "extract_prioridades",
    "extract_processos_vinculados",
    "sort_movimentos",
]
