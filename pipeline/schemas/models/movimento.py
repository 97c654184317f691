"""Movimento (procedural event) — Pydantic schema."""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from formatters import format_datetime
from models.base import BaseSchema


class MovimentoSchema(BaseSchema):
    """A timeline entry.

    ``data_hora`` is in the canonical ``YYYYMMDDHHMMSS`` encoding so that
    string order is chronological order.
    """

    id: str = Field(min_length=1)
    data_hora: str = ""
    descricao: str = ""
    codigo_movimento: Optional[str] = None
    complementos: tuple[str, ...] = ()

    @property
    def data_hora_formatada(self) -> str:
        return format_datetime(self.data_hora)
