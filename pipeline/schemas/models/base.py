"""Base class for the normalized Pydantic schemas."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class BaseSchema(BaseModel):
    """Pydantic base schema with common configuration.

    Normalized records are produced once per raw document and never
    mutated afterwards, hence ``frozen``.
    """

    model_config = ConfigDict(from_attributes=True, str_strip_whitespace=True, frozen=True)
