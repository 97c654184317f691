"""Raw MNI processo envelope — the loosely-typed input of the normalizer.

MNI 2.2 (SOAP, parsed with attribute bags) and MNI 3.0 (JSON-like, nested
``dadosBasicos``) share no fixed shape below the root, so only the root is
modelled; everything underneath stays an open mapping for the resolver.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "MniDialeto",
    "MniProcessoRaw",
]


class MniDialeto(StrEnum):
    MNI_22 = "MNI 2.2"
    MNI_30 = "MNI 3.0"
    DESCONHECIDO = "desconhecido"


class MniProcessoRaw(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    dados_basicos: Any = Field(default=None, alias="dadosBasicos")
    movimento: Any = None
    documento: Any = None

    @property
    def dados_basicos_raiz(self) -> dict[str, Any]:
        return self.dados_basicos if isinstance(self.dados_basicos, dict) else {}

    @property
    def dados_basicos_camadas(self) -> list[dict[str, Any]]:
        """Basic-data layers, innermost first.

        MNI 3.0 nests a second ``dadosBasicos`` inside the first; MNI 2.2
        has a single layer.  Lookups probe the layers in this order.
        """
        raiz = self.dados_basicos_raiz
        interno = raiz.get("dadosBasicos")
        if isinstance(interno, dict) and interno:
            return [interno, raiz]
        return [raiz]

    @property
    def dialeto(self) -> MniDialeto:
        raiz = self.dados_basicos_raiz
        interno = raiz.get("dadosBasicos")
        if isinstance(interno, dict) and interno:
            return MniDialeto.MNI_30
        if isinstance(raiz.get("attributes"), dict):
            return MniDialeto.MNI_22
        return MniDialeto.DESCONHECIDO
