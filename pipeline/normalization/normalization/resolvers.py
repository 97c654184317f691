"""Field resolution across the MNI 2.2 and MNI 3.0 record shapes.

The two dialects carry the same logical fields in different places: MNI 2.2
keeps scalars in an ``attributes`` bag, MNI 3.0 keeps them as direct fields
or inside ``dadosBasicos`` / ``conteudo`` sub-objects.  Each logical field
is declared once in ``FIELD_PATHS`` as an ordered list of ``(bag, key)``
pairs, where ``bag=None`` means "field on the object itself".
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional, Sequence

FieldPath = tuple[Optional[str], str]

DEFAULT_BAGS: tuple[str, ...] = ("attributes",)

FIELD_PATHS: dict[str, tuple[FieldPath, ...]] = {
    # Polo / parte
    "polo.codigo": ((None, "polo"), ("attributes", "polo")),
    "pessoa.tipo": (("attributes", "tipoPessoa"), (None, "tipoPessoa"), (None, "qualificacaoPessoa")),
    "pessoa.nome": (("attributes", "nome"), ("dadosBasicos", "nome"), (None, "nome")),
    "pessoa.documento": (
        ("attributes", "numeroDocumentoPrincipal"),
        ("dadosBasicos", "numeroDocumentoPrincipal"),
        (None, "numeroDocumentoPrincipal"),
    ),
    "pessoa.nascimento": (
        ("attributes", "dataNascimento"),
        ("dadosBasicos", "dataNascimento"),
        (None, "dataNascimento"),
    ),
    # Documento
    "documento.id": ((None, "id"), ("attributes", "id"), (None, "idDocumento"), ("attributes", "idDocumento")),
    "documento.mimetype": (("attributes", "mimetype"), ("conteudo", "mimetype"), (None, "mimetype")),
    "documento.tamanho": ((None, "tamanhoConteudo"), ("conteudo", "tamanhoConteudo")),
    "documento.movimento": (("attributes", "movimento"), (None, "idMovimento"), ("attributes", "idMovimento")),
    # Movimento
    "movimento.id": (
        (None, "identificadorMovimento"),
        ("attributes", "identificadorMovimento"),
        (None, "idMovimento"),
        ("attributes", "idMovimento"),
    ),
}


def is_present(value: Any) -> bool:
    """A field is present unless it is missing, None or an empty string."""
    if value is None:
        return False
    if isinstance(value, str) and not value.strip():
        return False
    return True


def as_list(value: Any) -> list[Any]:
    """Normalize scalar-or-array cardinality: None -> [], x -> [x], list -> list."""
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return [v for v in value if v is not None]
    return [value]


def first_of(value: Any) -> Any:
    """First element of a scalar-or-array field, or None."""
    items = as_list(value)
    return items[0] if items else None


def _bag(record: Mapping[str, Any], name: Optional[str]) -> Mapping[str, Any]:
    if name is None:
        return record
    bag = record.get(name)
    return bag if isinstance(bag, Mapping) else {}


def resolve(record: Any, *keys: str, bags: Sequence[str] = DEFAULT_BAGS) -> Any:
    """Return the first present value among *keys*, or None.

    For each key, in priority order, the object's own field wins over the
    same key inside any of the *bags*.  Non-mapping records and missing or
    null bags resolve to None instead of raising.
    """
    if not isinstance(record, Mapping):
        return None
    for key in keys:
        value = record.get(key)
        if is_present(value):
            return value
        for name in bags:
            value = _bag(record, name).get(key)
            if is_present(value):
                return value
    return None


def resolve_path(record: Any, paths: Iterable[FieldPath]) -> Any:
    """Return the first present value along explicit ``(bag, key)`` paths."""
    if not isinstance(record, Mapping):
        return None
    for bag, key in paths:
        value = _bag(record, bag).get(key)
        if is_present(value):
            return value
    return None


def resolve_field(record: Any, logical_field: str) -> Any:
    """Resolve a logical field declared in ``FIELD_PATHS``."""
    return resolve_path(record, FIELD_PATHS[logical_field])


def resolve_layers(layers: Iterable[Any], *keys: str, bags: Sequence[str] = DEFAULT_BAGS) -> Any:
    """Resolve *keys* across several objects, the first layer holding a value wins."""
    for layer in layers:
        value = resolve(layer, *keys, bags=bags)
        if value is not None:
            return value
    return None


def resolve_text(record: Any, *keys: str, bags: Sequence[str] = DEFAULT_BAGS) -> Optional[str]:
    """Like ``resolve`` but stringified and stripped; mappings and lists are skipped."""
    value = resolve(record, *keys, bags=bags)
    return to_text(value)


def to_text(value: Any) -> Optional[str]:
    if not is_present(value) or isinstance(value, (Mapping, list, tuple)):
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value).strip()


def outro_parametro(record: Any, nome: str) -> Any:
    """Value of the ``outroParametro`` entry named *nome*, or None.

    Entries are ``{"attributes": {"nome", "valor"}}`` in MNI 2.2 and plain
    ``{"nome", "valor"}`` objects in MNI 3.0.
    """
    if not isinstance(record, Mapping):
        return None
    for param in as_list(record.get("outroParametro")):
        if resolve(param, "nome") == nome:
            return resolve(param, "valor")
    return None


def parse_flag(value: Any) -> bool:
    """Canonical MNI boolean: True, or a string matching "true"/"s" in any case."""
    if isinstance(value, bool):
        return value
    text = to_text(value)
    return text is not None and text.lower() in {"true", "s"}
