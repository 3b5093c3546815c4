from typing import Iterable

from pgmodel.introspection.errors import MissingReferenceError
from pgmodel.introspection.snapshot import RawType
from pgmodel.model.entities import Table, Type


def resolve_type(type_id: str, types: Iterable[RawType]) -> Type:
    """
    Return the type descriptor for ``type_id``.

    Raises MissingReferenceError if no type in ``types`` carries the id.
    """
    raw = next((t for t in types if t.id == type_id), None)
    if raw is None:
        raise MissingReferenceError("Type", type_id)

    return Type(
        id=raw.id,
        name=raw.name,
        description=raw.description,
        category=raw.category,
        tags=dict(raw.tags),
        enum_variants=list(raw.enum_variants) if raw.enum_variants is not None else None,
    )


def lift_enum_types(tables: Iterable[Table]) -> list[Type]:
    """Collect every enum-carrying attribute type once, in first-seen order."""
    seen: set[str] = set()
    enum_types = []
    for table in tables:
        for attr in table.attributes:
            if attr.type.is_enum and attr.type.id not in seen:
                seen.add(attr.type.id)
                enum_types.append(attr.type)
    return enum_types
