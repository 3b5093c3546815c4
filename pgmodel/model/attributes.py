from pgmodel.introspection.snapshot import (
    IntrospectionSnapshot,
    RawAttribute,
    RawClass,
    RawConstraint,
)
from pgmodel.logging_config import get_logger
from pgmodel.model.constraints import build_constraint
from pgmodel.model.entities import Attribute, ReferenceCandidate, Table, TableRef
from pgmodel.model.type_resolver import resolve_type

logger = get_logger(__name__)


def build_table(raw: RawClass) -> Table:
    return Table(
        id=raw.id,
        name=raw.name,
        description=raw.description,
        insertable=raw.acl_insertable,
        selectable=raw.acl_selectable,
        updatable=raw.acl_updatable,
        deletable=raw.acl_deletable,
    )


def build_attribute(
        raw: RawAttribute,
        table: Table,
        constraints: list[RawConstraint],
        snapshot: IntrospectionSnapshot,
        attribute_index: dict[tuple[str, int], RawAttribute],
        table_name_index: dict[str, str],
) -> Attribute:
    """
    Resolve one column: its type and every constraint whose key covers it.

    ``constraints`` should already be limited to the owning table.
    """
    return Attribute(
        name=raw.name,
        description=raw.description,
        num=raw.num,
        type=resolve_type(raw.type_id, snapshot.types),
        is_not_null=raw.is_not_null,
        has_default=raw.has_default,
        insertable=raw.acl_insertable,
        selectable=raw.acl_selectable,
        updatable=raw.acl_updatable,
        constraints=[
            build_constraint(constraint, attribute_index, table_name_index)
            for constraint in constraints
            if raw.num in constraint.key_attribute_nums
        ],
        parent_table=TableRef(id=table.id, name=table.name),
    )


def generate_join_references(references: list[ReferenceCandidate]) -> list[ReferenceCandidate]:
    """Pair every foreign key attribute with each other one on the same table."""
    return [
        ReferenceCandidate(attribute=reference.attribute, joined_to=other.attribute)
        for reference in references
        for other in references
        if other is not reference
    ]


def assemble_table(
        table: Table,
        snapshot: IntrospectionSnapshot,
        attribute_index: dict[tuple[str, int], RawAttribute],
        table_name_index: dict[str, str],
) -> tuple[Table, list[ReferenceCandidate]]:
    """
    Attach the ordered attributes of ``table``.

    Returns the populated table together with its reference candidates: one per
    foreign key attribute, followed by the join pairs when the table has more
    than one. Candidates are resolved later against every table at once.
    """
    constraints = snapshot.get_constraints(table.id)
    attributes = sorted(
        (
            build_attribute(raw, table, constraints, snapshot, attribute_index, table_name_index)
            for raw in snapshot.get_attributes(table.id)
        ),
        key=lambda a: a.num,
    )
    table = table.model_copy(update={"attributes": attributes})

    references = [
        ReferenceCandidate(attribute=attr) for attr in attributes if attr.foreign_key is not None
    ]
    join_references = generate_join_references(references) if len(references) > 1 else []

    logger.debug(
        "Assembled table %s: %d attributes, %d foreign keys, %d join candidates",
        table.name,
        len(attributes),
        len(references),
        len(join_references),
    )
    return table, references + join_references
