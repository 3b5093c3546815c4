from pgmodel.introspection.errors import (
    MalformedConstraintError,
    MissingReferenceError,
    UnsupportedConstraintError,
)
from pgmodel.introspection.snapshot import RawAttribute, RawConstraint
from pgmodel.model.entities import (
    AttributeRef,
    Constraint,
    ForeignKeyConstraint,
    PrimaryKeyConstraint,
    ReferencedTable,
    TableRef,
    UniqueConstraint,
)

PRIMARY_KEY = "p"
UNIQUE = "u"
FOREIGN_KEY = "f"


def build_constraint(
        raw: RawConstraint,
        attribute_index: dict[tuple[str, int], RawAttribute],
        table_name_index: dict[str, str],
) -> Constraint:
    """
    Convert a raw catalog constraint into a typed constraint.

    ``attribute_index`` maps (class id, attribute num) to the raw attribute and
    ``table_name_index`` maps class id to table name; both are only consulted
    for foreign keys, to name the referenced table and columns.
    """
    if raw.type == PRIMARY_KEY:
        return PrimaryKeyConstraint(name=raw.name)

    if raw.type == UNIQUE:
        return UniqueConstraint(name=raw.name, attribute_nums=list(raw.key_attribute_nums))

    if raw.type == FOREIGN_KEY:
        return _build_foreign_key(raw, attribute_index, table_name_index)

    raise UnsupportedConstraintError(raw.type, raw.name)


def _build_foreign_key(
        raw: RawConstraint,
        attribute_index: dict[tuple[str, int], RawAttribute],
        table_name_index: dict[str, str],
) -> ForeignKeyConstraint:
    foreign_table_id = raw.foreign_class_id
    if foreign_table_id is None or foreign_table_id not in table_name_index:
        raise MissingReferenceError(
            "Class", str(foreign_table_id), f"foreign table of constraint {raw.name}"
        )

    foreign_nums = raw.foreign_key_attribute_nums
    if foreign_nums is None or len(foreign_nums) != len(raw.key_attribute_nums):
        raise MalformedConstraintError(raw.name, list(raw.key_attribute_nums), foreign_nums)

    attributes = []
    for num in foreign_nums:
        foreign_attr = attribute_index.get((foreign_table_id, num))
        if foreign_attr is None:
            raise MissingReferenceError(
                "Attribute",
                f"{foreign_table_id}_{num}",
                f"referenced column of constraint {raw.name}",
            )
        attributes.append(AttributeRef(name=foreign_attr.name, num=num))

    return ForeignKeyConstraint(
        name=raw.name,
        key_attribute_nums=list(raw.key_attribute_nums),
        referenced_table=ReferencedTable(
            table=TableRef(id=foreign_table_id, name=table_name_index[foreign_table_id]),
            attributes=attributes,
        ),
    )
