from pgmodel.introspection.errors import MissingReferenceError
from pgmodel.introspection.snapshot import RawIndex
from pgmodel.logging_config import get_logger
from pgmodel.model.entities import IndexedAttribute, Table

logger = get_logger(__name__)

BOOLEAN_TYPE_NAME = "bool"


def attach_indexes(table: Table, table_indexes: list[RawIndex] | None) -> Table:
    """
    Attach the filterable columns of ``table``.

    Single-column indexes contribute their column; multi-column indexes are not
    modeled. Boolean columns are always filterable, indexed or not. A table
    without any index gets an empty list.
    """
    if not table_indexes:
        return table.model_copy(update={"indexed_attrs": []})

    indexed_attrs = []
    for index in table_indexes:
        if len(index.attribute_nums) != 1:
            logger.debug(
                "Ignoring multi-column index on %s (columns %s)",
                table.name,
                index.attribute_nums,
            )
            continue

        num = index.attribute_nums[0]
        attr = table.get_attribute(num)
        if attr is None:
            raise MissingReferenceError(
                "Attribute", f"{table.id}_{num}", f"indexed column of {table.name}"
            )
        indexed_attrs.append(IndexedAttribute(name=attr.name, type=attr.type))

    indexed_attrs.extend(
        IndexedAttribute(name=attr.name, type=attr.type)
        for attr in table.attributes
        if attr.type.name == BOOLEAN_TYPE_NAME
    )

    seen = set()
    unique_attrs = []
    for indexed in indexed_attrs:
        if indexed.name not in seen:
            seen.add(indexed.name)
            unique_attrs.append(indexed)

    return table.model_copy(update={"indexed_attrs": unique_attrs})
