from pgmodel.introspection.errors import MissingReferenceError
from pgmodel.logging_config import get_logger
from pgmodel.model.entities import ExternalReference, ReferenceCandidate, Table

logger = get_logger(__name__)


def add_references_to_foreign_tables(
        tables: list[Table], references: list[ReferenceCandidate]
) -> list[Table]:
    """
    Install every reference candidate as a back-reference on the table it points at.

    References coming from a table that is not selectable are dropped, so a
    hidden table never shows up as a relationship. Back-references keep the
    order of ``references``; the returned tables keep the order of ``tables``.
    """
    tables_by_id = {table.id: table for table in tables}
    referenced_by: dict[str, list[ExternalReference]] = {
        table.id: list(table.external_references) for table in tables
    }

    for reference in references:
        attribute = reference.attribute
        parent = tables_by_id.get(attribute.parent_table.id)
        if parent is None:
            raise MissingReferenceError(
                "Class", attribute.parent_table.id, f"owner of attribute {attribute.name}"
            )
        if not parent.selectable:
            logger.debug(
                "Skipping reference from %s.%s: table is not selectable",
                parent.name,
                attribute.name,
            )
            continue

        foreign_key = attribute.foreign_key
        target_id = foreign_key.referenced_table.table.id
        if target_id not in referenced_by:
            logger.debug(
                "Skipping reference from %s.%s: %s is outside the introspected schema",
                parent.name,
                attribute.name,
                foreign_key.referenced_table.table.name,
            )
            continue

        referenced_by[target_id].append(
            ExternalReference(
                table=attribute.parent_table,
                attribute=attribute,
                joined_to=reference.joined_to,
                via=foreign_key.referenced_table.attributes,
            )
        )

    return [
        table.model_copy(update={"external_references": referenced_by[table.id]})
        for table in tables
    ]
