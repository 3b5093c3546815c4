from typing import Any

from pgmodel.introspection.snapshot import IntrospectionSnapshot
from pgmodel.logging_config import get_logger, log_performance
from pgmodel.model.attributes import assemble_table, build_table
from pgmodel.model.entities import SchemaModel
from pgmodel.model.functions import classify_functions, process_function
from pgmodel.model.indexes import attach_indexes
from pgmodel.model.naming import get_table_names
from pgmodel.model.references import add_references_to_foreign_tables
from pgmodel.model.type_resolver import lift_enum_types

logger = get_logger(__name__)


@log_performance(logger, "build schema model")
def from_introspection(
        introspection: IntrospectionSnapshot | dict[str, Any], schema: str
) -> SchemaModel:
    """
    Build the resolved model of ``schema`` from one introspection snapshot.

    Tables are assembled one by one, then foreign keys are resolved across all
    of them, then indexes and naming forms are attached. Functions are
    classified last, against the final table list. Any dangling identifier in
    the snapshot raises MissingReferenceError and no model is returned.
    """
    if not isinstance(introspection, IntrospectionSnapshot):
        introspection = IntrospectionSnapshot.model_validate(introspection)

    attribute_index = introspection.attribute_index()
    table_name_index = introspection.table_name_index()

    tables = []
    references = []
    for raw_class in introspection.get_classes(schema):
        table, table_references = assemble_table(
            build_table(raw_class), introspection, attribute_index, table_name_index
        )
        tables.append(table)
        references.extend(table_references)

    enum_types = lift_enum_types(tables)

    indexes_by_table_id = introspection.indexes_by_class_id()
    tables = [
        attach_indexes(table, indexes_by_table_id.get(table.id)).model_copy(
            update={"table_names": get_table_names(table.name)}
        )
        for table in add_references_to_foreign_tables(tables, references)
    ]

    functions = classify_functions(
        (process_function(raw, introspection.types) for raw in introspection.procedures),
        tables,
    )

    logger.info(
        "Built model for schema %s: %d tables, %d enum types, %d functions",
        schema,
        len(tables),
        len(enum_types),
        len(introspection.procedures),
    )
    return SchemaModel(tables=tables, enum_types=enum_types, functions=functions)
