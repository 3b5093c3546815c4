from pgmodel.model.builder import from_introspection
from pgmodel.model.entities import (
    Attribute,
    CompositeType,
    ExternalReference,
    ForeignKeyConstraint,
    Function,
    FunctionsByKind,
    IndexedAttribute,
    PrimaryKeyConstraint,
    SchemaModel,
    Table,
    Type,
    UniqueConstraint,
)

__all__ = [
    "from_introspection",
    "Attribute",
    "CompositeType",
    "ExternalReference",
    "ForeignKeyConstraint",
    "Function",
    "FunctionsByKind",
    "IndexedAttribute",
    "PrimaryKeyConstraint",
    "SchemaModel",
    "Table",
    "Type",
    "UniqueConstraint",
]
