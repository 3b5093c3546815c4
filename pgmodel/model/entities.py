"""
Resolved schema model.

These are the entities handed to downstream code and query generators. Links
back to an owning or referenced table are stored as :class:`TableRef`
(id and name) and resolved through the table list, never as the table itself.
"""

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field


class TableRef(BaseModel):
    id: str
    name: str


class AttributeRef(BaseModel):
    name: str
    num: int


class Type(BaseModel):
    kind: Literal["scalar"] = "scalar"
    id: str
    name: str
    description: str | None = None
    category: str | None = None
    tags: dict[str, Any] = Field(default_factory=dict)
    enum_variants: list[str] | None = None

    @property
    def is_enum(self) -> bool:
        return self.enum_variants is not None


class PrimaryKeyConstraint(BaseModel):
    type: Literal["primary_key"] = "primary_key"
    name: str | None = None


class UniqueConstraint(BaseModel):
    type: Literal["unique"] = "unique"
    name: str | None = None
    attribute_nums: list[int]


class ReferencedTable(BaseModel):
    table: TableRef
    # aligned with ForeignKeyConstraint.key_attribute_nums
    attributes: list[AttributeRef]


class ForeignKeyConstraint(BaseModel):
    type: Literal["foreign_key"] = "foreign_key"
    name: str | None = None
    key_attribute_nums: list[int]
    referenced_table: ReferencedTable


Constraint = Annotated[
    Union[PrimaryKeyConstraint, UniqueConstraint, ForeignKeyConstraint],
    Field(discriminator="type"),
]


class Attribute(BaseModel):
    name: str
    description: str | None = None
    num: int
    type: Type
    is_not_null: bool
    has_default: bool
    insertable: bool
    selectable: bool
    updatable: bool
    constraints: list[Constraint] = Field(default_factory=list)
    parent_table: TableRef

    @property
    def foreign_key(self) -> ForeignKeyConstraint | None:
        """The first foreign key constraint on this attribute, if any."""
        return next(
            (c for c in self.constraints if isinstance(c, ForeignKeyConstraint)), None
        )

    @property
    def is_primary_key(self) -> bool:
        return any(isinstance(c, PrimaryKeyConstraint) for c in self.constraints)


class ReferenceCandidate(BaseModel):
    """
    A foreign-key-bearing attribute waiting for global resolution.

    When ``joined_to`` is set the candidate is a join reference: the pairing of
    two outgoing foreign keys on the same table, used to spot junction tables.
    """

    attribute: Attribute
    joined_to: Attribute | None = None


class ExternalReference(BaseModel):
    """A foreign key seen from the table it points at."""

    table: TableRef
    attribute: Attribute
    joined_to: Attribute | None = None
    via: list[AttributeRef]

    @property
    def is_join(self) -> bool:
        return self.joined_to is not None


class IndexedAttribute(BaseModel):
    name: str
    type: Type


class TableNames(BaseModel):
    singular: str
    plural: str
    singular_camel: str
    plural_camel: str
    singular_pascal: str
    plural_pascal: str


class Table(BaseModel):
    id: str
    name: str
    description: str | None = None
    insertable: bool
    selectable: bool
    updatable: bool
    deletable: bool
    attributes: list[Attribute] = Field(default_factory=list)
    external_references: list[ExternalReference] = Field(default_factory=list)
    indexed_attrs: list[IndexedAttribute] = Field(default_factory=list)
    table_names: TableNames | None = None

    def get_attribute(self, num: int) -> Attribute | None:
        return next((a for a in self.attributes if a.num == num), None)


class FunctionArg(BaseModel):
    name: str
    type: Type


class CompositeType(BaseModel):
    """Record type synthesized for a function declaring output arguments."""

    kind: Literal["composite"] = "composite"
    id: str
    name: str
    description: str | None = None
    category: str | None = None
    tags: dict[str, Any] = Field(default_factory=dict)
    composite_type: bool = True
    attrs: list[FunctionArg]


ReturnType = Annotated[Union[Type, CompositeType], Field(discriminator="kind")]


class Function(BaseModel):
    name: str
    description: str | None = None
    executable: bool
    is_stable: bool
    arg_names: list[str]
    args_count: int
    args: list[FunctionArg]
    return_type: ReturnType
    return_type_id: str
    returns_set: bool


class FunctionsByKind(BaseModel):
    computed_columns_by_table: dict[str, list[Function]] = Field(default_factory=dict)
    queries: list[Function] = Field(default_factory=list)
    mutations: list[Function] = Field(default_factory=list)


class SchemaModel(BaseModel):
    tables: list[Table]
    enum_types: list[Type]
    functions: FunctionsByKind

    def get_table(self, name: str) -> Table | None:
        return next((t for t in self.tables if t.name == name), None)
