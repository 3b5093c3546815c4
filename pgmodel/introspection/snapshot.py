"""
Raw introspection records.

A snapshot is the flat record set produced by the introspection query, keyed by
catalog object kind (``class``, ``attribute``, ``constraint``, ``type``,
``index``, ``procedure``). Records only reference each other through opaque
identifiers; resolving them is the job of :mod:`pgmodel.model`.
"""

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class RawRecord(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )


class RawClass(RawRecord):
    id: str
    name: str
    namespace_name: str | None = None
    description: str | None = None
    acl_insertable: bool = True
    acl_selectable: bool = True
    acl_updatable: bool = True
    acl_deletable: bool = True


class RawAttribute(RawRecord):
    class_id: str
    num: int
    name: str
    description: str | None = None
    is_not_null: bool = False
    has_default: bool = False
    type_id: str
    acl_insertable: bool = True
    acl_selectable: bool = True
    acl_updatable: bool = True


class RawConstraint(RawRecord):
    class_id: str
    id: str | None = None
    name: str | None = None
    # p = primary key, u = unique, f = foreign key
    type: str
    key_attribute_nums: list[int] = Field(default_factory=list)
    foreign_class_id: str | None = None
    foreign_key_attribute_nums: list[int] | None = None


class RawType(RawRecord):
    id: str
    name: str
    description: str | None = None
    category: str | None = None
    tags: dict[str, Any] = Field(default_factory=dict)
    enum_variants: list[str] | None = None


class RawIndex(RawRecord):
    class_id: str
    attribute_nums: list[int] = Field(default_factory=list)


class RawProcedure(RawRecord):
    name: str
    description: str | None = None
    acl_executable: bool = True
    is_stable: bool = False
    arg_names: list[str | None] = Field(default_factory=list)
    arg_type_ids: list[str] = Field(default_factory=list)
    input_args_count: int = 0
    return_type_id: str
    returns_set: bool = False


class IntrospectionSnapshot(BaseModel):
    """The full record set of one introspection run."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    classes: list[RawClass] = Field(default_factory=list, alias="class")
    attributes: list[RawAttribute] = Field(default_factory=list, alias="attribute")
    constraints: list[RawConstraint] = Field(default_factory=list, alias="constraint")
    types: list[RawType] = Field(default_factory=list, alias="type")
    indexes: list[RawIndex] = Field(default_factory=list, alias="index")
    procedures: list[RawProcedure] = Field(default_factory=list, alias="procedure")

    def get_type(self, id: str | None) -> "RawType | None":
        return next((t for t in self.types if t.id == id), None)

    def get_class(self, id: str | None) -> "RawClass | None":
        return next((c for c in self.classes if c.id == id), None)

    def get_classes(self, schema: str) -> list["RawClass"]:
        return [c for c in self.classes if c.namespace_name == schema]

    def get_attributes(self, id: str | None) -> list["RawAttribute"]:
        return [a for a in self.attributes if a.class_id == id]

    def get_constraints(self, id: str | None) -> list["RawConstraint"]:
        return [c for c in self.constraints if c.class_id == id]

    def get_indexes(self, id: str | None) -> list["RawIndex"]:
        return [i for i in self.indexes if i.class_id == id]

    def attribute_index(self) -> dict[tuple[str, int], "RawAttribute"]:
        """Attributes keyed by (owning class id, ordinal number)."""
        return {(a.class_id, a.num): a for a in self.attributes}

    def table_name_index(self) -> dict[str, str]:
        return {c.id: c.name for c in self.classes}

    def indexes_by_class_id(self) -> dict[str, list["RawIndex"]]:
        by_class: dict[str, list[RawIndex]] = {}
        for index in self.indexes:
            by_class.setdefault(index.class_id, []).append(index)
        return by_class


def load_snapshot(path: str | Path) -> IntrospectionSnapshot:
    """Read a JSON introspection snapshot from disk."""
    text = Path(path).read_text(encoding="utf-8")
    return IntrospectionSnapshot.model_validate_json(text)
