from __future__ import annotations

from typing import Dict, List

import msgspec

from .constraints import (
    BoolConstraints,
    MapConstraints,
    NumberConstraints,
    StringConstraints,
)
from .schema_types import NUMERIC_KINDS, FieldKind


class ArrayConstraints(msgspec.Struct, kw_only=True):
    min_items: int | None = None
    max_items: int | None = None
    unique_items: bool = False
    items: FieldSchema | None = None
    required: bool = False


ConstraintSet = (
    StringConstraints
    | NumberConstraints
    | BoolConstraints
    | ArrayConstraints
    | MapConstraints
)


class FieldSchema(msgspec.Struct, kw_only=True):
    """Resolved constraints for one field, or for one composition branch.

    A field carries the constraint set matching its kind. Branches (and
    array element schemas built from ``items:`` tokens) are kind ``any`` and
    may carry string, number and boolean sets at the same time.
    """

    kind: FieldKind = "any"
    name: str = ""
    wire_name: str = ""
    default: str | None = None
    required: bool = False
    nullable: bool = False
    string: StringConstraints | None = None
    number: NumberConstraints | None = None
    boolean: BoolConstraints | None = None
    array: ArrayConstraints | None = None
    map: MapConstraints | None = None
    nested: ObjectSchema | None = None
    any_of: List[FieldSchema] = msgspec.field(default_factory=list)
    one_of: List[FieldSchema] = msgspec.field(default_factory=list)
    all_of: List[FieldSchema] = msgspec.field(default_factory=list)
    not_: FieldSchema | None = None

    @property
    def constraints(self) -> ConstraintSet | None:
        if self.kind == "string":
            return self.string

        elif self.kind in NUMERIC_KINDS:
            return self.number

        elif self.kind == "boolean":
            return self.boolean

        elif self.kind == "array":
            return self.array

        elif self.kind == "object" and self.nested is None:
            return self.map

        return None

    @property
    def has_composition(self) -> bool:
        return bool(
            self.any_of or self.one_of or self.all_of or self.not_ is not None
        )


class ObjectSchema(msgspec.Struct, kw_only=True):
    title: str = ""
    description: str = ""
    fields: Dict[str, FieldSchema] = msgspec.field(default_factory=dict)
    additional_properties: bool | None = None
    dependent_required: Dict[str, List[str]] = msgspec.field(default_factory=dict)

    @property
    def allows_additional_properties(self) -> bool:
        return self.additional_properties is None or self.additional_properties
