from typing import Any, List

import msgspec


class FieldDescription(msgspec.Struct, kw_only=True):
    name: str
    wire_tag: str
    schema_tag: str
    declared_type: Any
    optional: bool = False


class TypeDescription(msgspec.Struct, kw_only=True):
    name: str
    model: type
    metadata_tag: str = ""
    frozen: bool = False
    fields: List[FieldDescription] = msgspec.field(default_factory=list)
