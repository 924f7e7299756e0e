from typing import List

import msgspec


class StringConstraints(msgspec.Struct, kw_only=True):
    min_length: int | None = None
    max_length: int | None = None
    pattern: str | None = None
    format: str | None = None
    enum: List[str] = msgspec.field(default_factory=list)
    const: str | None = None
    required: bool = False


class NumberConstraints(msgspec.Struct, kw_only=True):
    minimum: float | None = None
    maximum: float | None = None
    exclusive_minimum: float | None = None
    exclusive_maximum: float | None = None
    multiple_of: float | None = None
    const: float | None = None
    required: bool = False


class BoolConstraints(msgspec.Struct, kw_only=True):
    const: bool | None = None
    required: bool = False


class MapConstraints(msgspec.Struct, kw_only=True):
    min_properties: int | None = None
    max_properties: int | None = None
    required: bool = False
