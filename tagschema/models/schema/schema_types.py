from typing import Literal

FieldKind = Literal[
    "string",
    "integer",
    "number",
    "boolean",
    "array",
    "object",
    "any",
]

NUMERIC_KINDS = ("integer", "number")
