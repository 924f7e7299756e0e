from typing import (
    Any,
    Dict,
    List,
    Literal,
)

FieldDescriptor = Dict[str, Any]

ObjectDescriptor = Dict[
    Literal[
        "type",
        "properties",
        "title",
        "description",
        "required",
        "additionalProperties",
        "dependentRequired",
    ],
    str | bool | List[str] | Dict[str, FieldDescriptor] | Dict[str, List[str]],
]
