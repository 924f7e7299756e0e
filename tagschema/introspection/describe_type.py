import types
from collections.abc import Mapping, Sequence, Set
from typing import (
    Annotated,
    Any,
    List,
    Tuple,
    Union,
    get_args,
    get_origin,
    get_type_hints,
)

import msgspec

from tagschema.tags import Tag

from .type_description import FieldDescription, TypeDescription

NoneType = type(None)

SEQUENCE_TYPES = (list, tuple, set, frozenset)
BYTES_TYPES = (str, bytes, bytearray, memoryview)
MAPPING_TYPES = (dict,)


def is_struct_type(value: Any) -> bool:
    return isinstance(value, type) and issubclass(value, msgspec.Struct)


def is_struct(value: Any) -> bool:
    return isinstance(value, msgspec.Struct)


def split_annotated(hint: Any) -> Tuple[Any, List[str]]:
    if get_origin(hint) is not Annotated:
        return hint, []

    base, *metadata = get_args(hint)
    return base, [
        item.raw for item in metadata if isinstance(item, Tag) and item.raw
    ]


def strip_optional(hint: Any) -> Tuple[Any, bool]:
    if get_origin(hint) not in (Union, types.UnionType):
        return hint, False

    args = [arg for arg in get_args(hint) if arg is not NoneType]
    if len(args) == len(get_args(hint)):
        return hint, False

    if len(args) == 1:
        return args[0], True

    return Union[tuple(args)], True


def is_sequence_type(hint: Any) -> bool:
    origin = get_origin(hint) or hint
    if not isinstance(origin, type) or issubclass(origin, BYTES_TYPES):
        return False

    return origin in SEQUENCE_TYPES or issubclass(origin, (Sequence, Set))


def is_mapping_type(hint: Any) -> bool:
    origin = get_origin(hint) or hint
    if not isinstance(origin, type):
        return False

    return origin in MAPPING_TYPES or issubclass(origin, Mapping)


def element_type(hint: Any) -> Any:
    args = get_args(hint)
    if not args:
        return Any

    if get_origin(hint) is tuple:
        if len(args) == 2 and args[1] is Ellipsis:
            return args[0]

        return args[0] if len(set(args)) == 1 else Any

    return args[0]


def unwrap_type(hint: Any) -> Tuple[Any, bool, List[str]]:
    hint, tags = split_annotated(hint)
    hint, optional = strip_optional(hint)

    # Optional[Annotated[T, Tag(...)]]
    hint, inner_tags = split_annotated(hint)

    return hint, optional, tags + inner_tags


def is_frozen(model: type) -> bool:
    config = getattr(model, "__struct_config__", None)
    return bool(config and config.frozen)


def describe_type(model: Any) -> TypeDescription:
    if not is_struct_type(model):
        raise TypeError(
            f"expected a msgspec.Struct type, got {model!r}"
        )

    hints = get_type_hints(model, include_extras=True)

    metadata = getattr(model, "__schema__", None)
    description = TypeDescription(
        name=model.__name__,
        model=model,
        metadata_tag=str(metadata) if metadata is not None else "",
        frozen=is_frozen(model),
    )

    for field in msgspec.structs.fields(model):
        declared_type, optional, tags = unwrap_type(
            hints.get(field.name, Any)
        )

        description.fields.append(
            FieldDescription(
                name=field.name,
                wire_tag=field.encode_name,
                schema_tag=",".join(tags),
                declared_type=declared_type,
                optional=optional,
            )
        )

    return description
