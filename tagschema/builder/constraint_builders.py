from typing import Callable, TypeVar

from tagschema.exceptions import SchemaBuildError
from tagschema.models.schema import (
    ArrayConstraints,
    BoolConstraints,
    MapConstraints,
    NumberConstraints,
    StringConstraints,
)
from tagschema.tags import TagOptions

T = TypeVar("T", int, float)

NUMBER_OPTIONS = {
    "minimum": "minimum",
    "maximum": "maximum",
    "exclusiveMinimum": "exclusive_minimum",
    "exclusiveMaximum": "exclusive_maximum",
    "multipleOf": "multiple_of",
    "const": "const",
}


def parse_literal(
    options: TagOptions,
    key: str,
    parser: Callable[[str], T],
    expected: str,
) -> T | None:
    value = options.get(key)
    if value is None:
        return None

    try:
        return parser(value)

    except ValueError as err:
        raise SchemaBuildError(f"{key} must be {expected}: {err}") from err


def parse_int(options: TagOptions, key: str) -> int | None:
    return parse_literal(options, key, int, "an integer")


def parse_float(options: TagOptions, key: str) -> float | None:
    return parse_literal(options, key, float, "a number")


def build_string_constraints(
    options: TagOptions,
    required: bool,
) -> StringConstraints:
    enum = options.get("enum")

    return StringConstraints(
        min_length=parse_int(options, "minLength"),
        max_length=parse_int(options, "maxLength"),
        pattern=options.get("pattern"),
        format=options.get("format"),
        enum=enum.split("|") if enum is not None else [],
        const=options.get("const"),
        required=required,
    )


def build_number_constraints(
    options: TagOptions,
    required: bool,
    lenient_const: bool = False,
) -> NumberConstraints:
    constraints = NumberConstraints(required=required)

    for option, attribute in NUMBER_OPTIONS.items():
        if option == "const" and lenient_const:
            try:
                value = parse_float(options, option)

            except SchemaBuildError:
                value = None

        else:
            value = parse_float(options, option)

        setattr(constraints, attribute, value)

    return constraints


def build_bool_constraints(
    options: TagOptions,
    required: bool,
) -> BoolConstraints:
    const = options.get("const")

    return BoolConstraints(
        const=const == "true" if const is not None else None,
        required=required,
    )


def build_array_constraints(
    options: TagOptions,
    required: bool,
) -> ArrayConstraints:
    return ArrayConstraints(
        min_items=parse_int(options, "minItems"),
        max_items=parse_int(options, "maxItems"),
        unique_items=options.get("uniqueItems") == "true",
        required=required,
    )


def build_map_constraints(
    options: TagOptions,
    required: bool,
) -> MapConstraints:
    return MapConstraints(
        min_properties=parse_int(options, "minProperties"),
        max_properties=parse_int(options, "maxProperties"),
        required=required,
    )
