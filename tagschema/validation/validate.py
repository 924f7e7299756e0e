import logging
from collections.abc import Mapping, Sequence, Set
from typing import Any

from tagschema.builder import build_schema
from tagschema.exceptions import SchemaTypeError, ValidationFailed
from tagschema.introspection import is_struct
from tagschema.models.schema import (
    NUMERIC_KINDS,
    ArrayConstraints,
    FieldSchema,
    MapConstraints,
    ObjectSchema,
)
from tagschema.models.validation import ValidationErrors

from .checks import (
    check_bool,
    check_branch,
    check_number,
    check_string,
    type_mismatch,
)
from .composition import check_composition
from .values import is_number, is_zero, join_path, same_item

logger = logging.getLogger(__name__)

BYTES_VALUES = (str, bytes, bytearray, memoryview)


def validate(value: Any, schema: ObjectSchema | None = None) -> ValidationErrors:
    """Checks ``value`` against ``schema`` and returns every violation found.

    When ``schema`` is omitted it is built from ``type(value)``. An empty
    result means the value is valid. ``None`` yields a single ``value is nil``
    error; anything that is not a struct instance raises ``SchemaTypeError``.
    """
    if value is None:
        errors = ValidationErrors()
        errors.add("", "value is nil")
        return errors

    if not is_struct(value):
        raise SchemaTypeError(
            f"validate expects a msgspec.Struct instance, got {type(value).__name__}"
        )

    if schema is None:
        schema = build_schema(type(value))

    errors = validate_object(value, schema, "")

    logger.debug(
        "Validated %s with %d error(s)",
        type(value).__name__,
        len(errors),
    )

    return errors


def validate_or_raise(value: Any, schema: ObjectSchema | None = None):
    errors = validate(value, schema)
    if len(errors) > 0:
        raise ValidationFailed(errors)


def validate_object(value: Any, schema: ObjectSchema, path: str) -> ValidationErrors:
    errors = ValidationErrors()

    for wire_name, field in schema.fields.items():
        errors.extend(
            validate_field(
                getattr(value, field.name, None),
                field,
                join_path(path, wire_name),
            )
        )

    errors.extend(check_dependent_required(value, schema, path))

    return errors


def validate_field(value: Any, field: FieldSchema, path: str) -> ValidationErrors:
    errors = ValidationErrors()

    if value is None:
        if field.required and not field.nullable:
            errors.add(path, "field is required")

        return errors

    if check_kind(value, field, path, errors) and field.has_composition:
        errors.extend(check_composition(value, field, path))

    return errors


def check_kind(
    value: Any,
    field: FieldSchema,
    path: str,
    errors: ValidationErrors,
) -> bool:
    """Runs the checks for the field's kind. Returns False when the field
    should not be checked any further."""
    if field.kind == "string":
        if not isinstance(value, str):
            return type_mismatch(value, field, path, errors)

        return check_string(value, field.string, path, errors)

    elif field.kind in NUMERIC_KINDS:
        if not is_number(value):
            return type_mismatch(value, field, path, errors)

        check_number(value, field.number, path, errors)

    elif field.kind == "boolean":
        if not isinstance(value, bool):
            return type_mismatch(value, field, path, errors)

        check_bool(value, field.boolean, path, errors)

    elif field.kind == "array":
        if not is_sequence(value):
            return type_mismatch(value, field, path, errors)

        return check_array(value, field.array, path, errors)

    elif field.kind == "object" and field.nested is not None:
        if not is_struct(value):
            return type_mismatch(value, field, path, errors)

        errors.extend(validate_object(value, field.nested, path))

    elif field.kind == "object":
        if not isinstance(value, Mapping):
            return type_mismatch(value, field, path, errors)

        return check_map(value, field.map, path, errors)

    else:
        errors.extend(check_branch(value, field, path))

    return True


def is_sequence(value: Any) -> bool:
    return isinstance(value, (Sequence, Set)) and not isinstance(value, BYTES_VALUES)


def check_array(
    value: Sequence | Set,
    constraints: ArrayConstraints | None,
    path: str,
    errors: ValidationErrors,
) -> bool:
    if constraints is None:
        return True

    count = len(value)

    if constraints.required and count == 0:
        errors.add(path, "field is required (empty slice)", count)
        return False

    if constraints.min_items is not None and count < constraints.min_items:
        errors.add(
            path,
            f"must have at least {constraints.min_items} items (got {count})",
            count,
        )

    if constraints.max_items is not None and count > constraints.max_items:
        errors.add(
            path,
            f"must have at most {constraints.max_items} items (got {count})",
            count,
        )

    if constraints.unique_items:
        seen: list[Any] = []

        for item in value:
            if any(same_item(item, previous) for previous in seen):
                errors.add(
                    path,
                    f"items must be unique (duplicate: {item!r})",
                    item,
                )
                break

            seen.append(item)

    if constraints.items is not None:
        for index, item in enumerate(value):
            errors.extend(
                validate_field(item, constraints.items, f"{path}[{index}]")
            )

    return True


def check_map(
    value: Mapping,
    constraints: MapConstraints | None,
    path: str,
    errors: ValidationErrors,
) -> bool:
    if constraints is None:
        return True

    count = len(value)

    if constraints.required and count == 0:
        errors.add(path, "field is required (empty map)", count)
        return False

    if constraints.min_properties is not None and count < constraints.min_properties:
        errors.add(
            path,
            f"must have at least {constraints.min_properties} properties (got {count})",
            count,
        )

    if constraints.max_properties is not None and count > constraints.max_properties:
        errors.add(
            path,
            f"must have at most {constraints.max_properties} properties (got {count})",
            count,
        )

    return True


def check_dependent_required(
    value: Any,
    schema: ObjectSchema,
    path: str,
) -> ValidationErrors:
    errors = ValidationErrors()

    for source, dependents in schema.dependent_required.items():
        source_field = schema.fields.get(source)
        if source_field is None or is_zero(getattr(value, source_field.name, None)):
            continue

        for dependent in dependents:
            dependent_field = schema.fields.get(dependent)
            dependent_value = (
                getattr(value, dependent_field.name, None)
                if dependent_field is not None
                else None
            )

            if is_zero(dependent_value):
                errors.add(
                    join_path(path, dependent),
                    f"field is required when '{source}' is present",
                    dependent_value,
                )

    return errors
