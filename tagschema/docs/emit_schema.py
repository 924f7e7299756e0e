from typing import Any, Dict, List

import orjson

from tagschema.builder import build_schema
from tagschema.env import get_env
from tagschema.models.schema import (
    ArrayConstraints,
    BoolConstraints,
    FieldSchema,
    MapConstraints,
    NumberConstraints,
    ObjectSchema,
    StringConstraints,
)

from .parsed_types import FieldDescriptor, ObjectDescriptor


def emit_number(value: float) -> int | float:
    if value.is_integer():
        return int(value)

    return value


def emit(schema: ObjectSchema) -> ObjectDescriptor:
    required: List[str] = []
    properties: Dict[str, FieldDescriptor] = {}

    for name, field in schema.fields.items():
        if field.required:
            required.append(name)

        properties[name] = emit_field(field)

    descriptor: ObjectDescriptor = {
        "type": "object",
        "properties": properties,
    }

    if schema.title:
        descriptor["title"] = schema.title

    if schema.description:
        descriptor["description"] = schema.description

    if required:
        descriptor["required"] = required

    if schema.additional_properties is not None:
        descriptor["additionalProperties"] = schema.additional_properties

    if schema.dependent_required:
        descriptor["dependentRequired"] = {
            source: list(dependents)
            for source, dependents in schema.dependent_required.items()
        }

    return descriptor


def emit_field(field: FieldSchema) -> FieldDescriptor:
    descriptor: FieldDescriptor = {}

    if field.kind == "string":
        descriptor = {"type": "string", **emit_string(field.string)}

    elif field.kind in ("integer", "number"):
        descriptor = {"type": field.kind, **emit_numeric(field.number)}

    elif field.kind == "boolean":
        descriptor = {"type": "boolean", **emit_bool(field.boolean)}

    elif field.kind == "array":
        descriptor = {"type": "array", **emit_array(field.array)}

    elif field.kind == "object" and field.nested is not None:
        descriptor = emit(field.nested)

    elif field.kind == "object":
        descriptor = {"type": "object", **emit_map(field.map)}

    else:
        descriptor = {
            **emit_string(field.string),
            **emit_numeric(field.number),
            **emit_bool(field.boolean),
        }

    if field.nullable:
        descriptor["nullable"] = True

    if field.not_ is not None:
        descriptor["not"] = emit_field(field.not_)

    if field.any_of:
        descriptor["anyOf"] = [emit_field(branch) for branch in field.any_of]

    if field.one_of:
        descriptor["oneOf"] = [emit_field(branch) for branch in field.one_of]

    if field.all_of:
        descriptor["allOf"] = [emit_field(branch) for branch in field.all_of]

    return descriptor


def emit_string(constraints: StringConstraints | None) -> FieldDescriptor:
    if constraints is None:
        return {}

    descriptor: FieldDescriptor = {
        "minLength": constraints.min_length,
        "maxLength": constraints.max_length,
        "pattern": constraints.pattern,
        "format": constraints.format,
        "enum": list(constraints.enum) or None,
        "const": constraints.const,
    }

    return remove_none(descriptor)


def emit_numeric(constraints: NumberConstraints | None) -> FieldDescriptor:
    if constraints is None:
        return {}

    descriptor: FieldDescriptor = {
        "minimum": constraints.minimum,
        "maximum": constraints.maximum,
        "exclusiveMinimum": constraints.exclusive_minimum,
        "exclusiveMaximum": constraints.exclusive_maximum,
        "multipleOf": constraints.multiple_of,
        "const": constraints.const,
    }

    return {
        key: emit_number(value) for key, value in remove_none(descriptor).items()
    }


def emit_bool(constraints: BoolConstraints | None) -> FieldDescriptor:
    if constraints is None or constraints.const is None:
        return {}

    return {"const": constraints.const}


def emit_array(constraints: ArrayConstraints | None) -> FieldDescriptor:
    if constraints is None:
        return {}

    descriptor: FieldDescriptor = remove_none({
        "minItems": constraints.min_items,
        "maxItems": constraints.max_items,
    })

    if constraints.unique_items:
        descriptor["uniqueItems"] = True

    if constraints.items is not None:
        descriptor["items"] = emit_field(constraints.items)

    return descriptor


def emit_map(constraints: MapConstraints | None) -> FieldDescriptor:
    if constraints is None:
        return {}

    return remove_none({
        "minProperties": constraints.min_properties,
        "maxProperties": constraints.max_properties,
    })


def remove_none(descriptor: Dict[str, Any]) -> Dict[str, Any]:
    return {
        key: value for key, value in descriptor.items() if value is not None
    }


def to_json_schema(model: type) -> ObjectDescriptor:
    return emit(build_schema(model))


def emit_json(model: type, sort_keys: bool | None = None) -> bytes:
    if sort_keys is None:
        sort_keys = get_env().TAGSCHEMA_SORT_SCHEMA_KEYS

    options = orjson.OPT_INDENT_2
    if sort_keys:
        options |= orjson.OPT_SORT_KEYS

    return orjson.dumps(to_json_schema(model), option=options)
