import logging
from typing import Any, Callable, Dict

from tagschema.builder import build_schema
from tagschema.exceptions import SchemaTypeError
from tagschema.introspection import is_frozen, is_struct
from tagschema.models.schema import FieldSchema, ObjectSchema
from tagschema.validation.values import is_zero

logger = logging.getLogger(__name__)


def parse_bool(literal: str) -> bool:
    return literal == "true"


DEFAULT_PARSERS: Dict[str, Callable[[str], Any]] = {
    "string": str,
    "integer": int,
    "number": float,
    "boolean": parse_bool,
}


def parse_default(field: FieldSchema) -> Any:
    parser = DEFAULT_PARSERS.get(field.kind)
    if parser is None or field.default is None:
        return None

    try:
        return parser(field.default)

    except ValueError:
        logger.debug(
            "Ignoring unparsable default %r for %s",
            field.default,
            field.wire_name,
        )

        return None


def apply_defaults(value: Any, schema: ObjectSchema | None = None):
    if value is None:
        return

    if not is_struct(value):
        raise SchemaTypeError(
            f"apply_defaults expects a msgspec.Struct instance, got {type(value).__name__}"
        )

    if schema is None:
        schema = build_schema(type(value))

    fill_defaults(value, schema)


def fill_defaults(value: Any, schema: ObjectSchema):
    frozen = is_frozen(type(value))

    if frozen and any(field.default is not None for field in schema.fields.values()):
        logger.debug(
            "Skipping defaults for frozen %s",
            type(value).__name__,
        )

    for field in schema.fields.values():
        current = getattr(value, field.name, None)

        if not frozen and field.default is not None and is_zero(current):
            default = parse_default(field)
            if default is not None:
                setattr(value, field.name, default)
                current = default

        if field.nested is not None and is_struct(current):
            fill_defaults(current, field.nested)
