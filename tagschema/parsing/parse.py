import logging
from typing import Any, Dict, Type, TypeVar

import msgspec
import orjson

from tagschema.builder import build_schema
from tagschema.defaults import apply_defaults
from tagschema.exceptions import ParseError, ValidationFailed
from tagschema.models.schema import ObjectSchema
from tagschema.validation import validate
from tagschema.validation.values import join_path

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=msgspec.Struct)


def parse(model: Type[T], data: bytes | str) -> T:
    """Decodes JSON ``data`` into ``model``, fills declared defaults and
    validates the result.

    Raises ``ParseError`` when the payload cannot be decoded or converted,
    or carries keys unknown to a model declaring
    ``additionalProperties=false``. Raises ``ValidationFailed`` when the
    decoded value violates its constraints.
    """
    schema = build_schema(model)

    try:
        raw = orjson.loads(data)

    except orjson.JSONDecodeError as err:
        logger.info("Could not decode %s payload: %s", model.__name__, err)
        raise ParseError(f"invalid JSON for {model.__name__}: {err}") from err

    if not isinstance(raw, dict):
        raise ParseError(
            f"expected a JSON object for {model.__name__}, got {type(raw).__name__}"
        )

    check_unknown_keys(raw, schema, model.__name__, "")

    try:
        value = msgspec.convert(raw, type=model)

    except msgspec.ValidationError as err:
        logger.info("Could not convert payload to %s: %s", model.__name__, err)
        raise ParseError(str(err)) from err

    apply_defaults(value, schema)

    errors = validate(value, schema)
    if len(errors) > 0:
        raise ValidationFailed(errors)

    return value


def check_unknown_keys(
    raw: Dict[str, Any],
    schema: ObjectSchema,
    model_name: str,
    path: str,
    inherited: bool = False,
):
    """Rejects keys absent from ``schema`` wherever it disallows additional
    properties, descending into nested structs and arrays of structs. A
    strict parent also applies to nested structs that leave
    ``additionalProperties`` unset."""
    strict = schema.additional_properties is False or (
        inherited and schema.additional_properties is None
    )

    if strict:
        unknown = [key for key in raw if key not in schema.fields]
        if unknown:
            logger.info(
                "Rejected unknown keys %s at %s for %s",
                unknown,
                path or "<root>",
                model_name,
            )

            raise ParseError(
                f"additional properties not allowed for {path or model_name}: "
                + ", ".join(repr(key) for key in unknown)
            )

    for wire_name, field in schema.fields.items():
        child = raw.get(wire_name)
        child_path = join_path(path, wire_name)

        if field.nested is not None and isinstance(child, dict):
            check_unknown_keys(
                child,
                field.nested,
                model_name,
                child_path,
                strict,
            )

        elif (
            field.array is not None
            and field.array.items is not None
            and field.array.items.nested is not None
            and isinstance(child, list)
        ):
            for index, item in enumerate(child):
                if isinstance(item, dict):
                    check_unknown_keys(
                        item,
                        field.array.items.nested,
                        model_name,
                        f"{child_path}[{index}]",
                        strict,
                    )
