import logging
from typing import Any, Tuple

from tagschema.exceptions import SchemaBuildError
from tagschema.introspection import (
    FieldDescription,
    describe_type,
    element_type,
    is_mapping_type,
    is_sequence_type,
    is_struct_type,
    unwrap_type,
)
from tagschema.models.schema import (
    FieldKind,
    FieldSchema,
    ObjectSchema,
)
from tagschema.tags import (
    TagOptions,
    has_option,
    options_with_prefix,
    parse_tag,
)

from .constraint_builders import (
    build_array_constraints,
    build_bool_constraints,
    build_map_constraints,
    build_number_constraints,
    build_string_constraints,
)

logger = logging.getLogger(__name__)

EXCLUDED_WIRE_NAME = "-"
COMPOSITION_KEYS = ("anyOf", "oneOf", "allOf")


def build_schema(model: type) -> ObjectSchema:
    return build_object_schema(model, ())


def build_object_schema(model: Any, building: Tuple[type, ...]) -> ObjectSchema:
    if model in building:
        raise SchemaBuildError(
            f"self-referential type {model.__name__} is not supported"
        )

    try:
        description = describe_type(model)

    except TypeError as err:
        raise SchemaBuildError(str(err)) from err

    schema = ObjectSchema()
    apply_metadata(schema, description.metadata_tag)

    for field in description.fields:
        wire_name = resolve_wire_name(field)
        if wire_name == EXCLUDED_WIRE_NAME:
            continue

        try:
            schema.fields[wire_name] = build_field_schema(
                field,
                wire_name,
                building + (model,),
            )

        except SchemaBuildError as err:
            raise SchemaBuildError(str(err), field=field.name) from err

    logger.debug(
        "Built schema for %s with %d field(s)",
        description.name,
        len(schema.fields),
    )

    return schema


def apply_metadata(schema: ObjectSchema, raw: str):
    options = parse_tag(raw)

    if "title" in options:
        schema.title = options["title"]

    if "description" in options:
        schema.description = options["description"]

    if "additionalProperties" in options:
        schema.additional_properties = options["additionalProperties"] == "true"

    for source, dependents in options_with_prefix(options, "dependentRequired:"):
        schema.dependent_required[source] = dependents.split("|")


def resolve_wire_name(field: FieldDescription) -> str:
    wire_name = field.wire_tag.split(",")[0]
    return wire_name or field.name


def resolve_kind(declared_type: Any) -> FieldKind:
    if declared_type is bool:
        return "boolean"

    elif is_struct_type(declared_type):
        return "object"

    elif isinstance(declared_type, type) and issubclass(declared_type, str):
        return "string"

    elif isinstance(declared_type, type) and issubclass(declared_type, int):
        return "integer"

    elif isinstance(declared_type, type) and issubclass(declared_type, float):
        return "number"

    elif is_mapping_type(declared_type):
        return "object"

    elif is_sequence_type(declared_type):
        return "array"

    return "any"


def is_required(field: FieldDescription, options: TagOptions) -> bool:
    explicit = options.get("required")
    if explicit == "true":
        return True

    return (
        not field.optional
        and explicit != "false"
        and has_option(field.schema_tag, "required")
    )


def build_field_schema(
    field: FieldDescription,
    wire_name: str,
    building: Tuple[type, ...],
) -> FieldSchema:
    options = parse_tag(field.schema_tag)
    required = is_required(field, options)
    kind = resolve_kind(field.declared_type)

    schema = FieldSchema(
        kind=kind,
        name=field.name,
        wire_name=wire_name,
        default=options.get("default"),
        required=required,
        nullable=options.get("nullable") == "true",
    )

    if kind == "string":
        schema.string = build_string_constraints(options, required)

    elif kind in ("integer", "number"):
        schema.number = build_number_constraints(options, required)

    elif kind == "boolean":
        schema.boolean = build_bool_constraints(options, required)

    elif kind == "array":
        schema.array = build_array_constraints(options, required)
        schema.array.items = build_items_schema(
            field.declared_type,
            options,
            building,
        )

    elif kind == "object" and is_struct_type(field.declared_type):
        schema.nested = build_object_schema(field.declared_type, building)

    elif kind == "object":
        schema.map = build_map_constraints(options, required)

    apply_composition(schema, options)

    return schema


def build_branch_schema(raw: str) -> FieldSchema:
    options = parse_tag(raw)

    branch = FieldSchema(
        kind="any",
        string=build_string_constraints(options, False),
        number=build_number_constraints(options, False, lenient_const=True),
        boolean=build_bool_constraints(options, False),
    )

    if options.get("const") not in ("true", "false"):
        branch.boolean.const = None

    return branch


def build_items_schema(
    declared_type: Any,
    options: TagOptions,
    building: Tuple[type, ...],
) -> FieldSchema | None:
    item_type, _, item_tags = unwrap_type(element_type(declared_type))

    rules = [
        f"{key}={value}" for key, value in options_with_prefix(options, "items:")
    ]
    rules.extend(item_tags)

    if not rules and not is_struct_type(item_type):
        return None

    items = build_branch_schema(",".join(rules))

    item_kind = resolve_kind(item_type)
    if item_kind in ("string", "integer", "number", "boolean"):
        items.kind = item_kind

    elif is_struct_type(item_type):
        items.kind = "object"
        items.nested = build_object_schema(item_type, building)

    return items


def apply_composition(schema: FieldSchema, options: TagOptions):
    if "not" in options:
        schema.not_ = build_branch_schema(options["not"])

    branches = {
        key: [
            build_branch_schema(raw) for raw in options[key].split(";")
        ]
        for key in COMPOSITION_KEYS
        if key in options
    }

    schema.any_of = branches.get("anyOf", [])
    schema.one_of = branches.get("oneOf", [])
    schema.all_of = branches.get("allOf", [])
