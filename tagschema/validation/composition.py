from typing import Any, List

from tagschema.models.schema import FieldSchema
from tagschema.models.validation import ValidationErrors

from .checks import check_branch


def matches(value: Any, branch: FieldSchema, path: str) -> bool:
    return len(check_branch(value, branch, path)) == 0


def count_matches(value: Any, branches: List[FieldSchema], path: str) -> int:
    return sum(1 for branch in branches if matches(value, branch, path))


def check_composition(value: Any, field: FieldSchema, path: str) -> ValidationErrors:
    """Evaluates not/anyOf/oneOf/allOf against ``value``. Each failing
    keyword produces exactly one error at ``path``; errors from individual
    branches are not reported."""
    errors = ValidationErrors()

    if field.not_ is not None and matches(value, field.not_, path):
        errors.add(path, "must not match the 'not' schema", value)

    if field.any_of and count_matches(value, field.any_of, path) == 0:
        errors.add(path, "must match at least one schema in anyOf", value)

    if field.one_of:
        matched = count_matches(value, field.one_of, path)

        if matched != 1:
            errors.add(
                path,
                f"must match exactly one schema in oneOf (matched {matched})",
                value,
            )

    if field.all_of and count_matches(value, field.all_of, path) != len(field.all_of):
        errors.add(path, "must match all schemas in allOf", value)

    return errors
