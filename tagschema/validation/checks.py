import logging
import math
import re
from typing import Any

from tagschema.env import get_env
from tagschema.models.schema import (
    BoolConstraints,
    FieldSchema,
    NumberConstraints,
    StringConstraints,
)
from tagschema.models.validation import ValidationErrors

from .formats import check_format
from .values import format_number, is_number

logger = logging.getLogger(__name__)


def check_branch(value: Any, branch: FieldSchema, path: str) -> ValidationErrors:
    """Checks a kind-agnostic schema. Each constraint set only applies to
    runtime values of its own type."""
    errors = ValidationErrors()

    if isinstance(value, str) and branch.string is not None:
        check_string(value, branch.string, path, errors)

    elif isinstance(value, bool) and branch.boolean is not None:
        check_bool(value, branch.boolean, path, errors)

    elif is_number(value) and branch.number is not None:
        check_number(value, branch.number, path, errors)

    return errors


def type_mismatch(
    value: Any,
    field: FieldSchema,
    path: str,
    errors: ValidationErrors,
) -> bool:
    errors.add(
        path,
        f"must be of type {field.kind} (got {type(value).__name__})",
        value,
    )

    return False


def check_string(
    value: str,
    constraints: StringConstraints | None,
    path: str,
    errors: ValidationErrors,
) -> bool:
    if constraints is None:
        return True

    if constraints.required and value == "":
        errors.add(path, "field is required", value)
        return False

    # Optional and empty is always valid.
    if value == "":
        return False

    length = len(value)

    if constraints.min_length is not None and length < constraints.min_length:
        errors.add(
            path,
            f"must be at least {constraints.min_length} characters long (got {length})",
            value,
        )

    if constraints.max_length is not None and length > constraints.max_length:
        errors.add(
            path,
            f"must be at most {constraints.max_length} characters long (got {length})",
            value,
        )

    if constraints.pattern is not None:
        try:
            matched = re.search(constraints.pattern, value) is not None

        except re.error as err:
            errors.add(
                path,
                f"invalid pattern '{constraints.pattern}': {err}",
                value,
            )

        else:
            if not matched:
                errors.add(
                    path,
                    f"must match pattern '{constraints.pattern}'",
                    value,
                )

    if constraints.format is not None:
        valid = check_format(constraints.format, value)

        if valid is None:
            logger.debug(
                "Unknown format %s for %s, skipping",
                constraints.format,
                path,
            )

        elif not valid:
            errors.add(path, f"must be a valid {constraints.format}", value)

    if constraints.enum and value not in constraints.enum:
        errors.add(path, f"must be one of {constraints.enum}", value)

    if constraints.const is not None and value != constraints.const:
        errors.add(path, f"must equal '{constraints.const}'", value)

    return True


def check_number(
    value: int | float,
    constraints: NumberConstraints | None,
    path: str,
    errors: ValidationErrors,
):
    if constraints is None:
        return

    number = float(value)
    shown = format_number(number)

    if constraints.minimum is not None and number < constraints.minimum:
        errors.add(
            path,
            f"must be >= {format_number(constraints.minimum)} (got {shown})",
            value,
        )

    if constraints.maximum is not None and number > constraints.maximum:
        errors.add(
            path,
            f"must be <= {format_number(constraints.maximum)} (got {shown})",
            value,
        )

    if (
        constraints.exclusive_minimum is not None
        and number <= constraints.exclusive_minimum
    ):
        errors.add(
            path,
            f"must be > {format_number(constraints.exclusive_minimum)} (got {shown})",
            value,
        )

    if (
        constraints.exclusive_maximum is not None
        and number >= constraints.exclusive_maximum
    ):
        errors.add(
            path,
            f"must be < {format_number(constraints.exclusive_maximum)} (got {shown})",
            value,
        )

    if constraints.multiple_of is not None and constraints.multiple_of != 0:
        # Compare the quotient to its nearest integer; remainders pick up
        # float representation error (0.3 % 0.1 != 0).
        quotient = number / constraints.multiple_of
        tolerance = get_env().TAGSCHEMA_MULTIPLE_OF_TOLERANCE

        if math.fabs(quotient - round(quotient)) > tolerance:
            errors.add(
                path,
                f"must be a multiple of {format_number(constraints.multiple_of)} (got {shown})",
                value,
            )

    if constraints.const is not None and number != constraints.const:
        errors.add(
            path,
            f"must equal {format_number(constraints.const)}",
            value,
        )


def check_bool(
    value: bool,
    constraints: BoolConstraints | None,
    path: str,
    errors: ValidationErrors,
):
    if constraints is None or constraints.const is None:
        return

    if value != constraints.const:
        errors.add(
            path,
            f"must equal {str(constraints.const).lower()}",
            value,
        )

