"""Exceptions raised by tagschema."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tagschema.models.validation import ValidationErrors


class TagSchemaError(Exception):
    """Base exception for tagschema errors."""
    pass


class SchemaBuildError(TagSchemaError):
    """Raised when a schema cannot be derived from a type."""

    def __init__(self, message: str, field: str | None = None) -> None:
        if field:
            message = f'field "{field}": {message}'

        super().__init__(message)
        self.field = field


class SchemaTypeError(TagSchemaError, TypeError):
    """Raised when a value is not an instance of a struct type."""
    pass


class ParseError(TagSchemaError):
    """Raised when raw input cannot be decoded into the target type."""
    pass


class ValidationFailed(TagSchemaError):
    """Raised by the raising entry points when a value has violations."""

    def __init__(self, errors: "ValidationErrors") -> None:
        super().__init__(str(errors))
        self.errors = errors
