from typing import Any, Dict, Type, TypeVar

import msgspec
import orjson

from tagschema.defaults import apply_defaults
from tagschema.docs import to_json_schema
from tagschema.models.validation import ValidationErrors
from tagschema.parsing import parse
from tagschema.validation import validate, validate_or_raise

T = TypeVar("T", bound=dict)
M = TypeVar("M", bound="Model")


class Model(msgspec.Struct):
    @classmethod
    def model_json_schema(cls) -> Dict[str, Any]:
        return to_json_schema(cls)

    @classmethod
    def parse(cls: Type[M], data: bytes | str) -> M:
        return parse(cls, data)

    @classmethod
    def defaults(cls):
        return {field.name: field.default for field in msgspec.structs.fields(cls)}

    @classmethod
    def model_fields(cls):
        return {field.name: field for field in msgspec.structs.fields(cls)}

    def validate(self) -> ValidationErrors:
        return validate(self)

    def validate_or_raise(self):
        validate_or_raise(self)

    def apply_defaults(self):
        apply_defaults(self)
        return self

    def model_dump(self, exclude_none: bool = False):
        if exclude_none:
            return {
                key: value
                for key, value in msgspec.structs.asdict(self).items()
                if value is not None
            }

        return msgspec.structs.asdict(self)

    def model_dump_json(self, exclude_none: bool = False):
        return orjson.dumps(
            self.model_dump(exclude_none=exclude_none),
            default=msgspec.to_builtins,
        )

    def model_copy(self, update: T):
        model_dict = msgspec.structs.asdict(self)
        model_dict.update(update)

        return type(self)(**model_dict)
