from .emit_schema import emit as emit
from .emit_schema import emit_json as emit_json
from .emit_schema import to_json_schema as to_json_schema
from .parsed_types import FieldDescriptor as FieldDescriptor
from .parsed_types import ObjectDescriptor as ObjectDescriptor
