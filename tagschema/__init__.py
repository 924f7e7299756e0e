from .builder import build_schema as build_schema
from .defaults import apply_defaults as apply_defaults
from .docs import emit as emit
from .docs import emit_json as emit_json
from .docs import to_json_schema as to_json_schema
from .env import Env as Env
from .exceptions import ParseError as ParseError
from .exceptions import SchemaBuildError as SchemaBuildError
from .exceptions import SchemaTypeError as SchemaTypeError
from .exceptions import TagSchemaError as TagSchemaError
from .exceptions import ValidationFailed as ValidationFailed
from .models.model import Model as Model
from .models.schema import FieldSchema as FieldSchema
from .models.schema import ObjectSchema as ObjectSchema
from .models.validation import ValidationError as ValidationError
from .models.validation import ValidationErrors as ValidationErrors
from .parsing import parse as parse
from .tags import Tag as Tag
from .validation import validate as validate
from .validation import validate_or_raise as validate_or_raise
