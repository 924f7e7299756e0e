from .constraints import BoolConstraints as BoolConstraints
from .constraints import MapConstraints as MapConstraints
from .constraints import NumberConstraints as NumberConstraints
from .constraints import StringConstraints as StringConstraints
from .field_schema import ArrayConstraints as ArrayConstraints
from .field_schema import ConstraintSet as ConstraintSet
from .field_schema import FieldSchema as FieldSchema
from .field_schema import ObjectSchema as ObjectSchema
from .schema_types import NUMERIC_KINDS as NUMERIC_KINDS
from .schema_types import FieldKind as FieldKind
