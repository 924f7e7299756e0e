from .describe_type import describe_type as describe_type
from .describe_type import element_type as element_type
from .describe_type import is_frozen as is_frozen
from .describe_type import is_mapping_type as is_mapping_type
from .describe_type import is_sequence_type as is_sequence_type
from .describe_type import is_struct as is_struct
from .describe_type import is_struct_type as is_struct_type
from .describe_type import unwrap_type as unwrap_type
from .type_description import FieldDescription as FieldDescription
from .type_description import TypeDescription as TypeDescription
