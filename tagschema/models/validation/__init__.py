from .validation_errors import ValidationError as ValidationError
from .validation_errors import ValidationErrors as ValidationErrors
