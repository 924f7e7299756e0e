from .formats import FORMAT_CHECKERS as FORMAT_CHECKERS
from .formats import check_format as check_format
from .validate import validate as validate
from .validate import validate_or_raise as validate_or_raise
from .values import is_zero as is_zero
