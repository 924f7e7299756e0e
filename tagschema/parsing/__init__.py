from .parse import parse as parse
