from .build_schema import build_branch_schema as build_branch_schema
from .build_schema import build_schema as build_schema
