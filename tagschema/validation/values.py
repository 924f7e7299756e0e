from collections.abc import Mapping, Sized
from typing import Any

import msgspec


def is_zero(value: Any) -> bool:
    if value is None:
        return True

    elif isinstance(value, bool):
        return value is False

    elif isinstance(value, (int, float)):
        return value == 0

    elif isinstance(value, msgspec.Struct):
        return all(
            is_zero(getattr(value, name)) for name in value.__struct_fields__
        )

    elif isinstance(value, (str, bytes, Mapping, Sized)):
        return len(value) == 0

    return False


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def same_item(first: Any, second: Any) -> bool:
    if isinstance(first, bool) is not isinstance(second, bool):
        return False

    return first == second


def join_path(parent: str, child: str) -> str:
    if not parent:
        return child

    return f"{parent}.{child}"


def format_number(value: float) -> str:
    if float(value).is_integer() and abs(value) < 1e15:
        return str(int(value))

    return repr(float(value))
