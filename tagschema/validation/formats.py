import ipaddress
import re
from types import MappingProxyType
from typing import Callable, Mapping

FormatChecker = Callable[[str], bool]


def _regex(pattern: str, flags: int = 0) -> FormatChecker:
    compiled = re.compile(pattern, flags)
    return lambda value: compiled.fullmatch(value) is not None


def _ip_address(version: int) -> FormatChecker:
    def check(value: str) -> bool:
        try:
            return ipaddress.ip_address(value).version == version

        except ValueError:
            return False

    return check


FORMAT_CHECKERS: Mapping[str, FormatChecker] = MappingProxyType({
    "email": _regex(r"[a-zA-Z0-9._%+\-]+@[a-zA-Z0-9.\-]+\.[a-zA-Z]{2,}"),
    "uri": _regex(r"[a-zA-Z][a-zA-Z0-9+\-.]*://\S*"),
    "date": _regex(r"\d{4}-\d{2}-\d{2}"),
    "time": _regex(r"\d{2}:\d{2}:\d{2}(\.\d+)?(Z|[+-]\d{2}:\d{2})?"),
    "date-time": _regex(
        r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d+)?(Z|[+-]\d{2}:\d{2})"
    ),
    "uuid": _regex(
        r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}",
        re.IGNORECASE,
    ),
    "ipv4": _ip_address(4),
    "ipv6": _ip_address(6),
})


def check_format(name: str, value: str) -> bool | None:
    """Returns None when ``name`` is not a known format."""
    checker = FORMAT_CHECKERS.get(name)
    if checker is None:
        return None

    return checker(value)
