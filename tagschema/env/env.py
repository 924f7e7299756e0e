from typing import Callable, Dict, Literal, Union

import msgspec
import orjson

PrimaryType = Union[str, int, float, bytes, bool]


class Env(msgspec.Struct, kw_only=True):
    TAGSCHEMA_LOG_LEVEL: Literal[
        "debug", "info", "warning", "error", "critical"
    ] = "warning"
    TAGSCHEMA_MULTIPLE_OF_TOLERANCE: float = 1e-9
    TAGSCHEMA_SORT_SCHEMA_KEYS: bool = False

    @classmethod
    def types_map(cls) -> Dict[str, Callable[[str], PrimaryType]]:
        return {
            "TAGSCHEMA_LOG_LEVEL": lambda value: value.lower(),
            "TAGSCHEMA_MULTIPLE_OF_TOLERANCE": float,
            "TAGSCHEMA_SORT_SCHEMA_KEYS": lambda value: True
            if value.lower() == "true"
            else False,
        }

    def model_dump(self):
        return msgspec.structs.asdict(self)

    def model_dump_json(self):
        return orjson.dumps(msgspec.structs.asdict(self))
