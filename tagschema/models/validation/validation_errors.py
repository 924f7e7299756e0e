from typing import Any, Iterator, List

import orjson
from pydantic import BaseModel, Field, RootModel, StrictStr


class ValidationError(BaseModel):
    path: StrictStr = Field(serialization_alias="field")
    message: StrictStr
    value: Any = None

    def __str__(self) -> str:
        return f'field "{self.path}": {self.message} (got {self.value!r})'


class ValidationErrors(RootModel):
    root: List[ValidationError] = Field(default_factory=list)

    def __iter__(self) -> Iterator[ValidationError]:
        return iter(self.root)

    def __getitem__(self, index: int) -> ValidationError:
        return self.root[index]

    def __len__(self) -> int:
        return len(self.root)

    def __str__(self) -> str:
        return "; ".join(str(error) for error in self.root)

    def add(self, path: str, message: str, value: Any = None):
        self.root.append(
            ValidationError(
                path=path,
                message=message,
                value=value,
            )
        )

    def extend(self, errors: "ValidationErrors"):
        self.root.extend(errors.root)

    def has(self, path: str) -> bool:
        return any(error.path == path for error in self.root)

    def paths(self) -> List[str]:
        return [error.path for error in self.root]

    def to_json(self) -> bytes:
        return orjson.dumps(
            self.model_dump(by_alias=True, exclude_none=True),
            default=repr,
        )
