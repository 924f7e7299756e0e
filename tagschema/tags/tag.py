import msgspec


class Tag(msgspec.Struct, frozen=True):
    """Raw validation annotation attached to a field through ``Annotated``.

    >>> from typing import Annotated
    >>> class User(Model):
    ...     name: Annotated[str, Tag("required,minLength=2")] = ""
    """

    raw: str = ""

    def __str__(self) -> str:
        return self.raw
