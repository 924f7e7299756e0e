import logging
from typing import Annotated, List

import msgspec

from tagschema import (
    Model,
    ParseError,
    Tag,
    ValidationFailed,
    emit_json,
)
from tagschema.logging_utils import configure_logging

logger = logging.getLogger(__name__)


class Address(Model, kw_only=True):
    street: Annotated[str, Tag("required,minLength=3,maxLength=100")] = ""
    city: Annotated[str, Tag("required,minLength=2,maxLength=50")] = ""


class User(Model, kw_only=True):
    __schema__ = Tag("title=User,description=A registered user")

    name: Annotated[str, Tag("required,minLength=2,maxLength=50")] = ""
    email: Annotated[str, Tag("required,format=email")] = ""
    age: Annotated[int, Tag("minimum=0,maximum=120")] = 0
    score: Annotated[float, Tag("minimum=0,maximum=100,multipleOf=0.5")] = 0.0
    tags: Annotated[List[str], Tag("minItems=1,maxItems=10,uniqueItems")] = []
    role: Annotated[str, Tag("default=viewer,enum=admin|editor|viewer")] = ""
    address: Address = msgspec.field(default_factory=Address)


VALID_USER = b"""{
    "name": "Alice",
    "email": "alice@example.com",
    "age": 30,
    "score": 87.5,
    "tags": ["python", "schema"],
    "address": {"street": "Via Roma 1", "city": "Rome"}
}"""

INVALID_USER = b"""{
    "name": "A",
    "email": "not-an-email",
    "age": 200,
    "score": 87.3,
    "tags": ["python", "python"],
    "role": "superuser",
    "address": {"street": "X", "city": "R"}
}"""


def run():
    print(emit_json(User).decode())

    user = User.parse(VALID_USER)
    print(f"Parsed {user.name} with role {user.role}")

    try:
        User.parse(INVALID_USER)

    except ValidationFailed as err:
        print(f"Validation failed with {len(err.errors)} error(s):")
        for error in err.errors:
            print(f"  [{error.path}] {error.message}")

    try:
        User.parse(b'{"name": "Bob", "age": "old"}')

    except ParseError as err:
        logger.warning("Could not parse user: %s", err)

    bob = User(
        name="Bob",
        email="bob@example.com",
        age=42,
        score=50.0,
        tags=["test"],
        role="admin",
        address=Address(street="Main St", city="NY"),
    )

    errors = bob.validate()
    print("Bob is valid" if len(errors) == 0 else errors.to_json().decode())


if __name__ == "__main__":
    configure_logging()
    run()
