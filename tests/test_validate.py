from typing import Annotated, Any, Dict, List

import msgspec
import pytest

from tagschema import (
    Model,
    SchemaTypeError,
    Tag,
    ValidationFailed,
    build_schema,
    validate,
    validate_or_raise,
)


class Text(Model, kw_only=True):
    value: Annotated[str, Tag("minLength=2,maxLength=4")] = ""


class Required(Model, kw_only=True):
    name: Annotated[str, Tag("required,minLength=3")] = ""


class Patterned(Model, kw_only=True):
    code: Annotated[str, Tag("pattern=^[A-Z]{2}[0-9]+$")] = ""
    broken: Annotated[str, Tag("pattern=[unclosed")] = ""


class Formatted(Model, kw_only=True):
    email: Annotated[str, Tag("format=email")] = ""
    id: Annotated[str, Tag("format=uuid")] = ""
    day: Annotated[str, Tag("format=date")] = ""
    host: Annotated[str, Tag("format=ipv4")] = ""
    other: Annotated[str, Tag("format=unknown-format")] = ""


class Choice(Model, kw_only=True):
    role: Annotated[str, Tag("enum=admin|editor|viewer")] = ""
    kind: Annotated[str, Tag("const=fixed")] = ""


class RequiredChoice(Model, kw_only=True):
    status: Annotated[str, Tag("required,enum=active|inactive")] = ""


class Multiple(Model, kw_only=True):
    value: Annotated[float, Tag("multipleOf=0.1")] = 0.0


class Exclusive(Model, kw_only=True):
    value: Annotated[float, Tag("exclusiveMinimum=0,exclusiveMaximum=10")] = 0.5


class Inclusive(Model, kw_only=True):
    value: Annotated[float, Tag("minimum=0,maximum=10")] = 0.0


class Constants(Model, kw_only=True):
    count: Annotated[int, Tag("const=3")] = 3
    enabled: Annotated[bool, Tag("const=true")] = True


class Optionals(Model, kw_only=True):
    nickname: Annotated[str | None, Tag("minLength=5")] = None
    code: Annotated[str | None, Tag("required,minLength=5")] = None
    nullable: Annotated[str | None, Tag("required,nullable")] = None


class Items(Model, kw_only=True):
    values: Annotated[
        List[int], Tag("minItems=1,maxItems=4,uniqueItems,items:minimum=1")
    ] = []


class Mixed(Model, kw_only=True):
    values: Annotated[List[Any], Tag("uniqueItems")] = []


class Words(Model, kw_only=True):
    words: Annotated[List[str], Tag("items:minLength=5")] = []


class RequiredList(Model, kw_only=True):
    values: Annotated[List[str], Tag("required")] = []


class Labels(Model, kw_only=True):
    labels: Annotated[Dict[str, str], Tag("minProperties=1,maxProperties=2")] = {}


class RequiredLabels(Model, kw_only=True):
    labels: Annotated[Dict[str, str], Tag("required")] = {}


class Leaf(Model, kw_only=True):
    value: Annotated[int, Tag("maximum=10")] = 0


class Middle(Model, kw_only=True):
    inner: Leaf = msgspec.field(default_factory=Leaf)


class Outer(Model, kw_only=True):
    mid: Middle = msgspec.field(default_factory=Middle)


class Tagged(Model, kw_only=True):
    name: Annotated[str, Tag("required,minLength=2")] = ""


class Tags(Model, kw_only=True):
    tags: List[Tagged] = []


class Composed(Model, kw_only=True):
    x: Annotated[str, Tag("anyOf=minLength=5;pattern=^[0-9]+$")] = ""
    y: Annotated[str, Tag("oneOf=minLength=5;pattern=^[0-9]+$")] = ""
    z: Annotated[str, Tag("not=minLength=5")] = ""
    w: Annotated[str, Tag("allOf=minLength=2;maxLength=4")] = ""


class NumberComposed(Model, kw_only=True):
    level: Annotated[int, Tag("anyOf=maximum=3;minimum=10")] = 0


class Dependent(Model, kw_only=True):
    __schema__ = Tag("dependentRequired:billing_id=credit_card|billing_addr")

    billing_id: str = ""
    credit_card: str = ""
    billing_addr: str = ""


class UnknownDependent(Model, kw_only=True):
    __schema__ = Tag("dependentRequired:missing=name,dependentRequired:name=ghost")

    name: str = ""


class FourFailures(Model, kw_only=True):
    first: Annotated[str, Tag("required")] = ""
    second: Annotated[str | None, Tag("required")] = None
    age: Annotated[int, Tag("minimum=18")] = 0
    code: Annotated[str, Tag("minLength=4")] = ""


class Renamed(Model, kw_only=True):
    first_name: Annotated[str, Tag("required")] = msgspec.field(
        default="", name="firstName"
    )


class Untagged(Model, kw_only=True):
    name: str = ""
    count: int = 0


class Typed(Model, kw_only=True):
    count: int = 0
    name: str = ""


def test_length_counts_code_points():
    assert len(validate(Text(value="😀😀😀"))) == 0
    assert len(validate(Text(value="ab"))) == 0
    assert len(validate(Text(value="abcd"))) == 0

    errors = validate(Text(value="😀😀😀😀😀"))
    assert errors.paths() == ["value"]
    assert errors[0].message == "must be at most 4 characters long (got 5)"

    errors = validate(Text(value="a"))
    assert errors[0].message == "must be at least 2 characters long (got 1)"


def test_required_empty_string_stops_field():
    errors = validate(Required())

    assert len(errors) == 1
    assert errors[0].path == "name"
    assert errors[0].message == "field is required"


def test_pattern():
    assert len(validate(Patterned(code="AB123"))) == 0

    errors = validate(Patterned(code="ab123"))
    assert errors[0].message == "must match pattern '^[A-Z]{2}[0-9]+$'"


def test_pattern_search_is_unanchored():
    class Contains(Model, kw_only=True):
        code: Annotated[str, Tag("pattern=[0-9]")] = ""

    schema = build_schema(Contains)

    assert len(validate(Contains(code="abc1def"), schema)) == 0


def test_malformed_pattern_is_a_validation_error():
    errors = validate(Patterned(broken="anything"))

    assert errors.paths() == ["broken"]
    assert errors[0].message.startswith("invalid pattern '[unclosed'")


def test_formats():
    valid = Formatted(
        email="ada@example.com",
        id="123e4567-e89b-12d3-a456-426614174000",
        day="2024-02-29",
        host="192.168.0.1",
        other="anything",
    )
    assert len(validate(valid)) == 0

    invalid = Formatted(
        email="not-an-email",
        id="123",
        day="29/02/2024",
        host="999.1.1.1",
    )
    errors = validate(invalid)

    assert errors.paths() == ["email", "id", "day", "host"]
    assert errors[0].message == "must be a valid email"
    assert errors[3].message == "must be a valid ipv4"


def test_optional_empty_string_skips_string_checks():
    assert len(validate(Choice())) == 0
    assert len(validate(Patterned())) == 0
    assert len(validate(Formatted())) == 0


def test_enum_and_const():
    assert len(validate(Choice(role="editor", kind="fixed"))) == 0

    errors = validate(Choice(role="owner", kind="other"))
    assert errors.paths() == ["role", "kind"]
    assert errors[0].message == "must be one of ['admin', 'editor', 'viewer']"
    assert errors[1].message == "must equal 'fixed'"


def test_required_enum():
    assert validate(RequiredChoice()).paths() == ["status"]
    assert validate(RequiredChoice(status="unknown")).paths() == ["status"]
    assert len(validate(RequiredChoice(status="active"))) == 0


@pytest.mark.parametrize("value", [0.3, 0.7, 1.0, 0, 3])
def test_multiple_of_tolerates_float_error(value: float):
    assert len(validate(Multiple(value=value))) == 0


def test_multiple_of_rejects():
    errors = validate(Multiple(value=0.35))

    assert errors.paths() == ["value"]
    assert errors[0].message == "must be a multiple of 0.1 (got 0.35)"


def test_exclusive_bounds():
    assert validate(Exclusive(value=0))[0].message == "must be > 0 (got 0)"
    assert len(validate(Exclusive(value=0.001))) == 0
    assert validate(Exclusive(value=10))[0].message == "must be < 10 (got 10)"
    assert len(validate(Exclusive(value=9.999))) == 0


def test_inclusive_bounds():
    assert len(validate(Inclusive(value=0))) == 0
    assert len(validate(Inclusive(value=10))) == 0
    assert validate(Inclusive(value=-1))[0].message == "must be >= 0 (got -1)"
    assert validate(Inclusive(value=10.5))[0].message == "must be <= 10 (got 10.5)"


def test_number_and_bool_const():
    assert len(validate(Constants())) == 0

    errors = validate(Constants(count=4, enabled=False))
    assert errors.paths() == ["count", "enabled"]
    assert errors[0].message == "must equal 3"
    assert errors[1].message == "must equal true"


def test_absent_optional_reference_is_not_checked():
    errors = validate(Optionals(code="abcde"))

    assert len(errors) == 0


def test_absent_required_reference_reports_once():
    errors = validate(Optionals())

    assert errors.paths() == ["code"]
    assert errors[0].message == "field is required"


def test_present_reference_is_checked():
    errors = validate(Optionals(nickname="abc", code="abcde"))

    assert errors.paths() == ["nickname"]


def test_nullable_absent_value_passes_even_when_required():
    assert not validate(Optionals(code="abcde")).has("nullable")


def test_unique_items():
    assert len(validate(Items(values=[1, 2, 3]))) == 0

    errors = validate(Items(values=[1, 2, 2]))
    assert errors.paths() == ["values"]
    assert errors[0].message == "items must be unique (duplicate: 2)"


def test_unique_items_reports_first_duplicate_only():
    errors = validate(Items(values=[1, 1, 2, 2]))

    assert len(errors) == 1
    assert errors[0].value == 1


def test_unique_items_keeps_booleans_apart_from_numbers():
    assert len(validate(Mixed(values=[1, True, 0, False]))) == 0
    assert len(validate(Mixed(values=[{"a": 1}, {"a": 1}]))) == 1


def test_item_counts_and_item_schema():
    errors = validate(Items(values=[0, 2, 3, 4, 5]))

    assert errors.paths() == ["values", "values[0]"]
    assert errors[0].message == "must have at most 4 items (got 5)"
    assert errors[1].message == "must be >= 1 (got 0)"

    errors = validate(Items())
    assert errors[0].message == "must have at least 1 items (got 0)"


def test_items_min_length():
    errors = validate(Words(words=["hello", "world", "hi"]))

    assert errors.has("words[2]")
    assert errors.paths() == ["words[2]"]


def test_required_empty_list():
    errors = validate(RequiredList())

    assert errors.paths() == ["values"]
    assert errors[0].message == "field is required (empty slice)"


def test_struct_items_are_validated_recursively():
    errors = validate(Tags(tags=[Tagged(name="ok"), Tagged(name="x"), Tagged()]))

    assert errors.paths() == ["tags[1].name", "tags[2].name"]
    assert errors[1].message == "field is required"


def test_map_property_counts():
    assert len(validate(Labels(labels={"a": "1"}))) == 0

    errors = validate(Labels(labels={"a": "1", "b": "2", "c": "3"}))
    assert errors[0].message == "must have at most 2 properties (got 3)"

    errors = validate(Labels())
    assert errors[0].message == "must have at least 1 properties (got 0)"


def test_required_empty_map():
    errors = validate(RequiredLabels())

    assert errors.paths() == ["labels"]
    assert errors[0].message == "field is required (empty map)"


def test_nested_error_paths():
    assert len(validate(Outer())) == 0

    errors = validate(Outer(mid=Middle(inner=Leaf(value=11))))
    assert errors.paths() == ["mid.inner.value"]


def test_any_of():
    assert len(validate(Composed(x="hello"))) == 0
    assert len(validate(Composed(x="123"))) == 0

    errors = validate(Composed(x="hi"))
    assert errors.paths() == ["x"]
    assert errors[0].message == "must match at least one schema in anyOf"


def test_one_of():
    assert len(validate(Composed(y="hello"))) == 0
    assert len(validate(Composed(y="123"))) == 0

    errors = validate(Composed(y="12345"))
    assert errors.paths() == ["y"]
    assert errors[0].message == "must match exactly one schema in oneOf (matched 2)"

    errors = validate(Composed(y="hi"))
    assert errors[0].message == "must match exactly one schema in oneOf (matched 0)"


def test_not():
    errors = validate(Composed(z="hello"))
    assert errors.paths() == ["z"]
    assert errors[0].message == "must not match the 'not' schema"

    assert len(validate(Composed(z="hi"))) == 0


def test_all_of():
    assert len(validate(Composed(w="abc"))) == 0

    errors = validate(Composed(w="abcdef"))
    assert errors.paths() == ["w"]
    assert errors[0].message == "must match all schemas in allOf"


def test_composition_over_numbers():
    assert len(validate(NumberComposed(level=2))) == 0
    assert len(validate(NumberComposed(level=12))) == 0
    assert validate(NumberComposed(level=5)).paths() == ["level"]


def test_dependent_required():
    assert len(validate(Dependent())) == 0
    assert len(
        validate(Dependent(billing_id="123", credit_card="visa", billing_addr="1 St"))
    ) == 0

    errors = validate(Dependent(billing_id="123", credit_card="visa"))
    assert errors.paths() == ["billing_addr"]
    assert errors[0].message == "field is required when 'billing_id' is present"

    errors = validate(Dependent(billing_id="123"))
    assert errors.paths() == ["credit_card", "billing_addr"]


def test_dependent_required_with_undeclared_fields():
    assert len(validate(UnknownDependent())) == 0

    errors = validate(UnknownDependent(name="ada"))
    assert errors.paths() == ["ghost"]


def test_all_failures_are_collected():
    errors = validate(FourFailures(code="ab"))

    assert len(errors) >= 4
    for path in ("first", "second", "age", "code"):
        assert errors.has(path)


def test_errors_use_wire_names():
    assert validate(Renamed()).paths() == ["firstName"]


def test_untagged_struct_always_passes():
    assert len(validate(Untagged())) == 0


def test_type_mismatch_is_reported():
    errors = validate(Typed(count="three", name=3))

    assert errors.paths() == ["count", "name"]
    assert errors[0].message == "must be of type integer (got str)"
    assert errors[1].message == "must be of type string (got int)"


def test_nil_value():
    errors = validate(None)

    assert len(errors) == 1
    assert errors[0].path == ""
    assert errors[0].message == "value is nil"


@pytest.mark.parametrize("value", [42, "text", [1, 2], {"a": 1}])
def test_non_struct_value_raises(value: Any):
    with pytest.raises(SchemaTypeError):
        validate(value)

    with pytest.raises(TypeError):
        validate(value)


def test_explicit_schema_is_used():
    schema = build_schema(Required)

    assert validate(Required(name="abc"), schema).paths() == []


def test_validate_or_raise():
    validate_or_raise(Required(name="abc"))

    with pytest.raises(ValidationFailed) as error:
        validate_or_raise(Required(name="ab"))

    assert error.value.errors.paths() == ["name"]
    assert 'field "name"' in str(error.value)


class Blob(Model, kw_only=True):
    data: bytearray = msgspec.field(default_factory=bytearray)
    raw: bytes = b""


class Collections(Model, kw_only=True):
    ids: Annotated[frozenset[int], Tag("minItems=1")] = frozenset()
    pairs: Annotated[tuple[int, ...], Tag("maxItems=2")] = ()


def test_bytes_like_fields_are_not_arrays():
    schema = build_schema(Blob)

    assert schema.fields["data"].kind == "any"
    assert schema.fields["raw"].kind == "any"
    assert validate(Blob(data=bytearray(b"x"), raw=b"y")).paths() == []


def test_sets_and_tuples_are_arrays():
    assert len(validate(Collections(ids=frozenset({1}), pairs=(1, 2)))) == 0

    errors = validate(Collections(pairs=(1, 2, 3)))
    assert errors.paths() == ["ids", "pairs"]
