import pytest

from scrivi.errors import ErrorCode, ScriviError
from scrivi.jsondoc import JsonDoc
from scrivi.schemas.schema_utils import parse_and_validate_schema, require_field


def test_require_field_present_passes_through():
    doc = JsonDoc()
    doc.set_string("title", "x")
    assert require_field(doc, "title") is None
    assert doc.get_string("title") == "x"


def test_require_field_missing_raises():
    with pytest.raises(ScriviError) as info:
        require_field(JsonDoc(), "title")
    assert (info.value.code, info.value.message) == (
        ErrorCode.VALIDATION_ERROR,
        "missing required field: title",
    )


def test_parse_and_validate_schema_accepts_matching_tag():
    doc = parse_and_validate_schema('{"schema": "a.v1", "n": 3}', "a.v1")
    assert doc.get_int("n") == 3


@pytest.mark.parametrize(
    "text, code, message",
    [
        ('{"schema": "b.v1"}', ErrorCode.VALIDATION_ERROR, "unexpected schema: b.v1"),
        ("{}", ErrorCode.VALIDATION_ERROR, "unexpected schema: "),
        ("{not json", ErrorCode.PARSE_ERROR, None),
    ],
)
def test_parse_and_validate_schema_rejects(text, code, message):
    with pytest.raises(ScriviError) as info:
        parse_and_validate_schema(text, "a.v1")
    assert info.value.code is code
    if message is not None:
        assert info.value.message == message