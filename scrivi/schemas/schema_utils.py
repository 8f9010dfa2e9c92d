"""Shared checks used when parsing schema-tagged JSON documents."""

from __future__ import annotations

from scrivi.errors import ErrorCode, ScriviError
from scrivi.jsondoc import JsonDoc, parse_json


def require_field(doc: JsonDoc, key: str) -> None:
    """Raise a validation error if key is missing from doc."""
    if not doc.contains(key):
        raise ScriviError(ErrorCode.VALIDATION_ERROR, f"missing required field: {key}")


def parse_and_validate_schema(text: str | bytes, expected_schema: str) -> JsonDoc:
    """Parse JSON and check that its "schema" tag equals expected_schema."""
    doc = parse_json(text)
    schema = doc.get_string("schema")
    if schema != expected_schema:
        raise ScriviError(ErrorCode.VALIDATION_ERROR, f"unexpected schema: {schema}")
    return doc