"""Tests for JSON schema generation."""

import json

from shouldcheck.schema import generate_json_schema, write_json_schema


def test_schema_describes_format_section():
    schema = generate_json_schema()
    assert "format" in schema["properties"]
    assert "FormatConfig" in schema["$defs"]
    props = schema["$defs"]["FormatConfig"]["properties"]
    assert props["element_indent"]["default"] == 14


def test_write_json_schema_creates_parents(tmp_path):
    out = tmp_path / "nested" / "schema.json"
    write_json_schema(out)
    assert json.loads(out.read_text()) == generate_json_schema()


def test_schema_declares_dialect_and_rejects_unknown_keys():
    schema = generate_json_schema()
    assert schema["$schema"] == "https://json-schema.org/draft/2020-12/schema"
    assert schema["$defs"]["FormatConfig"]["additionalProperties"] is False
