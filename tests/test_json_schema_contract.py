"""Contract tests for generated JSON Schemas."""

from __future__ import annotations

import json
from dataclasses import asdict
from datetime import date

import pytest
from jsonschema import Draft202012Validator, ValidationError

from roster_parser import parse_roster
from roster_parser.export import document_to_dict
from roster_parser.models import ParseReport
from roster_parser.schemas import (
    OUTPUT_SCHEMA_NAME,
    REPORT_SCHEMA_NAME,
    build_output_schema,
    build_report_schema,
    render_schemas,
    validate_output,
)


def test_output_schema_is_valid_and_accepts_parsed_payload(sample_roster: str) -> None:
    schema = build_output_schema()
    payload = document_to_dict(parse_roster(sample_roster, "Fallback", date(2020, 1, 1)))

    Draft202012Validator.check_schema(schema)
    Draft202012Validator(schema).validate(payload)
    validate_output(payload)


def test_output_schema_accepts_minimal_empty_payload() -> None:
    payload = document_to_dict(parse_roster("", "Empty", date(2025, 1, 1)))

    validate_output(payload)


def test_output_schema_rejects_unknown_record_fields(sample_roster: str) -> None:
    payload = document_to_dict(parse_roster(sample_roster, "Fallback", date(2020, 1, 1)))
    payload["records"][0]["nickname"] = "x"

    with pytest.raises(ValidationError):
        validate_output(payload)


def test_output_schema_rejects_unknown_grammar() -> None:
    payload = document_to_dict(parse_roster("", "Empty", date(2025, 1, 1)))
    payload["grammar"] = "html"

    with pytest.raises(ValidationError):
        validate_output(payload)


def test_report_schema_is_valid_and_accepts_report_payload() -> None:
    schema = build_report_schema()
    payload = asdict(ParseReport(source="inline.txt"))

    Draft202012Validator.check_schema(schema)
    Draft202012Validator(schema).validate(payload)


def test_rendered_schemas_are_stable_json() -> None:
    rendered = render_schemas()

    assert set(rendered) == {OUTPUT_SCHEMA_NAME, REPORT_SCHEMA_NAME}
    output = json.loads(rendered[OUTPUT_SCHEMA_NAME])
    assert set(output["$defs"]) == {"Record", "Group", "ParseReport"}
    assert output["properties"]["records"]["items"] == {"$ref": "#/$defs/Record"}
    assert rendered == render_schemas()
