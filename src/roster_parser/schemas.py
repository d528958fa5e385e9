"""JSON Schema derivation for the parser output and report dataclasses."""

from __future__ import annotations

import json
import types
from dataclasses import fields, is_dataclass
from datetime import date, datetime
from typing import Any, Union, get_args, get_origin

from jsonschema import Draft202012Validator

from roster_parser.models import Group, ParseReport, Record, RosterDocument

OUTPUT_SCHEMA_NAME = "roster-output.schema.json"
REPORT_SCHEMA_NAME = "roster-report.schema.json"
SCHEMA_DRAFT = "https://json-schema.org/draft/2020-12/schema"


def _with_nullable(schema: dict[str, Any]) -> dict[str, Any]:
    if "$ref" in schema:
        return {"anyOf": [schema, {"type": "null"}]}

    schema_type = schema.get("type")
    if isinstance(schema_type, str):
        schema["type"] = sorted({schema_type, "null"})
        return schema

    if isinstance(schema_type, list):
        schema["type"] = sorted(set(schema_type) | {"null"})
        return schema

    return {"anyOf": [schema, {"type": "null"}]}


def _schema_for_type(annotation: Any, defs: dict[str, dict[str, Any]]) -> dict[str, Any]:
    if annotation in (Any, object):
        return {}

    origin = get_origin(annotation)

    if origin in (Union, types.UnionType):
        args = list(get_args(annotation))
        has_none = any(arg is type(None) for arg in args)
        non_none = [arg for arg in args if arg is not type(None)]

        if has_none and len(non_none) == 1:
            return _with_nullable(_schema_for_type(non_none[0], defs))

        return {"anyOf": [_schema_for_type(arg, defs) for arg in args]}

    if origin is list:
        args = get_args(annotation)
        item_schema = _schema_for_type(args[0], defs) if args else {}
        return {"type": "array", "items": item_schema}

    if origin is dict:
        args = get_args(annotation)
        value_schema = _schema_for_type(args[1], defs) if len(args) == 2 else {}
        return {"type": "object", "additionalProperties": value_schema}

    primitive_map = {
        str: {"type": "string"},
        int: {"type": "integer"},
        float: {"type": "number"},
        bool: {"type": "boolean"},
        datetime: {"type": "string", "format": "date-time"},
        date: {"type": "string", "format": "date"},
    }
    if annotation in primitive_map:
        return dict(primitive_map[annotation])

    if is_dataclass(annotation):
        _ensure_dataclass_schema(annotation, defs)
        return {"$ref": f"#/$defs/{annotation.__name__}"}

    return {}


def _ensure_dataclass_schema(dataclass_type: type[Any], defs: dict[str, dict[str, Any]]) -> dict[str, Any]:
    class_name = dataclass_type.__name__
    if class_name in defs:
        return defs[class_name]

    schema: dict[str, Any] = {
        "title": class_name,
        "description": (dataclass_type.__doc__ or "").strip(),
        "type": "object",
        "additionalProperties": False,
        "properties": {},
        "required": [],
    }
    defs[class_name] = schema

    for model_field in fields(dataclass_type):
        field_schema = _schema_for_type(model_field.type, defs)

        field_description = model_field.metadata.get("description")
        if field_description:
            field_schema["description"] = field_description

        field_json_schema = model_field.metadata.get("json_schema")
        if field_json_schema:
            if any(key in field_json_schema for key in ("anyOf", "oneOf", "allOf", "not")):
                field_schema.pop("type", None)
            field_schema = {**field_schema, **field_json_schema}

        schema["properties"][model_field.name] = field_schema
        schema["required"].append(model_field.name)

    return schema


def _base_schema(title: str, description: str) -> dict[str, Any]:
    return {
        "$schema": SCHEMA_DRAFT,
        "title": title,
        "description": description,
    }


def build_output_schema() -> dict[str, Any]:
    defs: dict[str, dict[str, Any]] = {}
    for model in (Record, Group, ParseReport):
        _ensure_dataclass_schema(model, defs)
    document_schema = _ensure_dataclass_schema(RosterDocument, defs)

    schema = _base_schema(
        title="Roster Parser Output",
        description="JSON contract emitted by `roster-parse --format json`.",
    )
    schema.update({k: v for k, v in document_schema.items() if k not in ("title", "description")})
    schema["$defs"] = {name: s for name, s in defs.items() if name != "RosterDocument"}
    return schema


def build_report_schema() -> dict[str, Any]:
    defs: dict[str, dict[str, Any]] = {}
    report_schema = _ensure_dataclass_schema(ParseReport, defs)

    schema = _base_schema(
        title="Roster Parse Report",
        description="JSON contract emitted for parser diagnostics.",
    )
    schema.update({k: v for k, v in report_schema.items() if k not in ("title", "description")})
    return schema


def render_schemas() -> dict[str, str]:
    schemas = {
        OUTPUT_SCHEMA_NAME: build_output_schema(),
        REPORT_SCHEMA_NAME: build_report_schema(),
    }
    return {
        file_name: json.dumps(schema, ensure_ascii=False, indent=2, sort_keys=True) + "\n"
        for file_name, schema in schemas.items()
    }


def validate_output(payload: dict[str, Any]) -> None:
    """Raise ``jsonschema.ValidationError`` if ``payload`` breaks the output contract."""
    Draft202012Validator(build_output_schema()).validate(payload)
