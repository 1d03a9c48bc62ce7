"""OpenAPI (Swagger 2.0) description of the HTTP API."""

from __future__ import annotations

from typing import Any

TITLE = "Chatbot Expense"
DESCRIPTION = "Chatbot Expense"
VERSION = "1.0.0"
HOST = "localhost:9009"
BASE_PATH = "/"
SCHEMES = ("http",)

_RESPONSE = "response.Response"
_EXAMPLE_RESPONSE = "dto.ExampleResponse"
_EXAMPLE_SUMMARY = "Example of single handler / controller."


def _ref(definition: str) -> dict[str, str]:
    return {"$ref": f"#/definitions/{definition}"}


def _typed(kind: str, fmt: str | None = None) -> dict[str, str]:
    schema = {"type": kind}
    if fmt is not None:
        schema["format"] = fmt
    return schema


def _object(properties: dict[str, Any], required: list[str] | None = None) -> dict[str, Any]:
    schema: dict[str, Any] = {"type": "object"}
    if required:
        schema["required"] = required
    schema["properties"] = properties
    return schema


def _definitions() -> dict[str, Any]:
    example = _object(
        {
            "created_at": _typed("string", "date-time"),
            "id": _typed("integer"),
            "name": _typed("string"),
            "price": _typed("number"),
            "updated_at": _typed("string", "date-time"),
        },
        required=["name", "price"],
    )
    envelope = _object(
        {
            "data": {},
            "error_data": {},
            "message": _typed("string"),
            "type": _typed("string"),
        }
    )
    return {_EXAMPLE_RESPONSE: example, _RESPONSE: envelope}


def _example_operation() -> dict[str, Any]:
    success_schema = {
        "allOf": [_ref(_RESPONSE), _object({"data": _ref(_EXAMPLE_RESPONSE)})]
    }
    return {
        "description": _EXAMPLE_SUMMARY,
        "produces": ["application/json"],
        "tags": ["Examples"],
        "summary": _EXAMPLE_SUMMARY,
        "responses": {
            "200": {"description": "success", "schema": success_schema},
            "500": {"description": "internal error", "schema": _ref(_RESPONSE)},
        },
    }


def swagger_spec() -> dict[str, Any]:
    """Return a fresh copy of the API description."""
    return {
        "schemes": list(SCHEMES),
        "swagger": "2.0",
        "info": {"description": DESCRIPTION, "title": TITLE, "version": VERSION},
        "host": HOST,
        "basePath": BASE_PATH,
        "paths": {"/api/v1/example": {"get": _example_operation()}},
        "definitions": _definitions(),
    }