"""Uniform JSON response bodies for success and failure."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError

from skeleton.merger import to_jsonable

DEFAULT_ERROR_MESSAGE = "Something bad occured"
VALIDATION_ERROR_MESSAGE = "Request body does not meet the requirements"
BAD_REQUEST = 400

VALIDATE_MESSAGES: dict[str, str] = {
    "required": "%s is required %s",
    "gte": "%s must be greater than or equal %s",
    "gt": "%s must be greater than %s",
    "lte": "%s must be less than or equal %s",
    "lt": "%s must be less than %s",
    "unique": "%s already exists %s",
    "email": "%s must be a valid email address %s",
    "uuid": "%s must be a valid UUID %s",
}

_VALIDATOR_TAGS = {
    "missing": "required",
    "greater_than_equal": "gte",
    "greater_than": "gt",
    "less_than_equal": "lte",
    "less_than": "lt",
    "uuid_parsing": "uuid",
    "uuid_type": "uuid",
    "uuid_version": "uuid",
}


def _jsonable_or_str(value: Any) -> Any:
    try:
        return to_jsonable(value)
    except TypeError:
        return str(value)


@dataclass
class Response:
    """Body of every JSON reply."""

    type: str
    message: str
    error_data: Any = None
    data: Any = None

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {"type": self.type, "message": self.message}
        if self.error_data is not None:
            body["error_data"] = _jsonable_or_str(self.error_data)
        if self.data is not None:
            body["data"] = _jsonable_or_str(self.data)
        return body


@dataclass
class ErrorData:
    """One failed validation rule."""

    name: str = ""
    path: str = ""
    type: str = ""
    value: Any = None
    validator: str = ""
    criteria: Any = None
    message: str = ""

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {"name": self.name, "path": self.path}
        if self.type:
            body["type"] = self.type
        if self.value is not None:
            body["value"] = _jsonable_or_str(self.value)
        body["validator"] = self.validator
        if self.criteria is not None:
            body["criteria"] = _jsonable_or_str(self.criteria)
        return body


def _split_params(default_message: str, args: tuple[Any, ...]) -> tuple[str, Any]:
    message = default_message
    data = None
    if isinstance(args[0], str):
        message = args[0]
        if len(args) > 1:
            data = args[1]
    elif len(args) > 1:
        data = args[0]
        if isinstance(args[1], str):
            message = args[1]
    else:
        data = args[0]
    return message, data


def ok(*args: Any) -> tuple[dict[str, Any], int]:
    """Success body with status 200.

    Arguments may be nothing, a message, data, "message, data" or "data, message".
    """
    if not args:
        return Response(type="success", message="OK").to_dict(), 200
    message, data = _split_params("OK", args)
    return Response(type="success", message=message, data=data).to_dict(), 200


def fail(http_code: int, *args: Any) -> tuple[dict[str, Any], int]:
    """Error body with ``http_code``; arguments as for :func:`ok`."""
    if not args:
        return Response(type="error", message=DEFAULT_ERROR_MESSAGE).to_dict(), http_code
    message, data = _split_params("Error", args)
    return Response(type="error", message=message, error_data=data).to_dict(), http_code


def error_message(message: str, http_code: int = BAD_REQUEST) -> tuple[dict[str, Any], int]:
    """Error body carrying only ``message``."""
    return fail(http_code, message)


def _to_snake(text: str) -> str:
    text = re.sub(r"([A-Z]+)([A-Z][a-z])", r"\1_\2", text)
    text = re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", text)
    text = re.sub(r"[\s\-.]+", "_", text)
    return text.lower().strip("_")


def _criteria(ctx: dict[str, Any] | None) -> Any:
    if not ctx:
        return ""
    value = next(iter(ctx.values()))
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return value
    if isinstance(value, (int, float)):
        return value
    return ""


def _field_type(error_type: str) -> str:
    for suffix in ("_type", "_parsing"):
        if error_type.endswith(suffix):
            return error_type[: -len(suffix)]
    return ""


def _error_details(exc: ValidationError) -> list[ErrorData]:
    details = []
    for item in exc.errors():
        loc = [_to_snake(str(part)) for part in item.get("loc", ())]
        name = loc[-1] if loc else ""
        error_type = item.get("type", "")
        validator = _VALIDATOR_TAGS.get(error_type, error_type)
        detail = ErrorData(
            name=name,
            path=".".join(loc),
            type=_field_type(error_type),
            value=None if error_type == "missing" else item.get("input"),
            validator=validator,
            criteria=_criteria(item.get("ctx")),
        )
        template = VALIDATE_MESSAGES.get(validator)
        if template is not None:
            detail.message = template % (detail.name, detail.criteria)
        details.append(detail)
    return details


def error(exc: BaseException, http_code: int = BAD_REQUEST) -> tuple[dict[str, Any], int]:
    """Error body for ``exc``; validation errors are expanded field by field."""
    if isinstance(exc, ValidationError):
        return fail(http_code, VALIDATION_ERROR_MESSAGE, _error_details(exc))
    return fail(http_code, str(exc), None)