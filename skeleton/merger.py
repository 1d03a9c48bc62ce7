"""Copy data between objects through their JSON representation."""

from __future__ import annotations

import base64
import dataclasses
import enum
import uuid
from datetime import date, datetime, time
from decimal import Decimal
from typing import Any


def to_jsonable(obj: Any) -> Any:
    """Convert ``obj`` into plain JSON types; raise TypeError if it cannot be."""
    if obj is None or isinstance(obj, (bool, int, float, str)):
        return obj
    if isinstance(obj, enum.Enum):
        return to_jsonable(obj.value)
    if isinstance(obj, dict):
        return {str(key): to_jsonable(value) for key, value in obj.items()}
    if isinstance(obj, (list, tuple, set, frozenset)):
        return [to_jsonable(item) for item in obj]
    if isinstance(obj, (datetime, date, time)):
        return obj.isoformat()
    if isinstance(obj, uuid.UUID):
        return str(obj)
    if isinstance(obj, Decimal):
        return float(obj)
    if isinstance(obj, (bytes, bytearray)):
        return base64.b64encode(bytes(obj)).decode("ascii")
    model_dump = getattr(obj, "model_dump", None)
    if callable(model_dump) and not isinstance(obj, type):
        return to_jsonable(model_dump(mode="json"))
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        to_dict = getattr(obj, "to_dict", None)
        if callable(to_dict):
            return to_jsonable(to_dict())
        return {f.name: to_jsonable(getattr(obj, f.name)) for f in dataclasses.fields(obj)}
    to_dict = getattr(obj, "to_dict", None)
    if callable(to_dict) and not isinstance(obj, type):
        return to_jsonable(to_dict())
    raise TypeError(f"object of type {type(obj).__name__} is not JSON serializable")


def _field_names(target: Any) -> set[str]:
    if dataclasses.is_dataclass(target):
        return {f.name for f in dataclasses.fields(target)}
    model_fields = getattr(type(target), "model_fields", None)
    if isinstance(model_fields, dict):
        return set(model_fields)
    return set(vars(target))


def _load(data: Any, target: Any) -> Any:
    if isinstance(target, dict):
        if not isinstance(data, dict):
            raise TypeError(f"cannot load {type(data).__name__} into a dict")
        target.update(data)
        return target
    if isinstance(target, list):
        if not isinstance(data, list):
            raise TypeError(f"cannot load {type(data).__name__} into a list")
        target[:] = data
        return target
    if isinstance(target, type):
        validate = getattr(target, "model_validate", None)
        if callable(validate):
            return validate(data)
        if dataclasses.is_dataclass(target):
            if not isinstance(data, dict):
                raise TypeError(f"cannot load {type(data).__name__} into {target.__name__}")
            known = {f.name for f in dataclasses.fields(target) if f.init}
            return target(**{k: v for k, v in data.items() if k in known})
        raise TypeError(f"cannot construct {target.__name__} from data")
    if not isinstance(data, dict):
        raise TypeError(f"cannot load {type(data).__name__} into {type(target).__name__}")
    known = _field_names(target)
    for key, value in data.items():
        if key in known:
            setattr(target, key, value)
    return target


def merge(source: Any, target: Any) -> Any:
    """Copy the JSON form of ``source`` onto ``target`` and return the result.

    ``target`` may be a dict, a list, an object with attributes, or a
    dataclass / model class, in which case a new instance is returned.
    """
    return _load(to_jsonable(source), target)


def combine(source: Any, base: Any, target: Any) -> Any:
    """Overlay the fields of ``source`` on those of ``base`` and load them into ``target``."""
    merged: dict[str, Any] = {}
    for part in (base, source):
        if part is None:
            continue
        try:
            data = to_jsonable(part)
        except TypeError:
            continue
        if isinstance(data, dict):
            merged.update(data)
    return _load(merged, target)