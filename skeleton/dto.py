"""Request and response bodies of the example endpoint."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, model_validator

_ZERO_VALUES = ("", 0, None)


def _drop_zero(data: Any, fields: tuple[str, ...]) -> Any:
    """Treat zero values of required fields as missing."""
    if not isinstance(data, dict):
        return data
    return {
        key: value
        for key, value in data.items()
        if not (key in fields and value in _ZERO_VALUES)
    }


class ExampleRequest(BaseModel):
    """Body of a request to create an example; name and price must be non-zero."""

    name: str
    price: float

    @model_validator(mode="before")
    @classmethod
    def _required(cls, data: Any) -> Any:
        return _drop_zero(data, ("name", "price"))


class ExampleResponse(BaseModel):
    """An example as returned to clients."""

    model_config = ConfigDict(from_attributes=True)

    id: int = 0
    name: str
    price: float
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None