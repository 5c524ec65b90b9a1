"""
JSON codec shared by responses and tests.

Null-valued fields are dropped, field names use the models' camelCase
aliases and datetimes are written as ISO 8601 strings, never epoch numbers.
"""

from typing import Any, TypeVar

from fastapi.responses import JSONResponse
from pydantic import BaseModel, TypeAdapter
from pydantic_core import to_json

T = TypeVar("T")


def write_string(obj: Any) -> str:
    """Serialize a model, list of models or plain value to JSON text."""
    if isinstance(obj, BaseModel):
        return obj.model_dump_json(by_alias=True, exclude_none=True)
    return to_json(obj, by_alias=True, exclude_none=True).decode("utf-8")


def read_value(text: str | bytes, type_: type[T]) -> T:
    """Parse JSON text into type_; raises pydantic.ValidationError on bad input."""
    return TypeAdapter(type_).validate_json(text)


def convert_object(obj: Any, type_: type[T]) -> T:
    """Convert a dict, model or ORM row into type_."""
    return TypeAdapter(type_).validate_python(obj, from_attributes=True)


class CodecJSONResponse(JSONResponse):
    """JSONResponse rendered through write_string."""

    def render(self, content: Any) -> bytes:
        return write_string(content).encode("utf-8")
