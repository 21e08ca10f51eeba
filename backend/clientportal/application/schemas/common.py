"""Response envelopes and the camelCase base shared by every DTO."""

from typing import Generic, TypeVar

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """Accepts and emits camelCase JSON; fields stay snake_case in Python."""

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "from_attributes": True,
    }


class ApiResponse(BaseModel, Generic[T]):
    """Success envelope: ``{"success": true, "data": ...}``."""

    success: bool = True
    data: T


class ApiErrorResponse(BaseModel):
    """Failure envelope: ``{"success": false, "error": "..."}``."""

    success: bool = False
    error: str


class StatusMessage(BaseModel):
    """Plain acknowledgement payload."""

    message: str
