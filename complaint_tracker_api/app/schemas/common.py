"""
Shared schema pieces.

``WireModel`` captures how request bodies are decoded: unknown keys
are ignored, a key that is absent or ``null`` keeps the field's zero
value, and a value of the wrong JSON type is rejected rather than
coerced (``"5"`` is not a severity).  Field names on the wire are
camelCase; Python code uses snake_case attribute names.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @field_validator("*", mode="before")
    @classmethod
    def _null_keeps_zero_value(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)
        return value


class ErrorResponse(BaseModel):
    """Body returned with every non‑2xx status."""

    error: str = Field(..., examples=["User not found"])
