"""Pydantic models for request and response validation."""
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator, model_validator


class UppercaseRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    # a missing or null "s" reads as the empty string, which the service then rejects
    s: str = ""

    @model_validator(mode="before")
    @classmethod
    def match_keys_case_insensitively(cls, data: Any) -> Any:
        """Accepts "S" for "s" when there is no exact match, as JSON struct decoders usually do."""
        if isinstance(data, dict) and "s" not in data:
            for key in data:
                if isinstance(key, str) and key.lower() == "s":
                    return {**data, "s": data[key]}
        return data

    @field_validator("s", mode="before")
    @classmethod
    def null_is_empty(cls, v: Any) -> Any:
        return "" if v is None else v


class UppercaseResponse(BaseModel):
    """Result of an uppercase call.

    `err` is empty on success. On failure `s` is empty and `err` holds the reason.
    """

    model_config = ConfigDict(frozen=True)

    s: str
    err: str = ""


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    detail: str
