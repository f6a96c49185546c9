from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, field_validator


class InquiryPayload(BaseModel):
    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)

    name: str
    email: EmailStr
    country: str
    message: str
    eventDate: str = ""
    artist: str = ""

    @field_validator("name", "country", "message")
    @classmethod
    def _required(cls, value: str) -> str:
        if not value:
            raise ValueError("must not be empty")
        return value

    @field_validator("eventDate", "artist", mode="before")
    @classmethod
    def _optional(cls, value: Any) -> Any:
        return "" if value is None else value


class InquiryResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str
    fields: Optional[dict[str, str]] = None
