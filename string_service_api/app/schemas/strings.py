"""
Pydantic schemas for the string operations.

Every model is immutable and lives for a single request: it is built
when the body is decoded and discarded once the response is sent.
A missing ``s`` decodes to the empty string; unknown keys are
ignored.  Request keys match case-insensitively, so ``{"S": "abc"}``
is read like ``{"s": "abc"}``; an exact match wins when both appear.
"""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field, model_serializer, model_validator


class _StringRequest(BaseModel):
    """Common base for request bodies carrying a single string ``s``."""

    model_config = ConfigDict(frozen=True)

    s: str = Field("", description="Input string")

    @model_validator(mode="before")
    @classmethod
    def _match_key_case_insensitively(cls, data: Any) -> Any:
        if not isinstance(data, dict) or "s" in data:
            return data
        for key, value in data.items():
            if isinstance(key, str) and key.lower() == "s":
                return {**data, "s": value}
        return data


class UppercaseRequest(_StringRequest):
    """Request body for ``POST /uppercase``."""

    s: str = Field("", description="String to convert to upper case")


class UppercaseResponse(BaseModel):
    """Response body for ``POST /uppercase``.

    Exactly one of ``v`` and ``err`` is meaningful.  On failure ``v`` is
    empty and ``err`` carries the error message; on success ``err`` is
    empty and left out of the serialized body.
    """

    model_config = ConfigDict(frozen=True)

    v: str = Field("", description="Upper-cased string")
    err: str = Field("", description="Error message, empty on success")

    @model_serializer(mode="wrap")
    def _omit_empty_err(self, handler) -> Dict[str, Any]:
        data = handler(self)
        if not data.get("err"):
            data.pop("err", None)
        return data


class CountRequest(_StringRequest):
    """Request body for ``POST /count``."""

    s: str = Field("", description="String whose length in UTF-8 bytes is returned")


class CountResponse(BaseModel):
    """Response body for ``POST /count``."""

    model_config = ConfigDict(frozen=True)

    v: int = Field(..., ge=0, description="Length of the input in UTF-8 bytes")
