"""
Pydantic schemas for request/response models in the auth module.
"""

import json
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, model_serializer, model_validator

_JSON_WHITESPACE = " \t\n\r"
_decoder = json.JSONDecoder()


class LoginRequest(BaseModel):
    """
    Schema for login request payload.

    Missing fields decode to "" so the service, not the decoder,
    decides that an empty username or password is invalid.
    """
    username: str = ""
    password: str = ""

    @model_validator(mode="before")
    @classmethod
    def _fold_key_case(cls, data: Any) -> Any:
        # "Username", "PASSWORD", ... land on the declared fields; the last one wins.
        if not isinstance(data, dict):
            return data
        folded = {}
        for key, value in data.items():
            lowered = key.lower() if isinstance(key, str) else key
            folded[lowered if lowered in cls.model_fields else key] = value
        return folded

    @classmethod
    def from_body(cls, raw: bytes) -> "LoginRequest":
        """
        Decode a request body.

        Only the first JSON value is read; anything after it is ignored.
        A `null` body decodes to an empty request.

        Raises:
            ValueError: If the body is not UTF-8, holds no JSON value, or the
                value is not an object with string fields.
        """
        text = raw.decode("utf-8")
        start = len(text) - len(text.lstrip(_JSON_WHITESPACE))
        value, _ = _decoder.raw_decode(text, start)
        if value is None:
            value = {}
        return cls.model_validate(value)


class LoginResponse(BaseModel):
    """
    Schema for the login outcome.

    The `token` key is left out of the serialized form entirely when
    there is no token (failed logins).
    """
    success: bool
    message: str
    token: Optional[str] = None

    @model_serializer(mode="wrap")
    def _omit_empty_token(self, handler):
        data = handler(self)
        if not data.get("token"):
            data.pop("token", None)
        return data


class UserRecord(BaseModel):
    """A registered user. Immutable; the password never leaves the process."""
    model_config = ConfigDict(frozen=True)

    username: str
    password: str = Field(exclude=True, repr=False)
    role: str
