"""
Unit tests for the auth schemas.

Covers:
    - LoginRequest decoding (defaults, special characters, wrong types)
    - LoginResponse wire shape (token omitted when absent or empty)
    - UserRecord never serializes its password
"""

import json

import pytest
from pydantic import ValidationError as PydanticValidationError

from login_platform.auth.schemas import LoginRequest, LoginResponse, UserRecord


def test_login_request_from_json():
    req = LoginRequest.model_validate_json('{"username": "testuser", "password": "testpass"}')
    assert req.username == "testuser"
    assert req.password == "testpass"


def test_login_request_missing_fields_default_to_empty():
    req = LoginRequest.model_validate_json("{}")
    assert req.username == ""
    assert req.password == ""


def test_login_request_special_characters():
    payload = json.dumps({"username": "user@domain.com", "password": "pass!@#$%^&*()"})
    req = LoginRequest.model_validate_json(payload)
    assert req.username == "user@domain.com"
    assert req.password == "pass!@#$%^&*()"


def test_login_request_ignores_unknown_fields():
    req = LoginRequest.model_validate_json('{"username": "a", "password": "b", "remember": true}')
    assert req.model_dump() == {"username": "a", "password": "b"}


@pytest.mark.parametrize("raw", ["invalid json", "", "[]", '{"username": 1, "password": "x"}'])
def test_login_request_rejects_malformed_input(raw):
    with pytest.raises(PydanticValidationError):
        LoginRequest.model_validate_json(raw)


def test_login_response_success_round_trip():
    resp = LoginResponse(success=True, message="Login successful", token="test-token-123")
    decoded = LoginResponse.model_validate_json(resp.model_dump_json())
    assert decoded.success is True
    assert decoded.message == "Login successful"
    assert decoded.token == "test-token-123"


def test_login_response_success_wire_shape():
    resp = LoginResponse(success=True, message="Login successful", token="dummy-token-admin-1")
    assert resp.model_dump_json() == (
        '{"success":true,"message":"Login successful","token":"dummy-token-admin-1"}'
    )


def test_login_response_failure_omits_token_key():
    resp = LoginResponse(success=False, message="Invalid username or password")
    assert "token" not in resp.model_dump()
    assert "token" not in json.loads(resp.model_dump_json())
    assert resp.model_dump_json() == '{"success":false,"message":"Invalid username or password"}'


def test_login_response_empty_token_is_omitted():
    resp = LoginResponse(success=False, message="Invalid credentials", token="")
    assert resp.model_dump() == {"success": False, "message": "Invalid credentials"}


def test_login_response_failure_round_trip_has_no_token():
    resp = LoginResponse(success=False, message="Invalid credentials")
    decoded = LoginResponse.model_validate_json(resp.model_dump_json())
    assert decoded.success is False
    assert decoded.message == "Invalid credentials"
    assert decoded.token is None


def test_user_record_hides_password():
    user = UserRecord(username="admin", password="secret123", role="admin")
    assert user.model_dump() == {"username": "admin", "role": "admin"}
    dumped = user.model_dump_json()
    assert "secret123" not in dumped
    assert "password" not in dumped
    assert "secret123" not in repr(user)


def test_from_body_reads_first_value_only():
    req = LoginRequest.from_body(b'  \n{"username": "admin", "password": "admin123"} trailing')
    assert req.username == "admin"
    assert req.password == "admin123"


def test_from_body_null_is_empty_request():
    assert LoginRequest.from_body(b"null") == LoginRequest()


def test_keys_match_case_insensitively():
    req = LoginRequest.from_body(b'{"Username": "admin", "PASSWORD": "admin123"}')
    assert req.model_dump() == {"username": "admin", "password": "admin123"}


def test_later_key_variant_wins():
    req = LoginRequest.model_validate({"username": "first", "USERNAME": "second"})
    assert req.username == "second"


@pytest.mark.parametrize("raw", [b"", b"   ", b"invalid json", b"[]", b'"admin"', b'{"username": 1}', b"\xff"])
def test_from_body_rejects_malformed_input(raw):
    with pytest.raises(ValueError):
        LoginRequest.from_body(raw)
