"""Tests for error types and their JSON rendering."""

import json

from app.core.exceptions import (
    MalformedJSONError,
    PayloadTooLargeError,
    UnsupportedCharsetError,
    error_response,
)


def test_malformed_json_response():
    response = error_response(MalformedJSONError(detail="Expecting value"))

    assert response.status_code == 400
    assert json.loads(response.body) == {
        "error": "MALFORMED_JSON",
        "message": "Malformed JSON in request body",
        "detail": "Expecting value",
    }


def test_payload_too_large():
    exc = PayloadTooLargeError(limit=1024)

    assert exc.status_code == 413
    assert exc.detail == "Maximum body size: 1024 bytes"


def test_unsupported_charset_message():
    exc = UnsupportedCharsetError("latin1")

    assert exc.status_code == 415
    assert exc.message == 'Unsupported charset "LATIN1"'
    assert json.loads(error_response(exc).body)["detail"] is None
