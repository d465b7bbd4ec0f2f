"""JSON Body Middleware - parses application/json request bodies up front.

Every request with a JSON content type has its body read, size-checked
and decoded before the route runs. The result lands on
``request.state.json_body`` (``None`` for non-JSON requests) and is
available to handlers through the ``get_json_body`` dependency.

Failures are answered here, not raised: exceptions from dispatch() would
bypass the app's exception handlers.
"""

import codecs
import json
from typing import Any, Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from app.core.exceptions import (
    AppException,
    MalformedJSONError,
    PayloadTooLargeError,
    UnsupportedCharsetError,
    error_response,
)
from app.core.logging import get_logger

logger = get_logger("app.json_body")

DEFAULT_LIMIT = 100 * 1024


def parse_content_type(header: str) -> tuple[str, dict[str, str]]:
    """Split a Content-Type header into (media type, parameters).

    >>> parse_content_type('application/json; charset="UTF-8"')
    ('application/json', {'charset': 'utf-8'})
    """
    media_type, _, rest = header.partition(";")
    params = {}
    for part in rest.split(";"):
        key, sep, value = part.partition("=")
        if sep:
            params[key.strip().lower()] = value.strip().strip('"').lower()
    return media_type.strip().lower(), params


def is_json_media_type(media_type: str) -> bool:
    return media_type == "application/json" or (
        media_type.startswith("application/") and media_type.endswith("+json")
    )


def _reject_constant(name: str) -> Any:
    # json.loads accepts NaN/Infinity by default; they are not valid JSON
    raise ValueError(f"Unexpected token {name}")


def resolve_charset(charset: str) -> str:
    """Return the codec name for a declared charset.

    Any ``utf-*`` charset Python knows is accepted (utf-8, utf-16, utf-32
    and their endian variants).

    Raises:
        UnsupportedCharsetError: anything else.
    """
    if not charset.startswith("utf"):
        raise UnsupportedCharsetError(charset)
    try:
        return codecs.lookup(charset).name
    except LookupError as e:
        raise UnsupportedCharsetError(charset) from e


def parse_json_body(body: bytes, strict: bool = True, encoding: str = "utf-8") -> Any:
    """Decode a raw request body.

    A zero-length body yields ``{}``; whitespace alone is malformed. In
    strict mode only objects and arrays are accepted at the top level.

    Raises:
        MalformedJSONError: undecodable bytes, invalid JSON, nesting deeper
            than the interpreter can decode, or a strict-mode violation.
    """
    if not body:
        return {}

    try:
        text = body.decode(encoding)
        value = json.loads(text, parse_constant=_reject_constant)
    except UnicodeDecodeError as e:
        raise MalformedJSONError(
            detail=f"Body is not valid {encoding.upper()}: {e.reason}"
        ) from e
    except RecursionError as e:
        raise MalformedJSONError(detail="JSON nesting too deep") from e
    except ValueError as e:
        raise MalformedJSONError(detail=str(e)) from e

    if strict and not isinstance(value, (dict, list)):
        raise MalformedJSONError(
            detail=f"Strict mode accepts only objects and arrays, got {type(value).__name__}"
        )
    return value


async def read_body(request: Request, limit: int) -> bytes:
    """Read the request stream, stopping as soon as ``limit`` is passed.

    The bytes are cached on the request so call_next() replays them to the
    route, the same way Request.body() caches.

    Raises:
        PayloadTooLargeError: declared or received length exceeds ``limit``.
    """
    declared = request.headers.get("content-length")
    if declared and declared.isdigit() and int(declared) > limit:
        raise PayloadTooLargeError(limit)

    chunks = []
    received = 0
    async for chunk in request.stream():
        received += len(chunk)
        if received > limit:
            raise PayloadTooLargeError(limit)
        chunks.append(chunk)

    body = b"".join(chunks)
    request._body = body
    return body


class JSONBodyMiddleware(BaseHTTPMiddleware):
    """
    Middleware that parses JSON request bodies.

    Responses it produces on its own:
    - 413 when the body (or declared Content-Length) exceeds ``limit``
    - 415 when the declared charset is not a UTF encoding
    - 400 when the body is not acceptable JSON

    Usage:
        app.add_middleware(JSONBodyMiddleware, limit=102400, strict=True)
    """

    STATE_KEY = "json_body"

    def __init__(self, app: ASGIApp, limit: int = DEFAULT_LIMIT, strict: bool = True):
        super().__init__(app)
        self.limit = limit
        self.strict = strict

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        setattr(request.state, self.STATE_KEY, None)

        content_type = request.headers.get("content-type")
        if not content_type:
            return await call_next(request)

        media_type, params = parse_content_type(content_type)
        if not is_json_media_type(media_type):
            return await call_next(request)

        try:
            value = await self._read_json(request, params)
        except AppException as exc:
            logger.debug(
                f"Rejected JSON body for {request.method} {request.url.path}: "
                f"{exc.error_code}"
            )
            return error_response(exc)

        setattr(request.state, self.STATE_KEY, value)
        return await call_next(request)

    async def _read_json(self, request: Request, params: dict[str, str]) -> Any:
        encoding = resolve_charset(params.get("charset", "utf-8"))
        body = await read_body(request, self.limit)
        return parse_json_body(body, strict=self.strict, encoding=encoding)


def get_json_body(request: Request) -> Optional[Any]:
    """FastAPI dependency returning the body parsed by JSONBodyMiddleware."""
    return getattr(request.state, JSONBodyMiddleware.STATE_KEY, None)
