"""Response envelope and request helpers shared by resources."""

from typing import Any

import falcon.asgi


def ok(
    resp: falcon.asgi.Response,
    data: Any = None,
    *,
    message: str | None = None,
    status: str = falcon.HTTP_200,
) -> None:
    """Write a ``{success: true}`` envelope."""
    body: dict[str, Any] = {"success": True}
    if message:
        body["message"] = message
    if data is not None:
        body["data"] = data
    resp.media = body
    resp.status = status


def fail(resp: falcon.asgi.Response, status: str, message: str) -> None:
    """Write a ``{success: false}`` envelope."""
    resp.media = {"success": False, "message": message}
    resp.status = status


def parse_int(value: object) -> int | None:
    """Int from a path segment or body field, ``None`` when not an integer.

    Numbers with a fractional part are rejected, never truncated.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if not isinstance(value, (int, str)):
        return None
    try:
        return int(value)
    except ValueError:
        return None
