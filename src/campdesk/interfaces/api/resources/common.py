"""Helpers shared by API resources."""

import logging
from uuid import UUID

import falcon
import falcon.asgi

from campdesk.domain.exceptions import (
    CampDeskError,
    Conflict,
    NotFound,
    PermissionDenied,
    RegistrationConflict,
    ValidationError,
)

logger = logging.getLogger(__name__)


def current_user(req: falcon.asgi.Request, resp: falcon.asgi.Response):
    """Return the request user, or set 401 on the response and return None."""
    user = getattr(req.context, "user", None)
    if not user:
        resp.status = falcon.HTTP_401
        resp.media = {"error": "Unauthorized"}
    return user


def parse_uuid(value: str, what: str) -> UUID:
    try:
        return UUID(value)
    except ValueError:
        raise ValidationError(f"Invalid {what} ID") from None


def set_error(resp: falcon.asgi.Response, exc: CampDeskError) -> None:
    """Map a domain exception onto the response."""
    if isinstance(exc, PermissionDenied):
        resp.status = falcon.HTTP_403
        resp.media = {"error": "Permission denied"}
        return
    if isinstance(exc, NotFound):
        resp.status = falcon.HTTP_404
        resp.media = {"error": " ".join(str(a) for a in exc.args) or "Not found"}
        return
    if isinstance(exc, ValidationError):
        resp.status = falcon.HTTP_400
        resp.media = {"error": str(exc)}
        return
    if isinstance(exc, RegistrationConflict):
        resp.status = falcon.HTTP_409
        resp.media = {"error": str(exc), "code": exc.code}
        return
    if isinstance(exc, Conflict):
        resp.status = falcon.HTTP_409
        resp.media = {"error": str(exc)}
        return
    logger.error("Unmapped domain error: %r", exc)
    resp.status = falcon.HTTP_500
    resp.media = {"error": "Internal error"}


async def read_body(req: falcon.asgi.Request) -> dict:
    """Read a JSON object body."""
    body = await req.get_media()
    if not isinstance(body, dict):
        raise ValidationError("Request body must be a JSON object")
    return body
