"""Auth middleware - resolves the bearer token to a request user."""

import logging
from dataclasses import dataclass

import falcon.asgi

logger = logging.getLogger(__name__)


@dataclass
class RequestUser:
    """User from request context. user_id is the auth subject."""

    user_id: str
    email: str | None = None
    username: str | None = None


class AuthMiddleware:
    """Sets req.context.user; None when a token is presented but not accepted.

    Requests without an Authorization header are anonymous: they can read
    public camp pages but resolve to no organization member.
    """

    def __init__(self, keycloak_provider=None) -> None:
        self._keycloak = keycloak_provider

    async def process_request(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        """Extract user from Authorization header."""
        auth = req.get_header("Authorization")
        if not auth:
            req.context.user = RequestUser(user_id="anonymous")
            return

        req.context.user = None
        if not auth.startswith("Bearer ") or not self._keycloak:
            return
        oidc_user = self._keycloak.decode_token(auth[7:])
        if oidc_user is None:
            logger.info("Rejected bearer token for %s %s", req.method, req.path)
            return
        req.context.user = RequestUser(
            user_id=oidc_user.user_id,
            email=oidc_user.email,
            username=oidc_user.username,
        )
