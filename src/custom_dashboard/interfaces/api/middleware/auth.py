"""Auth middleware - verifies bearer tokens and sets the tenant context."""

import logging

import falcon.asgi

from custom_dashboard.application.ports import TokenProvider
from custom_dashboard.domain.exceptions import AuthenticationFailed

logger = logging.getLogger(__name__)


class AuthMiddleware:
    """Require a valid token on protected paths; set req.context.tenant."""

    def __init__(
        self,
        token_provider: TokenProvider,
        protected_prefixes: tuple[str, ...] = ("/api/dashboards",),
    ) -> None:
        self._token_provider = token_provider
        self._protected = protected_prefixes

    async def process_request(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        """Extract tenant from Authorization header."""
        req.context.tenant = None
        if req.method == "OPTIONS" or not req.path.startswith(self._protected):
            return

        auth = req.get_header("Authorization") or ""
        token = auth[7:].strip() if auth.startswith("Bearer ") else ""
        if not token:
            resp.status = falcon.HTTP_401
            resp.media = {"success": False, "message": "Access token required"}
            resp.complete = True
            return

        try:
            req.context.tenant = self._token_provider.verify(token)
        except AuthenticationFailed as e:
            logger.debug("Rejected token for %s: %s", req.path, e)
            resp.status = falcon.HTTP_403
            resp.media = {"success": False, "message": str(e)}
            resp.complete = True
