"""Token issuance resource."""

import falcon.asgi

from custom_dashboard.application.use_cases.auth.issue_token import IssueTokenUseCase
from custom_dashboard.domain.exceptions import NotFound, ValidationError
from custom_dashboard.interfaces.api.resources.common import fail, ok


class TokenResource:
    """POST /api/auth/token - issue a token from tenant/subtenant codes."""

    def __init__(self, issue_token: IssueTokenUseCase) -> None:
        self._issue_token = issue_token

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Issue a token. Codes must be non-empty strings, otherwise 400."""
        body = await req.get_media(default_when_empty={})
        if not isinstance(body, dict):
            fail(resp, falcon.HTTP_400, "Invalid request body")
            return

        try:
            issued = await self._issue_token.execute(body.get("tenant"), body.get("subtenant"))
        except ValidationError as e:
            fail(resp, falcon.HTTP_400, str(e))
            return
        except NotFound as e:
            fail(resp, falcon.HTTP_404, str(e))
            return

        ok(
            resp,
            {
                "token": issued.token,
                "tenant": issued.tenant_id,
                "subtenant": issued.subtenant_id,
            },
        )
