"""Auth middleware - attaches the Viewer resolved from the bearer token."""

import falcon.asgi

from projectguard.application.use_cases.resolve_viewer import ResolveViewerUseCase


def bearer_token(req: falcon.asgi.Request) -> str | None:
    """Extract token from ``Authorization: Bearer <token>``."""
    auth = req.get_header("Authorization") or ""
    scheme, _, token = auth.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


class AuthMiddleware:
    """Sets req.context.viewer, or None when the request is not authenticated.

    Rejection happens later, in the route hooks, so that public routes
    such as health checks stay reachable.
    """

    def __init__(self, resolve_viewer: ResolveViewerUseCase | None = None) -> None:
        self._resolve_viewer = resolve_viewer

    async def process_request(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        req.context.viewer = None
        token = bearer_token(req)
        if not token or self._resolve_viewer is None:
            return
        req.context.viewer = await self._resolve_viewer.execute(
            token,
            ip_address=req.remote_addr,
            user_agent=req.user_agent,
        )
