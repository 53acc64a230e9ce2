"""Error handlers mapping domain exceptions to HTTP responses."""

import logging

import falcon
import falcon.asgi

from projectguard.domain.exceptions import (
    Forbidden,
    NotFound,
    ResourceLookupError,
    Unauthenticated,
)

logger = logging.getLogger(__name__)


async def handle_unauthenticated(req, resp, ex: Unauthenticated, params) -> None:
    resp.status = falcon.HTTP_401
    resp.media = {"error": "Não autenticado", "message": ex.message}


async def handle_forbidden(req, resp, ex: Forbidden, params) -> None:
    body = {"error": "Acesso negado", "message": ex.message}
    if ex.required_roles:
        body["requiredRoles"] = list(ex.required_roles)
        body["userRole"] = ex.viewer_role
    resp.status = falcon.HTTP_403
    resp.media = body


async def handle_not_found(req, resp, ex: NotFound, params) -> None:
    resp.status = falcon.HTTP_404
    resp.media = {"error": ex.message}


async def handle_lookup_error(req, resp, ex: ResourceLookupError, params) -> None:
    # Already logged with context where it was raised.
    resp.status = falcon.HTTP_500
    resp.media = {"error": "Erro ao validar acesso"}


async def handle_unexpected(req, resp, ex: Exception, params) -> None:
    logger.error(
        "Unhandled error on %s %s", req.method, req.path, exc_info=(type(ex), ex, ex.__traceback__)
    )
    resp.status = falcon.HTTP_500
    resp.media = {"error": "Erro interno do servidor"}


def register_error_handlers(app: falcon.asgi.App) -> None:
    """Register handlers; Falcon picks the most specific class per exception."""
    app.add_error_handler(Exception, handle_unexpected)
    app.add_error_handler(Unauthenticated, handle_unauthenticated)
    app.add_error_handler(Forbidden, handle_forbidden)
    app.add_error_handler(NotFound, handle_not_found)
    app.add_error_handler(ResourceLookupError, handle_lookup_error)
