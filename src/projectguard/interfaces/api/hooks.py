"""Falcon before-hooks for role gates and resource access.

Resources using these hooks expose ``access_guard`` and/or
``access_validator`` attributes. Failed checks raise domain exceptions,
rendered by the handlers in ``errors``.
"""

import falcon.asgi

from projectguard.domain.entities import Viewer
from projectguard.domain.exceptions import Unauthenticated


def current_viewer(req: falcon.asgi.Request) -> Viewer | None:
    return getattr(req.context, "viewer", None)


def require_viewer(req: falcon.asgi.Request) -> Viewer:
    viewer = current_viewer(req)
    if viewer is None:
        raise Unauthenticated()
    return viewer


async def require_role(
    req: falcon.asgi.Request, resp: falcon.asgi.Response, resource, params, *allowed_roles: str
) -> None:
    """Usage: ``@falcon.before(require_role, Role.PMO, Role.FINANCIAL)``."""
    decision = await resource.access_guard.check_role(
        current_viewer(req), allowed_roles, req.path
    )
    decision.enforce()


async def validate_project_access(
    req: falcon.asgi.Request, resp: falcon.asgi.Response, resource, params
) -> None:
    """Sets req.context.project and req.context.is_project_responsible."""
    decision = await resource.access_validator.check_project_access(
        current_viewer(req), params["project_id"]
    )
    decision.enforce()
    req.context.project = decision.subject
    req.context.is_project_responsible = decision.is_responsible


async def validate_task_access(
    req: falcon.asgi.Request, resp: falcon.asgi.Response, resource, params
) -> None:
    """Sets req.context.task."""
    decision = await resource.access_validator.check_task_access(
        current_viewer(req), params["task_id"]
    )
    decision.enforce()
    req.context.task = decision.subject
