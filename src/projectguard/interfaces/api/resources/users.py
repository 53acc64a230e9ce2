"""User directory API resources."""

import falcon
import falcon.asgi

from projectguard.application.access import AccessGuard
from projectguard.domain.exceptions import NotFound
from projectguard.domain.sanitizer import sanitize_user, sanitize_users
from projectguard.domain.value_objects import Role
from projectguard.interfaces.api.hooks import require_role, require_viewer

USER_DIRECTORY_ROLES = (
    Role.SYSTEM_ADMIN,
    Role.EXECUTIVE,
    Role.PMO,
    Role.FINANCIAL,
    Role.TECH_LEAD,
)


class MeResource:
    """GET /v1/me - the viewer's own record, sanitized like anyone else's."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        viewer = require_viewer(req)
        async with self._uow_factory() as uow:
            user = await uow.users.get_by_id(viewer.id)
        if user is None:
            raise NotFound("Usuário não encontrado", resource=f"user/{viewer.id}")
        resp.media = sanitize_user(user.to_record(), viewer)
        resp.status = falcon.HTTP_200


class UsersResource:
    """GET /v1/users - active users."""

    def __init__(self, unit_of_work_factory: type, access_guard: AccessGuard) -> None:
        self._uow_factory = unit_of_work_factory
        self.access_guard = access_guard

    @falcon.before(require_role, *USER_DIRECTORY_ROLES)
    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        viewer = require_viewer(req)
        async with self._uow_factory() as uow:
            users = await uow.users.list_active()
        resp.media = {"items": sanitize_users([u.to_record() for u in users], viewer)}
        resp.status = falcon.HTTP_200


class UserResource:
    """GET /v1/users/{user_id}."""

    def __init__(self, unit_of_work_factory: type, access_guard: AccessGuard) -> None:
        self._uow_factory = unit_of_work_factory
        self.access_guard = access_guard

    @falcon.before(require_role, *USER_DIRECTORY_ROLES)
    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, user_id: str
    ) -> None:
        viewer = require_viewer(req)
        async with self._uow_factory() as uow:
            user = await uow.users.get_by_id(user_id)
        if user is None:
            raise NotFound("Usuário não encontrado", resource=f"user/{user_id}")
        resp.media = sanitize_user(user.to_record(), viewer)
        resp.status = falcon.HTTP_200
