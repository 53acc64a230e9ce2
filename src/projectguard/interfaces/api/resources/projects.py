"""Project API resources."""

import falcon
import falcon.asgi

from projectguard.application.access import ResourceAccessValidator
from projectguard.domain.sanitizer import (
    can_edit_strategic_fields,
    can_see_financial_data,
    sanitize_project,
    sanitize_tasks,
)
from projectguard.interfaces.api.hooks import require_viewer, validate_project_access


class ProjectResource:
    """GET /v1/projects/{project_id} - project with the viewer's field clearance."""

    def __init__(self, access_validator: ResourceAccessValidator) -> None:
        self.access_validator = access_validator

    @falcon.before(validate_project_access)
    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, project_id: str
    ) -> None:
        viewer = require_viewer(req)
        record = req.context.project.to_record()
        body = sanitize_project(record, viewer, req.context.is_project_responsible)
        body["permissions"] = {
            "canSeeFinancialData": can_see_financial_data(viewer, record),
            "canEditStrategicFields": can_edit_strategic_fields(viewer, record),
        }
        resp.media = body
        resp.status = falcon.HTTP_200


class ProjectTasksResource:
    """GET /v1/projects/{project_id}/tasks."""

    def __init__(
        self, unit_of_work_factory: type, access_validator: ResourceAccessValidator
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self.access_validator = access_validator

    @falcon.before(validate_project_access)
    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, project_id: str
    ) -> None:
        viewer = require_viewer(req)
        async with self._uow_factory() as uow:
            tasks = await uow.tasks.list_by_project(req.context.project.id)
        resp.media = {"items": sanitize_tasks([t.to_record() for t in tasks], viewer)}
        resp.status = falcon.HTTP_200
