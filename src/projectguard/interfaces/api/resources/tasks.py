"""Task API resources."""

import falcon
import falcon.asgi

from projectguard.application.access import ResourceAccessValidator
from projectguard.domain.sanitizer import sanitize_task
from projectguard.interfaces.api.hooks import require_viewer, validate_task_access


class TaskResource:
    """GET /v1/tasks/{task_id}."""

    def __init__(self, access_validator: ResourceAccessValidator) -> None:
        self.access_validator = access_validator

    @falcon.before(validate_task_access)
    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, task_id: str
    ) -> None:
        viewer = require_viewer(req)
        resp.media = sanitize_task(req.context.task.to_record(), viewer)
        resp.status = falcon.HTTP_200
