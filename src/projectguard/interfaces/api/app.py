"""Falcon ASGI application."""

import falcon.asgi
from falcon.asgi import App

from projectguard.application.access import AccessGuard, ResourceAccessValidator
from projectguard.interfaces.api.errors import register_error_handlers
from projectguard.interfaces.api.media import install_json_handler
from projectguard.interfaces.api.resources.health import HealthResource
from projectguard.interfaces.api.resources.projects import (
    ProjectResource,
    ProjectTasksResource,
)
from projectguard.interfaces.api.resources.tasks import TaskResource
from projectguard.interfaces.api.resources.users import (
    MeResource,
    UserResource,
    UsersResource,
)


def create_app(
    unit_of_work_factory: type,
    access_guard: AccessGuard,
    access_validator: ResourceAccessValidator,
    middleware: list | None = None,
) -> App:
    """Create Falcon ASGI app with routes and error handlers."""
    app = falcon.asgi.App(middleware=middleware or [])
    install_json_handler(app)
    register_error_handlers(app)

    health = HealthResource()
    app.add_route("/v1/health", health)
    app.add_route("/v1/health/ready", health, suffix="ready")
    app.add_route("/v1/me", MeResource(unit_of_work_factory))
    app.add_route("/v1/users", UsersResource(unit_of_work_factory, access_guard))
    app.add_route("/v1/users/{user_id}", UserResource(unit_of_work_factory, access_guard))
    app.add_route("/v1/projects/{project_id}", ProjectResource(access_validator))
    app.add_route(
        "/v1/projects/{project_id}/tasks",
        ProjectTasksResource(unit_of_work_factory, access_validator),
    )
    app.add_route("/v1/tasks/{task_id}", TaskResource(access_validator))
    return app
