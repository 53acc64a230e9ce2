"""Field-level redaction of project, user and task records.

Every function here is pure: inputs are never mutated, outputs are shallow
copies with attributes removed. Collections map 1:1 and keep input order.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from projectguard.domain.entities.project import is_responsible as _is_responsible
from projectguard.domain.entities.viewer import Viewer
from projectguard.domain.value_objects.role import Role
from projectguard.domain.value_objects.sensitive_fields import (
    ALLOCATION,
    AUTH,
    COST,
    CRITICAL,
    SENSITIVE,
    ResourceType,
    fields_for,
)

Record = Mapping[str, Any]

# Roles that see financial data on every project.
FINANCIAL_ROLES = frozenset({Role.SYSTEM_ADMIN, Role.EXECUTIVE, Role.FINANCIAL})
# Roles that see cost data on user records.
USER_COST_ROLES = frozenset({Role.SYSTEM_ADMIN, Role.EXECUTIVE, Role.FINANCIAL})


def _without(record: Record, fields: Iterable[str]) -> dict[str, Any]:
    drop = set(fields)
    return {k: v for k, v in record.items() if k not in drop}


def _project_is_responsible(project: Record, viewer: Viewer) -> bool:
    return _is_responsible(
        project.get("responsible_user_id"), project.get("project_manager_id"), viewer.id
    )


def _can_see_restricted(viewer: Viewer, responsible: bool) -> bool:
    return viewer.role in FINANCIAL_ROLES or (viewer.role == Role.PMO and responsible)


def sanitize_project(
    project: Record | None, viewer: Viewer, is_responsible: bool = False
) -> dict[str, Any] | None:
    """Redact financial and planning attributes the viewer may not see."""
    if project is None:
        return None
    if _can_see_restricted(viewer, is_responsible):
        return dict(project)
    hidden = fields_for(ResourceType.PROJECT, CRITICAL) | fields_for(ResourceType.PROJECT, SENSITIVE)
    return _without(project, hidden)


def sanitize_projects(projects: Iterable[Record], viewer: Viewer) -> list[dict[str, Any] | None]:
    """Sanitize each project, deriving responsibility from its own record."""
    return [
        sanitize_project(p, viewer, _project_is_responsible(p, viewer)) if p is not None else None
        for p in projects
    ]


def sanitize_user(user: Record | None, viewer: Viewer) -> dict[str, Any] | None:
    """Strip auth secrets always, cost data unless the viewer is cleared for it."""
    if user is None:
        return None
    sanitized = _without(user, fields_for(ResourceType.USER, AUTH))
    if viewer.role not in USER_COST_ROLES:
        sanitized = _without(sanitized, fields_for(ResourceType.USER, COST))
    return sanitized


def sanitize_users(users: Iterable[Record], viewer: Viewer) -> list[dict[str, Any] | None]:
    return [sanitize_user(u, viewer) for u in users]


def sanitize_task(task: Record | None, viewer: Viewer) -> dict[str, Any] | None:
    """Resources see estimated hours only, never allocated hours."""
    if task is None:
        return None
    if viewer.role == Role.RESOURCE:
        return _without(task, fields_for(ResourceType.TASK, ALLOCATION))
    return dict(task)


def sanitize_tasks(tasks: Iterable[Record], viewer: Viewer) -> list[dict[str, Any] | None]:
    return [sanitize_task(t, viewer) for t in tasks]


def can_see_financial_data(viewer: Viewer, project: Record | None = None) -> bool:
    """Financial roles always; PMO only for a project it is responsible for."""
    if viewer.role in FINANCIAL_ROLES:
        return True
    if viewer.role == Role.PMO and project is not None:
        return _project_is_responsible(project, viewer)
    return False


def can_edit_strategic_fields(viewer: Viewer, project: Record | None) -> bool:
    """System admin always; PMO only for a project it is responsible for."""
    if viewer.role == Role.SYSTEM_ADMIN:
        return True
    if viewer.role == Role.PMO and project is not None:
        return _project_is_responsible(project, viewer)
    return False
