"""Per-role relationship rules for project and task access.

Each table maps a role to an async predicate. Roles absent from a table
are denied; superuser sets bypass the tables entirely. Adding a role means
adding one entry here.
"""

import logging
from collections.abc import Awaitable, Callable, Mapping
from types import MappingProxyType

from projectguard.application.ports import UnitOfWork
from projectguard.domain.entities import Project, Task, Viewer
from projectguard.domain.value_objects import Role

logger = logging.getLogger(__name__)

ProjectRule = Callable[[Viewer, Project, UnitOfWork], Awaitable[bool]]
TaskRule = Callable[[Viewer, Task, UnitOfWork], Awaitable[bool]]

PROJECT_SUPERUSERS = frozenset({Role.SYSTEM_ADMIN, Role.EXECUTIVE, Role.FINANCIAL})
TASK_SUPERUSERS = frozenset({Role.SYSTEM_ADMIN, Role.EXECUTIVE})


def manager_name_matches(project: Project, viewer: Viewer) -> bool:
    """Legacy ``manager`` column holds a person's name, not an id."""
    return bool(project.manager) and bool(viewer.name) and project.manager == viewer.name


async def _pmo_responsible_for_project(viewer: Viewer, project: Project, uow: UnitOfWork) -> bool:
    return project.is_responsible(viewer.id)


async def _pmo_responsible_or_named_manager(
    viewer: Viewer, project: Project, uow: UnitOfWork
) -> bool:
    if project.is_responsible(viewer.id):
        return True
    # Compatibility with rows that predate responsible_user_id. A name
    # collision grants access; see DESIGN.md.
    if manager_name_matches(project, viewer):
        logger.warning(
            "Project %s access granted to %s by legacy manager name match",
            project.id,
            viewer.id,
        )
        return True
    return False


async def _tech_lead_tower_staffed(viewer: Viewer, project: Project, uow: UnitOfWork) -> bool:
    if not viewer.tower:
        return False
    return await uow.memberships.check_tower_members_in_project(project.id, viewer.tower)


async def _resource_allocated(viewer: Viewer, project: Project, uow: UnitOfWork) -> bool:
    if await uow.memberships.check_user_is_member(project.id, viewer.id):
        return True
    return await uow.memberships.check_user_has_tasks(project.id, viewer.id)


async def _pmo_responsible_for_parent(viewer: Viewer, task: Task, uow: UnitOfWork) -> bool:
    if not task.project_id:
        return False
    project = await uow.projects.get_by_id(task.project_id)
    return project is not None and project.is_responsible(viewer.id)


async def _tech_lead_developer_in_tower(viewer: Viewer, task: Task, uow: UnitOfWork) -> bool:
    if not viewer.tower or not task.developer_id:
        return False
    developer = await uow.users.get_by_id(task.developer_id)
    return developer is not None and developer.tower == viewer.tower


async def _resource_assigned(viewer: Viewer, task: Task, uow: UnitOfWork) -> bool:
    return task.involves(viewer.id)


PROJECT_RULES: Mapping[str, ProjectRule] = MappingProxyType({
    Role.PMO: _pmo_responsible_or_named_manager,
    Role.TECH_LEAD: _tech_lead_tower_staffed,
    Role.RESOURCE: _resource_allocated,
})

STRICT_PROJECT_RULES: Mapping[str, ProjectRule] = MappingProxyType({
    **PROJECT_RULES,
    Role.PMO: _pmo_responsible_for_project,
})

TASK_RULES: Mapping[str, TaskRule] = MappingProxyType({
    Role.PMO: _pmo_responsible_for_parent,
    Role.TECH_LEAD: _tech_lead_developer_in_tower,
    Role.RESOURCE: _resource_assigned,
})


def project_rules(legacy_manager_name_match: bool = True) -> Mapping[str, ProjectRule]:
    """Project rule table, with or without the legacy manager name fallback."""
    return PROJECT_RULES if legacy_manager_name_match else STRICT_PROJECT_RULES
