"""Resource-scoped access checks for projects and tasks."""

import logging
from collections.abc import Mapping

from projectguard.application.access.audit import AccessDeniedRecorder
from projectguard.application.access.rules import (
    PROJECT_SUPERUSERS,
    TASK_RULES,
    TASK_SUPERUSERS,
    ProjectRule,
    TaskRule,
    project_rules,
)
from projectguard.application.ports import UnitOfWork
from projectguard.domain.entities import Project, Task, Viewer
from projectguard.domain.exceptions import ProjectGuardError, ResourceLookupError, Unauthenticated
from projectguard.domain.value_objects import AccessDecision

logger = logging.getLogger(__name__)

PROJECT_DENIED = "Você não tem vínculo com este projeto"
PROJECT_NOT_FOUND = "Projeto não encontrado"
TASK_DENIED = "Você não tem permissão para acessar esta tarefa"
TASK_NOT_FOUND = "Tarefa não encontrada"


class ResourceAccessValidator:
    """Resolves a project or task and applies the viewer's role rule.

    Denials are audited; not-found results are not. Collaborator failures
    surface as ResourceLookupError.
    """

    def __init__(
        self,
        unit_of_work_factory: type,
        recorder: AccessDeniedRecorder | None = None,
        legacy_manager_name_match: bool = True,
        task_rules: Mapping[str, TaskRule] = TASK_RULES,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._recorder = recorder
        self._project_rules: Mapping[str, ProjectRule] = project_rules(legacy_manager_name_match)
        self._task_rules = task_rules

    async def check_project_access(self, viewer: Viewer | None, project_id: str) -> AccessDecision:
        """Allow (with project and responsibility flag), deny, or not found."""
        if viewer is None:
            raise Unauthenticated()
        resource = f"project/{project_id}"
        try:
            async with self._uow_factory() as uow:
                project = await uow.projects.get_by_id(project_id)
                if project is None:
                    return AccessDecision.not_found(resource, PROJECT_NOT_FOUND)
                decision = await self.decide_project_access(viewer, project, uow)
        except ProjectGuardError:
            raise
        except Exception as e:
            logger.exception(
                "Project access lookup failed: resource=%s user=%s role=%s",
                resource,
                viewer.id,
                viewer.role,
            )
            raise ResourceLookupError(f"Failed to resolve {resource}") from e

        if not decision.allowed:
            await self._record(viewer, resource)
        return decision

    async def decide_project_access(
        self, viewer: Viewer, project: Project, uow: UnitOfWork
    ) -> AccessDecision:
        """Apply superuser bypass or the role's rule. No side effects besides lookups."""
        resource = f"project/{project.id}"
        responsible = project.is_responsible(viewer.id)
        if viewer.role in PROJECT_SUPERUSERS:
            return AccessDecision.allow(resource, project, responsible)
        rule = self._project_rules.get(viewer.role)
        if rule is None or not await rule(viewer, project, uow):
            return AccessDecision.deny(resource, PROJECT_DENIED, viewer_role=str(viewer.role))
        return AccessDecision.allow(resource, project, responsible)

    async def check_task_access(self, viewer: Viewer | None, task_id: str) -> AccessDecision:
        """Allow (with task), deny, or not found."""
        if viewer is None:
            raise Unauthenticated()
        resource = f"task/{task_id}"
        try:
            async with self._uow_factory() as uow:
                task = await uow.tasks.get_by_id(task_id)
                if task is None:
                    return AccessDecision.not_found(resource, TASK_NOT_FOUND)
                decision = await self.decide_task_access(viewer, task, uow)
        except ProjectGuardError:
            raise
        except Exception as e:
            logger.exception(
                "Task access lookup failed: resource=%s user=%s role=%s",
                resource,
                viewer.id,
                viewer.role,
            )
            raise ResourceLookupError(f"Failed to resolve {resource}") from e

        if not decision.allowed:
            await self._record(viewer, resource)
        return decision

    async def decide_task_access(
        self, viewer: Viewer, task: Task, uow: UnitOfWork
    ) -> AccessDecision:
        resource = f"task/{task.id}"
        if viewer.role in TASK_SUPERUSERS:
            return AccessDecision.allow(resource, task)
        rule = self._task_rules.get(viewer.role)
        if rule is None or not await rule(viewer, task, uow):
            return AccessDecision.deny(resource, TASK_DENIED, viewer_role=str(viewer.role))
        return AccessDecision.allow(resource, task)

    async def _record(self, viewer: Viewer, resource: str) -> None:
        if self._recorder is not None:
            await self._recorder.record(viewer, resource, (viewer.role,))
