"""Task repository port."""

from typing import Protocol

from projectguard.domain.entities import Task


class TaskRepository(Protocol):
    """Port for task lookups."""

    async def get_by_id(self, task_id: str) -> Task | None: ...

    async def list_by_project(self, project_id: str) -> list[Task]: ...
