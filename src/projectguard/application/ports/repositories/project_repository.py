"""Project repository port."""

from typing import Protocol

from projectguard.domain.entities import Project


class ProjectRepository(Protocol):
    """Port for project lookups."""

    async def get_by_id(self, project_id: str) -> Project | None: ...
