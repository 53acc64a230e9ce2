"""Project membership port - existence checks used by access rules."""

from typing import Protocol


class MembershipRepository(Protocol):
    """Boolean membership predicates over project staffing."""

    async def check_user_is_member(self, project_id: str, user_id: str) -> bool: ...

    async def check_user_has_tasks(self, project_id: str, user_id: str) -> bool: ...

    async def check_tower_members_in_project(self, project_id: str, tower: str) -> bool: ...
