"""User directory port."""

from typing import Protocol

from projectguard.domain.entities import User


class UserRepository(Protocol):
    """Port for user directory lookups."""

    async def get_by_id(self, user_id: str) -> User | None: ...

    async def get_by_auth_id(self, auth_user_id: str) -> User | None: ...

    async def get_by_email(self, email: str) -> User | None: ...

    async def list_active(self) -> list[User]: ...
