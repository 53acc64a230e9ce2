"""PostgreSQL user repository over dim_colaboradores."""

from typing import Any

from psycopg import AsyncConnection
from psycopg.rows import dict_row

from projectguard.domain.entities import User


def row_to_user(row: dict[str, Any]) -> User:
    return User(
        id=str(row["ID_Colaborador"]),
        name=row.get("NomeColaborador"),
        role=row.get("role"),
        tower=row.get("tower"),
        email=row.get("email"),
        auth_user_id=None if row.get("auth_user_id") is None else str(row["auth_user_id"]),
        active=row.get("ativo") is not False,
        record=dict(row),
    )


class PostgresUserRepository:
    """User repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def _fetch_one(self, query: str, params: tuple) -> User | None:
        async with self._conn.cursor(row_factory=dict_row) as cur:
            await cur.execute(query, params)
            r = await cur.fetchone()
        if not r:
            return None
        return row_to_user(r)

    async def get_by_id(self, user_id: str) -> User | None:
        """Get user by collaborator id."""
        return await self._fetch_one(
            'SELECT * FROM dim_colaboradores WHERE "ID_Colaborador" = %s',
            (user_id,),
        )

    async def get_by_auth_id(self, auth_user_id: str) -> User | None:
        """Get user linked to an identity provider subject."""
        return await self._fetch_one(
            "SELECT * FROM dim_colaboradores WHERE auth_user_id = %s",
            (auth_user_id,),
        )

    async def get_by_email(self, email: str) -> User | None:
        """Get user by normalized e-mail."""
        return await self._fetch_one(
            "SELECT * FROM dim_colaboradores WHERE lower(email) = %s",
            (email.strip().lower(),),
        )

    async def list_active(self) -> list[User]:
        """List active users ordered by name."""
        async with self._conn.cursor(row_factory=dict_row) as cur:
            await cur.execute(
                'SELECT * FROM dim_colaboradores WHERE ativo IS NOT FALSE '
                'ORDER BY "NomeColaborador"'
            )
            rows = await cur.fetchall()
        return [row_to_user(r) for r in rows]
