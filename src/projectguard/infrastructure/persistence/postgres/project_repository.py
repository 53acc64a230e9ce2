"""PostgreSQL project repository over dim_projetos."""

from typing import Any

from psycopg import AsyncConnection
from psycopg.rows import dict_row

from projectguard.domain.entities import Project


def _str_or_none(value: Any) -> str | None:
    return None if value is None else str(value)


def row_to_project(row: dict[str, Any]) -> Project:
    return Project(
        id=str(row["ID_Projeto"]),
        responsible_user_id=_str_or_none(row.get("responsible_user_id")),
        project_manager_id=_str_or_none(row.get("project_manager_id")),
        manager=row.get("manager"),
        record=dict(row),
    )


class PostgresProjectRepository:
    """Project repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, project_id: str) -> Project | None:
        """Get project by id, all columns included."""
        async with self._conn.cursor(row_factory=dict_row) as cur:
            await cur.execute(
                'SELECT * FROM dim_projetos WHERE "ID_Projeto" = %s',
                (project_id,),
            )
            r = await cur.fetchone()
        if not r:
            return None
        return row_to_project(r)
