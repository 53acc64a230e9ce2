"""PostgreSQL task repository over fato_tarefas."""

from typing import Any

from psycopg import AsyncConnection
from psycopg.rows import dict_row

from projectguard.domain.entities import Task


def row_to_task(row: dict[str, Any]) -> Task:
    project_id = row.get("ID_Projeto")
    developer_id = row.get("ID_Colaborador")
    return Task(
        id=str(row["id_tarefa_novo"]),
        project_id=None if project_id is None else str(project_id),
        developer_id=None if developer_id is None else str(developer_id),
        # Older schemas have no collaborator column.
        collaborator_ids=tuple(str(c) for c in row.get("collaborator_ids") or ()),
        record=dict(row),
    )


class PostgresTaskRepository:
    """Task repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, task_id: str) -> Task | None:
        """Get task by id."""
        async with self._conn.cursor(row_factory=dict_row) as cur:
            await cur.execute(
                "SELECT * FROM fato_tarefas WHERE id_tarefa_novo = %s",
                (task_id,),
            )
            r = await cur.fetchone()
        if not r:
            return None
        return row_to_task(r)

    async def list_by_project(self, project_id: str) -> list[Task]:
        """List live tasks of a project."""
        async with self._conn.cursor(row_factory=dict_row) as cur:
            await cur.execute(
                'SELECT * FROM fato_tarefas WHERE "ID_Projeto" = %s AND deleted_at IS NULL '
                "ORDER BY id_tarefa_novo",
                (project_id,),
            )
            rows = await cur.fetchall()
        return [row_to_task(r) for r in rows]
