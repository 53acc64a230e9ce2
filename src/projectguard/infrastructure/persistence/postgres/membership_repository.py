"""PostgreSQL membership predicates over project_members and fato_tarefas."""

from psycopg import AsyncConnection


class PostgresMembershipRepository:
    """Existence checks used by project access rules."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def _exists(self, query: str, params: tuple) -> bool:
        cur = await self._conn.execute(f"SELECT EXISTS ({query})", params)
        r = await cur.fetchone()
        return bool(r and r[0])

    async def check_user_is_member(self, project_id: str, user_id: str) -> bool:
        """User is registered in project_members."""
        return await self._exists(
            "SELECT 1 FROM project_members WHERE id_projeto = %s AND id_colaborador = %s",
            (project_id, user_id),
        )

    async def check_user_has_tasks(self, project_id: str, user_id: str) -> bool:
        """User is the assigned developer of at least one task in the project."""
        return await self._exists(
            'SELECT 1 FROM fato_tarefas WHERE "ID_Projeto" = %s AND "ID_Colaborador" = %s',
            (project_id, user_id),
        )

    async def check_tower_members_in_project(self, project_id: str, tower: str) -> bool:
        """At least one project member belongs to ``tower``."""
        if not tower:
            return False
        return await self._exists(
            "SELECT 1 FROM project_members pm "
            'JOIN dim_colaboradores c ON c."ID_Colaborador" = pm.id_colaborador '
            "WHERE pm.id_projeto = %s AND c.tower = %s",
            (project_id, tower),
        )
