"""Unit tests for row mapping in the PostgreSQL repositories."""

from projectguard.infrastructure.persistence.postgres.project_repository import row_to_project
from projectguard.infrastructure.persistence.postgres.task_repository import row_to_task
from projectguard.infrastructure.persistence.postgres.user_repository import row_to_user


class TestRowToProject:
    def test_ids_become_strings(self) -> None:
        project = row_to_project({
            "ID_Projeto": 42,
            "responsible_user_id": 7,
            "project_manager_id": None,
            "manager": "Maria",
            "margem": 0.3,
        })
        assert project.id == "42"
        assert project.responsible_user_id == "7"
        assert project.project_manager_id is None
        assert project.is_responsible("7")
        assert project.record["margem"] == 0.3

    def test_to_record_keeps_all_columns(self) -> None:
        record = row_to_project({"ID_Projeto": 1, "budget": 10}).to_record()
        assert record["id"] == "1"
        assert record["budget"] == 10


class TestRowToTask:
    def test_maps_legacy_columns(self) -> None:
        task = row_to_task({
            "id_tarefa_novo": 5,
            "ID_Projeto": 42,
            "ID_Colaborador": 9,
            "Afazer": "Build report",
        })
        assert task.id == "5"
        assert task.project_id == "42"
        assert task.developer_id == "9"
        assert task.collaborator_ids == ()
        assert task.involves("9")

    def test_collaborators_when_present(self) -> None:
        task = row_to_task({"id_tarefa_novo": 5, "collaborator_ids": [1, 2]})
        assert task.collaborator_ids == ("1", "2")
        assert task.involves("2")
        assert task.to_record()["collaboratorIds"] == ["1", "2"]


class TestRowToUser:
    def test_maps_columns(self) -> None:
        user = row_to_user({
            "ID_Colaborador": 3,
            "NomeColaborador": "Ana",
            "role": "pmo",
            "tower": "ABAP",
            "email": "ana@example.com",
            "auth_user_id": "a-1",
            "ativo": True,
            "passwordHash": "x",
        })
        assert user.id == "3"
        assert user.name == "Ana"
        assert user.active
        assert user.record["passwordHash"] == "x"

    def test_null_active_counts_as_active(self) -> None:
        assert row_to_user({"ID_Colaborador": 1, "ativo": None}).active
        assert not row_to_user({"ID_Colaborador": 1, "ativo": False}).active
