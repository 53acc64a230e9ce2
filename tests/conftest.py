"""Pytest fixtures for projectguard tests."""

from __future__ import annotations

from contextlib import asynccontextmanager

import pytest

from projectguard.application.access import (
    AccessDeniedRecorder,
    AccessGuard,
    ResourceAccessValidator,
)
from projectguard.application.dto.audit_entry import AuditEntry
from projectguard.application.ports import TokenIdentity
from projectguard.domain.entities import Project, Task, User, Viewer


# --- Fake repositories ---


class FakeProjectRepository:
    """In-memory project repository."""

    def __init__(self) -> None:
        self._by_id: dict[str, Project] = {}

    async def get_by_id(self, project_id: str) -> Project | None:
        return self._by_id.get(str(project_id))

    def add(self, project: Project) -> Project:
        """Helper to add project for tests."""
        self._by_id[project.id] = project
        return project


class FakeTaskRepository:
    """In-memory task repository."""

    def __init__(self) -> None:
        self._by_id: dict[str, Task] = {}

    async def get_by_id(self, task_id: str) -> Task | None:
        return self._by_id.get(str(task_id))

    async def list_by_project(self, project_id: str) -> list[Task]:
        return [t for t in self._by_id.values() if t.project_id == project_id]

    def add(self, task: Task) -> Task:
        """Helper to add task for tests."""
        self._by_id[task.id] = task
        return task


class FakeUserRepository:
    """In-memory user directory."""

    def __init__(self) -> None:
        self._by_id: dict[str, User] = {}

    async def get_by_id(self, user_id: str) -> User | None:
        return self._by_id.get(str(user_id))

    async def get_by_auth_id(self, auth_user_id: str) -> User | None:
        for u in self._by_id.values():
            if u.auth_user_id == auth_user_id:
                return u
        return None

    async def get_by_email(self, email: str) -> User | None:
        for u in self._by_id.values():
            if u.email and u.email.lower() == email:
                return u
        return None

    async def list_active(self) -> list[User]:
        return [u for u in self._by_id.values() if u.active]

    def add(self, user: User) -> User:
        """Helper to add user for tests."""
        self._by_id[user.id] = user
        return user


class FakeMembershipRepository:
    """Membership predicates computed from the other fakes."""

    def __init__(self, tasks: FakeTaskRepository, users: FakeUserRepository) -> None:
        self._members: dict[str, set[str]] = {}
        self._tasks = tasks
        self._users = users

    async def check_user_is_member(self, project_id: str, user_id: str) -> bool:
        return user_id in self._members.get(project_id, set())

    async def check_user_has_tasks(self, project_id: str, user_id: str) -> bool:
        return any(
            t.project_id == project_id and t.developer_id == user_id
            for t in self._tasks._by_id.values()
        )

    async def check_tower_members_in_project(self, project_id: str, tower: str) -> bool:
        if not tower:
            return False
        for member_id in self._members.get(project_id, set()):
            user = self._users._by_id.get(member_id)
            if user and user.tower == tower:
                return True
        return False

    def add_member(self, project_id: str, user_id: str) -> None:
        """Helper to staff a user on a project."""
        self._members.setdefault(project_id, set()).add(user_id)


class FakeAuditLogRepository:
    """In-memory audit log."""

    def __init__(self) -> None:
        self.entries: list[AuditEntry] = []

    async def create(self, entry: AuditEntry) -> None:
        self.entries.append(entry)


# --- Fake UnitOfWork ---


class FakeUnitOfWork:
    """In-memory Unit of Work with fake repositories."""

    def __init__(self) -> None:
        self.projects = FakeProjectRepository()
        self.tasks = FakeTaskRepository()
        self.users = FakeUserRepository()
        self.memberships = FakeMembershipRepository(self.tasks, self.users)
        self.audit_logs = FakeAuditLogRepository()

    async def commit(self) -> None:
        pass

    async def rollback(self) -> None:
        pass


class RecordingAuditSink:
    """AuditSink that keeps entries in memory."""

    def __init__(self) -> None:
        self.entries: list[AuditEntry] = []

    async def create_audit_log(self, entry: AuditEntry) -> None:
        self.entries.append(entry)


class FailingAuditSink:
    """AuditSink whose writes always fail."""

    def __init__(self) -> None:
        self.calls = 0

    async def create_audit_log(self, entry: AuditEntry) -> None:
        self.calls += 1
        raise ConnectionError("audit store unavailable")


class FakeIdentityProvider:
    """Treats each token as the auth subject it names; unknown tokens are inactive."""

    def __init__(self, identities: dict[str, TokenIdentity] | None = None) -> None:
        self.identities = identities or {}

    def decode_token(self, token: str) -> TokenIdentity | None:
        return self.identities.get(token)


def make_viewer(
    role: str,
    id: str = "u-1",
    name: str | None = "Viewer Name",
    tower: str | None = None,
) -> Viewer:
    return Viewer(
        id=id,
        role=role,
        name=name,
        tower=tower,
        ip_address="10.0.0.1",
        user_agent="pytest",
    )


# --- Fixtures ---


@pytest.fixture
def fake_uow() -> FakeUnitOfWork:
    """Fresh in-memory UnitOfWork for each test."""
    return FakeUnitOfWork()


@pytest.fixture
def uow_factory(fake_uow: FakeUnitOfWork):
    """Factory yielding the test's shared FakeUnitOfWork."""

    @asynccontextmanager
    async def _factory():
        yield fake_uow

    return _factory


@pytest.fixture
def audit_sink() -> RecordingAuditSink:
    return RecordingAuditSink()


@pytest.fixture
def recorder(audit_sink: RecordingAuditSink) -> AccessDeniedRecorder:
    return AccessDeniedRecorder(audit_sink)


@pytest.fixture
def access_guard(recorder: AccessDeniedRecorder) -> AccessGuard:
    return AccessGuard(recorder)


@pytest.fixture
def access_validator(uow_factory, recorder: AccessDeniedRecorder) -> ResourceAccessValidator:
    return ResourceAccessValidator(unit_of_work_factory=uow_factory, recorder=recorder)
