"""Fixtures for API tests."""

import pytest
from falcon.testing import TestClient

from projectguard.application.ports import TokenIdentity
from projectguard.application.use_cases.resolve_viewer import ResolveViewerUseCase
from projectguard.domain.entities import Project, Task, User
from projectguard.interfaces.api.app import create_app
from projectguard.interfaces.api.middleware import AuthMiddleware, CORSMiddleware

from tests.conftest import FakeIdentityProvider

USERS = [
    User(id="admin", name="Admin", role="system_admin", auth_user_id="admin"),
    User(id="exec", name="Exec", role="executive", auth_user_id="exec"),
    User(id="fin", name="Fin", role="financial", auth_user_id="fin"),
    User(id="pmo", name="Paula", role="pmo", auth_user_id="pmo"),
    User(id="pmo2", name="Pedro", role="pmo", auth_user_id="pmo2"),
    User(id="tl", name="Tiago", role="tech_lead", tower="ABAP", auth_user_id="tl"),
    User(
        id="dev",
        name="Dora",
        role="resource",
        tower="ABAP",
        auth_user_id="dev",
        record={"hourlyCost": 90, "monthlyAvailableHours": 160, "passwordHash": "h"},
    ),
    User(id="outsider", name="Otto", role="resource", auth_user_id="outsider"),
]


def auth(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def seeded_uow(fake_uow):
    for user in USERS:
        fake_uow.users.add(user)
    fake_uow.projects.add(
        Project(
            id="10",
            responsible_user_id="pmo",
            record={"NomeProjeto": "ERP", "valor_total_rs": 1000, "budget": 1000, "risks": "r"},
        )
    )
    fake_uow.tasks.add(
        Task(id="100", project_id="10", developer_id="dev", record={"allocated_hours": 40})
    )
    fake_uow.memberships.add_member("10", "dev")
    return fake_uow


@pytest.fixture
def app(seeded_uow, uow_factory, access_guard, access_validator):
    """Falcon ASGI app wired with fakes and the real auth middleware."""
    identity = FakeIdentityProvider({u.auth_user_id: TokenIdentity(subject=u.auth_user_id) for u in USERS})
    resolve_viewer = ResolveViewerUseCase(unit_of_work_factory=uow_factory, identity_provider=identity)
    return create_app(
        unit_of_work_factory=uow_factory,
        access_guard=access_guard,
        access_validator=access_validator,
        middleware=[CORSMiddleware(["http://app.local"]), AuthMiddleware(resolve_viewer)],
    )


@pytest.fixture
def client(app) -> TestClient:
    """Falcon ASGI test client."""
    return TestClient(app)
