"""Unit tests for KeycloakProvider with a mocked client."""

from unittest.mock import MagicMock

import pytest

from projectguard.infrastructure.auth import keycloak_provider
from projectguard.infrastructure.auth.keycloak_provider import KeycloakProvider


@pytest.fixture
def client(monkeypatch) -> MagicMock:
    mock = MagicMock()
    monkeypatch.setattr(keycloak_provider, "KeycloakOpenID", MagicMock(return_value=mock))
    return mock


def _provider() -> KeycloakProvider:
    return KeycloakProvider("http://kc", "realm", "client", "secret")


def test_active_token(client) -> None:
    client.introspect.return_value = {
        "active": True,
        "sub": "abc",
        "email": "ana@example.com",
        "preferred_username": "ana",
    }
    identity = _provider().decode_token("t")
    assert identity is not None
    assert identity.subject == "abc"
    assert identity.email == "ana@example.com"


def test_inactive_token(client) -> None:
    client.introspect.return_value = {"active": False}
    assert _provider().decode_token("t") is None


def test_introspection_error(client) -> None:
    client.introspect.side_effect = RuntimeError("unreachable")
    assert _provider().decode_token("t") is None
