"""Unit tests for AccessGuard."""

import pytest

from projectguard.application.access import AccessDeniedRecorder, AccessGuard
from projectguard.domain.exceptions import Forbidden, Unauthenticated
from projectguard.domain.value_objects import Role

from tests.conftest import FailingAuditSink, make_viewer


def test_decide_allows_member_role() -> None:
    decision = AccessGuard.decide(make_viewer(Role.PMO), [Role.PMO, Role.FINANCIAL], "/v1/x")
    assert decision.allowed


def test_decide_without_viewer_raises_unauthenticated() -> None:
    with pytest.raises(Unauthenticated):
        AccessGuard.decide(None, [Role.PMO], "/v1/x")


def test_decide_denies_with_display_names() -> None:
    decision = AccessGuard.decide(
        make_viewer(Role.TECH_LEAD), [Role.PMO, Role.FINANCIAL], "/v1/reports"
    )
    assert not decision.allowed
    assert decision.required_roles == (
        "Gerente de Projetos / PMO",
        "Financeiro / Controladoria",
    )
    assert decision.viewer_role == "tech_lead"
    assert decision.message == (
        "Requer perfil: Gerente de Projetos / PMO ou Financeiro / Controladoria"
    )


def test_rank_does_not_imply_access() -> None:
    decision = AccessGuard.decide(make_viewer(Role.SYSTEM_ADMIN), [Role.RESOURCE], "/v1/x")
    assert not decision.allowed


def test_unknown_role_denied() -> None:
    decision = AccessGuard.decide(make_viewer("ceo"), [Role.EXECUTIVE], "/v1/x")
    assert not decision.allowed
    assert decision.viewer_role == "ceo"


@pytest.mark.asyncio
async def test_check_role_allow_emits_nothing(access_guard, audit_sink) -> None:
    decision = await access_guard.check_role(make_viewer(Role.FINANCIAL), [Role.FINANCIAL], "/v1/x")
    assert decision.allowed
    assert audit_sink.entries == []


@pytest.mark.asyncio
async def test_check_role_deny_emits_one_audit_entry(access_guard, audit_sink) -> None:
    viewer = make_viewer(Role.TECH_LEAD, id="tl-1")
    decision = await access_guard.check_role(viewer, [Role.PMO, Role.FINANCIAL], "/v1/reports")

    assert not decision.allowed
    assert len(audit_sink.entries) == 1
    entry = audit_sink.entries[0]
    assert entry.user_id == "tl-1"
    assert entry.user_role == "tech_lead"
    assert entry.action == "ACCESS_DENIED"
    assert entry.resource == "/v1/reports"
    assert entry.changes == {"requiredRoles": ["pmo", "financial"]}
    assert entry.ip_address == "10.0.0.1"
    assert entry.user_agent == "pytest"


@pytest.mark.asyncio
async def test_check_role_unauthenticated_emits_nothing(access_guard, audit_sink) -> None:
    with pytest.raises(Unauthenticated):
        await access_guard.check_role(None, [Role.PMO], "/v1/x")
    assert audit_sink.entries == []


@pytest.mark.asyncio
async def test_audit_failure_does_not_change_decision() -> None:
    sink = FailingAuditSink()
    guard = AccessGuard(AccessDeniedRecorder(sink))
    decision = await guard.check_role(make_viewer(Role.RESOURCE), [Role.PMO], "/v1/x")
    assert sink.calls == 1
    with pytest.raises(Forbidden):
        decision.enforce()


@pytest.mark.asyncio
async def test_guard_without_recorder() -> None:
    decision = await AccessGuard().check_role(make_viewer(Role.RESOURCE), [Role.PMO], "/v1/x")
    assert not decision.allowed
