"""Audit sink port - receives denied-access events."""

from typing import Protocol

from projectguard.application.dto.audit_entry import AuditEntry


class AuditSink(Protocol):
    """Port for writing audit entries. Implementations may raise."""

    async def create_audit_log(self, entry: AuditEntry) -> None: ...
