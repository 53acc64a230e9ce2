"""Audit log port."""

from typing import Protocol

from projectguard.application.dto.audit_entry import AuditEntry


class AuditLogRepository(Protocol):
    """Port for the audit log sink."""

    async def create(self, entry: AuditEntry) -> None: ...
