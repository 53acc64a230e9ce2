"""Application DTOs."""

from projectguard.application.dto.audit_entry import ACCESS_DENIED, AuditEntry

__all__ = ["ACCESS_DENIED", "AuditEntry"]
