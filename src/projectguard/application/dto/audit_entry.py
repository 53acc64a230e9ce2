"""Audit entry DTO."""

from dataclasses import dataclass, field
from typing import Any

ACCESS_DENIED = "ACCESS_DENIED"


@dataclass(frozen=True)
class AuditEntry:
    """Audit log row for a denied access attempt."""

    user_id: str
    user_role: str
    action: str
    resource: str
    changes: dict[str, Any] = field(default_factory=dict)
    ip_address: str | None = None
    user_agent: str | None = None
