"""Repository ports."""

from projectguard.application.ports.repositories.audit_log_repository import (
    AuditLogRepository,
)
from projectguard.application.ports.repositories.membership_repository import (
    MembershipRepository,
)
from projectguard.application.ports.repositories.project_repository import (
    ProjectRepository,
)
from projectguard.application.ports.repositories.task_repository import TaskRepository
from projectguard.application.ports.repositories.user_repository import UserRepository

__all__ = [
    "AuditLogRepository",
    "MembershipRepository",
    "ProjectRepository",
    "TaskRepository",
    "UserRepository",
]
