"""Access control - role gate, resource validation, denial auditing."""

from projectguard.application.access.access_guard import AccessGuard
from projectguard.application.access.audit import AccessDeniedRecorder
from projectguard.application.access.resource_access import ResourceAccessValidator

__all__ = [
    "AccessDeniedRecorder",
    "AccessGuard",
    "ResourceAccessValidator",
]
