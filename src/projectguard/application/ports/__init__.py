"""Application ports - interfaces for external adapters."""

from projectguard.application.ports.audit_sink import AuditSink
from projectguard.application.ports.identity_provider import IdentityProvider, TokenIdentity
from projectguard.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "AuditSink",
    "IdentityProvider",
    "TokenIdentity",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
