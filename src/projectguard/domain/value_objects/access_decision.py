"""Access decision - outcome of a role or resource check."""

from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from projectguard.domain.exceptions import Forbidden, NotFound


class AccessOutcome(StrEnum):
    """Possible outcomes of an access check."""

    ALLOW = "allow"
    DENY = "deny"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class AccessDecision:
    """Result of AccessGuard or ResourceAccessValidator.

    ``subject`` carries the fetched project or task on allow so handlers
    do not fetch it twice. ``is_responsible`` is only meaningful for
    project decisions.
    """

    outcome: AccessOutcome
    resource: str
    message: str | None = None
    required_roles: tuple[str, ...] = ()
    viewer_role: str | None = None
    subject: Any = None
    is_responsible: bool = False

    @property
    def allowed(self) -> bool:
        return self.outcome is AccessOutcome.ALLOW

    @classmethod
    def allow(
        cls, resource: str, subject: Any = None, is_responsible: bool = False
    ) -> "AccessDecision":
        return cls(
            AccessOutcome.ALLOW, resource, subject=subject, is_responsible=is_responsible
        )

    @classmethod
    def deny(
        cls,
        resource: str,
        message: str,
        required_roles: tuple[str, ...] = (),
        viewer_role: str | None = None,
    ) -> "AccessDecision":
        return cls(
            AccessOutcome.DENY,
            resource,
            message=message,
            required_roles=required_roles,
            viewer_role=viewer_role,
        )

    @classmethod
    def not_found(cls, resource: str, message: str) -> "AccessDecision":
        return cls(AccessOutcome.NOT_FOUND, resource, message=message)

    def enforce(self) -> "AccessDecision":
        """Return self when allowed, otherwise raise Forbidden or NotFound."""
        if self.outcome is AccessOutcome.NOT_FOUND:
            raise NotFound(self.message or "Recurso não encontrado", resource=self.resource)
        if self.outcome is AccessOutcome.DENY:
            raise Forbidden(
                self.message or "Acesso negado",
                required_roles=self.required_roles,
                viewer_role=self.viewer_role,
            )
        return self
