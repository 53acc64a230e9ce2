"""Role catalog for RBAC."""

from collections.abc import Iterable
from enum import StrEnum
from types import MappingProxyType


class Role(StrEnum):
    """Roles known to the organization.

    Rank and display name are presentation data. Access decisions never
    compare ranks; each rule names the roles it admits.
    """

    SYSTEM_ADMIN = "system_admin"
    EXECUTIVE = "executive"
    PMO = "pmo"
    FINANCIAL = "financial"
    TECH_LEAD = "tech_lead"
    RESOURCE = "resource"

    @property
    def rank(self) -> int:
        return ROLE_HIERARCHY[self]

    @property
    def display_name(self) -> str:
        return ROLE_DISPLAY_NAMES[self]

    @classmethod
    def parse(cls, value: str | None) -> "Role | None":
        """Return the matching Role, or None for unknown identifiers."""
        if not value:
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


ROLE_HIERARCHY: MappingProxyType[Role, int] = MappingProxyType({
    Role.SYSTEM_ADMIN: 6,
    Role.EXECUTIVE: 5,
    Role.PMO: 4,
    Role.FINANCIAL: 4,
    Role.TECH_LEAD: 3,
    Role.RESOURCE: 1,
})

ROLE_DISPLAY_NAMES: MappingProxyType[Role, str] = MappingProxyType({
    Role.SYSTEM_ADMIN: "Administrador do Sistema",
    Role.EXECUTIVE: "Direção / Gestão Executiva",
    Role.PMO: "Gerente de Projetos / PMO",
    Role.FINANCIAL: "Financeiro / Controladoria",
    Role.TECH_LEAD: "Líder Técnico / Torre",
    Role.RESOURCE: "Recurso / Consultor",
})


def display_name(role: str) -> str:
    """Human-readable name for a role; unknown roles display as their identifier."""
    known = Role.parse(role)
    return known.display_name if known else role


def display_names(roles: Iterable[str]) -> list[str]:
    return [display_name(r) for r in roles]
