"""Catalog of redactable attributes per resource type.

Keys are serialized attribute names as they leave the data layer, legacy
aliases included (``budget`` mirrors ``valor_total_rs``, ``hourlyCost``
mirrors ``custo_hora``).
"""

from dataclasses import dataclass
from enum import StrEnum
from types import MappingProxyType


class ResourceType(StrEnum):
    """Resource types with redactable attributes."""

    PROJECT = "project"
    USER = "user"
    TASK = "task"


@dataclass(frozen=True)
class SensitiveFieldSet:
    """Named groups of attributes for one resource type."""

    groups: MappingProxyType[str, frozenset[str]]

    def __getitem__(self, group: str) -> frozenset[str]:
        return self.groups[group]

    def get(self, group: str) -> frozenset[str]:
        return self.groups.get(group, frozenset())


CRITICAL = "critical"
SENSITIVE = "sensitive"
COST = "cost"
AUTH = "auth"
ALLOCATION = "allocation"


SENSITIVE_FIELDS: MappingProxyType[ResourceType, SensitiveFieldSet] = MappingProxyType({
    ResourceType.PROJECT: SensitiveFieldSet(MappingProxyType({
        # Financial data
        CRITICAL: frozenset({
            "custo_hora",
            "hourlyCost",
            "valor_total_rs",
            "margem",
            "resultado",
            "custo_atual",
            "custo_para_terminar",
            "budget",
        }),
        # Planning and risk data
        SENSITIVE: frozenset({
            "allocated_hours",
            "gaps_issues",
            "important_considerations",
            "weekly_status_report",
            "risks",
        }),
    })),
    ResourceType.USER: SensitiveFieldSet(MappingProxyType({
        COST: frozenset({"custo_hora", "hourlyCost", "monthlyAvailableHours"}),
        AUTH: frozenset({"password", "passwordHash", "resetToken"}),
    })),
    ResourceType.TASK: SensitiveFieldSet(MappingProxyType({
        ALLOCATION: frozenset({"allocated_hours"}),
    })),
})


def fields_for(resource_type: ResourceType, group: str) -> frozenset[str]:
    """Attribute names in ``group`` for ``resource_type``."""
    return SENSITIVE_FIELDS[resource_type].get(group)
