"""Domain value objects."""

from projectguard.domain.value_objects.access_decision import AccessDecision, AccessOutcome
from projectguard.domain.value_objects.role import Role, display_name, display_names
from projectguard.domain.value_objects.sensitive_fields import (
    SENSITIVE_FIELDS,
    ResourceType,
    SensitiveFieldSet,
    fields_for,
)

__all__ = [
    "SENSITIVE_FIELDS",
    "AccessDecision",
    "AccessOutcome",
    "ResourceType",
    "Role",
    "SensitiveFieldSet",
    "display_name",
    "display_names",
    "fields_for",
]
