"""Project entity."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Project:
    """Project as served by the data layer.

    ``record`` holds every serialized attribute, financial and planning
    data included; redaction happens on a copy of it.
    """

    id: str
    responsible_user_id: str | None = None
    project_manager_id: str | None = None
    manager: str | None = None
    record: dict[str, Any] = field(default_factory=dict)

    def is_responsible(self, user_id: str) -> bool:
        """True if ``user_id`` is the responsible user or project manager."""
        return is_responsible(self.responsible_user_id, self.project_manager_id, user_id)

    def to_record(self) -> dict[str, Any]:
        return {
            **self.record,
            "id": self.id,
            "responsible_user_id": self.responsible_user_id,
            "project_manager_id": self.project_manager_id,
            "manager": self.manager,
        }


def is_responsible(
    responsible_user_id: object, project_manager_id: object, user_id: str
) -> bool:
    if not user_id:
        return False
    return str(user_id) in {
        str(v) for v in (responsible_user_id, project_manager_id) if v is not None
    }
