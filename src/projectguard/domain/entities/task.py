"""Task entity."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Task:
    """Task with its assigned developer and optional collaborators."""

    id: str
    project_id: str | None = None
    developer_id: str | None = None
    collaborator_ids: tuple[str, ...] = ()
    record: dict[str, Any] = field(default_factory=dict)

    def involves(self, user_id: str) -> bool:
        """True if ``user_id`` is the assigned developer or a collaborator."""
        return user_id == self.developer_id or user_id in self.collaborator_ids

    def to_record(self) -> dict[str, Any]:
        return {
            **self.record,
            "id": self.id,
            "project_id": self.project_id,
            "developer_id": self.developer_id,
            "collaboratorIds": list(self.collaborator_ids),
        }
