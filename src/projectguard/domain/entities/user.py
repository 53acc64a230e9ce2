"""User directory entry."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class User:
    """Collaborator record - role, tower and the raw serialized row."""

    id: str
    name: str | None = None
    role: str | None = None
    tower: str | None = None
    email: str | None = None
    auth_user_id: str | None = None
    active: bool = True
    record: dict[str, Any] = field(default_factory=dict)

    def to_record(self) -> dict[str, Any]:
        return {
            **self.record,
            "id": self.id,
            "name": self.name,
            "role": self.role,
            "tower": self.tower,
            "email": self.email,
        }
