"""Domain entities."""

from projectguard.domain.entities.project import Project
from projectguard.domain.entities.task import Task
from projectguard.domain.entities.user import User
from projectguard.domain.entities.viewer import Viewer

__all__ = [
    "Project",
    "Task",
    "User",
    "Viewer",
]
