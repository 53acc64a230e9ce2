"""Viewer - the authenticated actor attached to a request."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Viewer:
    """Authenticated user for the duration of one request.

    ``role`` is the raw identifier from the user directory. Roles outside
    the catalog are kept as-is so that every rule denies them.
    """

    id: str
    role: str
    name: str | None = None
    tower: str | None = None
    ip_address: str | None = None
    user_agent: str | None = None
