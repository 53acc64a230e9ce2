"""Role gate for endpoint categories."""

from collections.abc import Iterable

from projectguard.application.access.audit import AccessDeniedRecorder
from projectguard.domain.entities import Viewer
from projectguard.domain.exceptions import Unauthenticated
from projectguard.domain.value_objects import AccessDecision, display_names


class AccessGuard:
    """Checks the viewer's role against an endpoint's allow-list."""

    def __init__(self, recorder: AccessDeniedRecorder | None = None) -> None:
        self._recorder = recorder

    @staticmethod
    def decide(
        viewer: Viewer | None, allowed_roles: Iterable[str], path: str
    ) -> AccessDecision:
        """Pure role check. Raises Unauthenticated when no viewer is attached."""
        if viewer is None:
            raise Unauthenticated()
        allowed = tuple(allowed_roles)
        if viewer.role in allowed:
            return AccessDecision.allow(path)
        names = tuple(display_names(allowed))
        return AccessDecision.deny(
            path,
            f"Requer perfil: {' ou '.join(names)}",
            required_roles=names,
            viewer_role=str(viewer.role),
        )

    async def check_role(
        self, viewer: Viewer | None, allowed_roles: Iterable[str], path: str
    ) -> AccessDecision:
        """Role check that records an audit entry on denial."""
        allowed = tuple(allowed_roles)
        decision = self.decide(viewer, allowed, path)
        if not decision.allowed and self._recorder is not None:
            await self._recorder.record(viewer, path, allowed)
        return decision
