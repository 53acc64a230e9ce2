"""Domain exceptions."""


class ProjectGuardError(Exception):
    """Base exception for projectguard."""

    pass


class Unauthenticated(ProjectGuardError):
    """No authenticated viewer is attached to the request."""

    def __init__(
        self, message: str = "Você precisa estar autenticado para acessar este recurso"
    ) -> None:
        super().__init__(message)
        self.message = message


class Forbidden(ProjectGuardError):
    """Viewer's role or relationship to the resource does not allow access.

    ``required_roles`` holds display names and is only set for role-gate
    failures; relationship failures carry the message alone.
    """

    def __init__(
        self,
        message: str,
        required_roles: tuple[str, ...] = (),
        viewer_role: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.required_roles = required_roles
        self.viewer_role = viewer_role


class NotFound(ProjectGuardError):
    """Requested resource was not found."""

    def __init__(self, message: str, resource: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.resource = resource


class ResourceLookupError(ProjectGuardError):
    """A data-layer collaborator failed while resolving a resource."""

    pass
