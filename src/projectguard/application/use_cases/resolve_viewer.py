"""Resolve the request's Viewer from an issued bearer token."""

import logging

from projectguard.application.ports import IdentityProvider
from projectguard.domain.entities import User, Viewer
from projectguard.domain.value_objects import Role

logger = logging.getLogger(__name__)


class ResolveViewerUseCase:
    """Maps an active token to the user directory entry behind it.

    Lookup is by auth subject first, then by normalized e-mail. Users with
    no role are treated as resources.
    """

    def __init__(
        self,
        unit_of_work_factory: type,
        identity_provider: IdentityProvider,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._identity = identity_provider

    async def execute(
        self,
        token: str,
        ip_address: str | None = None,
        user_agent: str | None = None,
    ) -> Viewer | None:
        """Return the Viewer, or None if the token or user cannot be resolved."""
        identity = self._identity.decode_token(token)
        if identity is None:
            return None

        async with self._uow_factory() as uow:
            user = await uow.users.get_by_auth_id(identity.subject)
            email = (identity.email or "").strip().lower()
            if user is None and email:
                user = await uow.users.get_by_email(email)

        if user is None:
            logger.info("Token subject %s is not mapped to a user", identity.subject)
            return None
        if not user.active:
            logger.info("Inactive user %s presented a valid token", user.id)
            return None
        return to_viewer(user, ip_address=ip_address, user_agent=user_agent)


def to_viewer(
    user: User, ip_address: str | None = None, user_agent: str | None = None
) -> Viewer:
    role = (user.role or "").strip().lower() or Role.RESOURCE
    known = Role.parse(role)
    return Viewer(
        id=user.id,
        role=known if known is not None else role,
        name=user.name,
        tower=user.tower,
        ip_address=ip_address,
        user_agent=user_agent,
    )
