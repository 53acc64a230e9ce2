"""Keycloak OIDC provider for token introspection."""

import logging

from keycloak import KeycloakOpenID

from projectguard.application.ports import TokenIdentity

logger = logging.getLogger(__name__)


class KeycloakProvider:
    """Keycloak OIDC - validates an issued token and extracts its subject."""

    def __init__(
        self,
        server_url: str,
        realm: str,
        client_id: str,
        client_secret: str = "",
    ) -> None:
        self._keycloak = KeycloakOpenID(
            server_url=server_url,
            realm_name=realm,
            client_id=client_id,
            client_secret_key=client_secret,
        )

    def decode_token(self, token: str) -> TokenIdentity | None:
        """Introspect token, return identity claims or None if inactive."""
        try:
            token_info = self._keycloak.introspect(token)
        except Exception:
            logger.warning("Token introspection failed", exc_info=True)
            return None
        if not token_info.get("active"):
            return None
        return TokenIdentity(
            subject=token_info.get("sub", ""),
            email=token_info.get("email"),
            username=token_info.get("preferred_username"),
        )
