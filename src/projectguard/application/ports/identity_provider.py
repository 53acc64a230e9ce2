"""Identity provider port - resolves an issued bearer token."""

from dataclasses import dataclass
from typing import Protocol


@dataclass
class TokenIdentity:
    """Identity claims from an active token."""

    subject: str
    email: str | None = None
    username: str | None = None


class IdentityProvider(Protocol):
    """Port for token introspection. Returns None for inactive tokens."""

    def decode_token(self, token: str) -> TokenIdentity | None: ...
