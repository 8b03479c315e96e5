from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Protocol


@dataclass(frozen=True, slots=True)
class TokenConfig:
    """
    Immutable signing configuration for session tokens.

    :param secret_key: HMAC secret shared by issuer and verifier.
    :type secret_key: str
    :param ttl: Token lifetime measured from issuance.
    :type ttl: timedelta
    :param algorithm: JWS algorithm name (keyed MAC, e.g. ``HS256``).
    :type algorithm: str
    """

    secret_key: str
    ttl: timedelta = timedelta(hours=1)
    algorithm: str = "HS256"

    def __repr__(self) -> str:
        # keep the secret out of logs and tracebacks
        return f"TokenConfig(ttl={self.ttl!r}, algorithm={self.algorithm!r})"


@dataclass(frozen=True, slots=True)
class Identity:
    """
    Authenticated user context derived from a verified token.

    :param user_id: Owner of the session.
    :type user_id: int
    :param expires_at: Absolute expiry of the token (UTC).
    :type expires_at: datetime
    """

    user_id: int
    expires_at: datetime


@dataclass(frozen=True, slots=True)
class IssuedToken:
    """Encoded token plus the expiry that was signed into it."""

    token: str
    expires_at: datetime


class TokenProvider(Protocol):
    """Port for issuing and verifying session tokens."""

    def issue(self, user_id: int) -> IssuedToken:
        """Sign a token binding ``user_id`` to ``now + ttl``."""
        ...

    def verify(self, token: str) -> Identity | None:
        """
        Return the identity carried by ``token``.

        ``None`` covers every failure (bad signature, expired, malformed)
        so callers cannot tell the reasons apart.
        """
        ...
