"""Bearer-token authentication guard.

The guard only inspects the ``Authorization`` header value it is given and
delegates signature and expiry checks to the :class:`TokenProvider`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from forum.services._shared.ports import Identity, TokenProvider

BEARER_SCHEME = "bearer"


class RejectionReason(str, Enum):
    MISSING_TOKEN = "missing_token"
    INVALID_TOKEN = "invalid_token"


@dataclass(frozen=True, slots=True)
class GuardResult:
    """
    Outcome of :meth:`AuthGuard.check`.

    Exactly one of ``identity`` and ``reason`` is set.
    """

    identity: Identity | None = None
    reason: RejectionReason | None = None

    @property
    def authenticated(self) -> bool:
        return self.identity is not None


def extract_bearer(header: str | None) -> str | None:
    """
    Return the token of a ``Bearer <token>`` header value.

    The scheme is case-insensitive; anything other than exactly one
    non-empty token after it yields ``None``.

    :param header: Raw ``Authorization`` header value.
    :type header: str | None
    :returns: Token or ``None``.
    :rtype: str | None
    """
    if not header or not isinstance(header, str):
        return None
    parts = header.split()
    if len(parts) != 2 or parts[0].lower() != BEARER_SCHEME:
        return None
    return parts[1]


@dataclass(frozen=True, slots=True)
class AuthGuard:
    """Turn an ``Authorization`` header into an :class:`Identity` or a rejection."""

    token_provider: TokenProvider

    def check(self, header: str | None) -> GuardResult:
        token = extract_bearer(header)
        if token is None:
            return GuardResult(reason=RejectionReason.MISSING_TOKEN)
        identity = self.token_provider.verify(token)
        if identity is None:
            return GuardResult(reason=RejectionReason.INVALID_TOKEN)
        return GuardResult(identity=identity)
