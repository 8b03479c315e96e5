# forum/infra/jwt/jwt_token_provider.py
from __future__ import annotations

import binascii
import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

import jwt
from jwt.utils import base64url_decode, base64url_encode

from forum.services._shared.ports import Identity, IssuedToken, TokenConfig, TokenProvider

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(UTC)


@dataclass(slots=True)
class JWTTokenProvider(TokenProvider):
    """
    HMAC-signed JWT adapter built on PyJWT.

    Claims: ``sub`` (user id as string), ``iat`` and ``exp``. ``exp`` keeps
    sub-second precision so a token is valid strictly before ``iat + ttl``
    and invalid from that instant on.

    .. note::
       The order of checks is signature → expiry → identity. Every failure
       returns ``None``; the reason only reaches DEBUG logs.
    """

    config: TokenConfig
    clock: Callable[[], datetime] = field(default=_utcnow)

    def issue(self, user_id: int) -> IssuedToken:
        now = self.clock()
        expires_at = now + self.config.ttl
        payload: dict[str, Any] = {
            "sub": str(user_id),
            "iat": int(now.timestamp()),
            "exp": expires_at.timestamp(),
        }
        token = jwt.encode(payload, self.config.secret_key, algorithm=self.config.algorithm)
        return IssuedToken(token=token, expires_at=expires_at)

    def verify(self, token: str) -> Identity | None:
        if not isinstance(token, str) or not token:
            return self._reject("empty")

        # 1) Signature (expiry is checked below against our own clock)
        try:
            claims = jwt.decode(
                token,
                self.config.secret_key,
                algorithms=[self.config.algorithm],
                options={
                    "require": ["exp", "sub"],
                    "verify_exp": False,
                    "verify_iat": False,
                },
            )
        except jwt.InvalidTokenError as exc:
            return self._reject(type(exc).__name__)

        if not self._has_canonical_signature(token):
            # Base64url padding bits are ignored by decoders; refuse the variants.
            return self._reject("non_canonical_signature")

        # 2) Expiry
        exp = claims.get("exp")
        if isinstance(exp, bool) or not isinstance(exp, int | float):
            return self._reject("bad_exp")
        if self.clock().timestamp() >= exp:
            return self._reject("expired")

        # 3) Identity
        sub = claims.get("sub")
        if not isinstance(sub, str) or not sub.isdigit() or int(sub) <= 0:
            return self._reject("bad_subject")

        return Identity(user_id=int(sub), expires_at=datetime.fromtimestamp(exp, tz=UTC))

    @staticmethod
    def _has_canonical_signature(token: str) -> bool:
        signature = token.rsplit(".", 1)[-1]
        try:
            return base64url_encode(base64url_decode(signature)).decode("ascii") == signature
        except (binascii.Error, ValueError):
            return False

    @staticmethod
    def _reject(reason: str) -> None:
        logger.debug("token.rejected", extra={"reason": reason})
        return None
