# forum/services/auth/service.py
from __future__ import annotations

import logging

from forum.models.user import User
from forum.repositories.user import UserRepository
from forum.services._shared.base import BaseService
from forum.services._shared.errors import AuthError
from forum.services._shared.ports import Identity, PasswordHasher, TokenProvider
from forum.services.auth.dto import LoginIn, TokenOut, UserPublicOut

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"


def to_user_public(user: User) -> UserPublicOut:
    """Map an ORM ``User`` to :class:`UserPublicOut`."""
    return UserPublicOut(id=user.id, username=user.username, created_at=user.created_at)


class AuthService(BaseService):
    """
    Login and identity lookup.

    Tokens are issued and verified by a pluggable :class:`TokenProvider`;
    passwords are checked through a :class:`PasswordHasher`.
    """

    def __init__(self, *, token_provider: TokenProvider, password_hasher: PasswordHasher) -> None:
        """
        :param token_provider: Adapter issuing signed session tokens.
        :param password_hasher: Adapter verifying stored password digests.
        """
        super().__init__()
        self.tokens = token_provider
        self.hasher = password_hasher
        self._dummy_digest: str | None = None

    # ------------------------------------------------------------------ #
    # Login
    # ------------------------------------------------------------------ #

    def login(self, dto: LoginIn) -> TokenOut:
        """
        Authenticate credentials and issue a session token.

        :param dto: Login input.
        :returns: Token plus its expiry.
        :raises AuthError: If the user is unknown or the password is wrong.
        """
        username = (dto.username or "").strip()
        with self.ro_uow() as uow:
            repo: UserRepository = uow.users
            user = repo.get_by_username(username) if username else None
            if user is None:
                # Same hashing cost whether or not the username exists
                self.hasher.verify(dto.password or "", self._dummy())
                logger.info("auth.login_failed", extra={"username": username})
                raise AuthError(INVALID_CREDENTIALS)
            if not self.hasher.verify(dto.password or "", user.password_hash):
                logger.info("auth.login_failed", extra={"username": username})
                raise AuthError(INVALID_CREDENTIALS)
            user_id = user.id

        issued = self.tokens.issue(user_id)
        logger.info("auth.login", extra={"user_id": user_id})
        return TokenOut(access_token=issued.token, expires_at=issued.expires_at)

    # ------------------------------------------------------------------ #
    # Identity
    # ------------------------------------------------------------------ #

    def whoami(self, identity: Identity) -> UserPublicOut:
        """
        Return the user behind a verified identity.

        :raises AuthError: If the user no longer exists.
        """
        with self.ro_uow() as uow:
            user = uow.users.get(identity.user_id)
            if user is None:
                raise AuthError()
            return to_user_public(user)

    def _dummy(self) -> str:
        if self._dummy_digest is None:
            self._dummy_digest = self.hasher.hash("not-a-real-password")
        return self._dummy_digest
