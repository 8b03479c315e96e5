"""
UserRegistrationService
=======================

Creates a new ``User`` after checking the username is free. The password is
hashed through the configured :class:`PasswordHasher`; the raw value never
reaches the repository.
"""

from __future__ import annotations

import logging

from sqlalchemy.exc import IntegrityError

from forum.repositories.user import UserRepository
from forum.services._shared.base import BaseService
from forum.services._shared.errors import ConflictError, ValidationError, violates
from forum.services._shared.ports import PasswordHasher
from forum.services.auth.service import to_user_public
from forum.services.registration.dto import UserRegistrationIn, UserRegistrationOut

logger = logging.getLogger(__name__)

USERNAME_MAX_LENGTH = 50

# SQLite names the column, PostgreSQL names the unique index
USERNAME_CONSTRAINTS = ("users.username", "ix_users_username")


class UserRegistrationService(BaseService):
    """
    Orchestrates user self-registration.
    """

    def __init__(self, *, password_hasher: PasswordHasher) -> None:
        super().__init__()
        self.hasher = password_hasher

    def register(self, dto: UserRegistrationIn) -> UserRegistrationOut:
        """
        Register a user.

        :param dto: Registration input.
        :type dto: :class:`UserRegistrationIn`
        :returns: Registration result payload.
        :rtype: :class:`UserRegistrationOut`
        :raises ValidationError: When username or password is empty.
        :raises ConflictError: When the username is already taken.
        """
        username = (dto.username or "").strip()
        if not username:
            raise ValidationError("Username is required.")
        if len(username) > USERNAME_MAX_LENGTH:
            raise ValidationError(f"Username must be at most {USERNAME_MAX_LENGTH} characters.")
        if not dto.password:
            raise ValidationError("Password is required.")

        # Hash outside the transaction; it is the slow part
        digest = self.hasher.hash(dto.password)

        try:
            with self.rw_uow() as uow:
                repo: UserRepository = uow.users
                if repo.find_unique_by("username", username) is not None:
                    raise ConflictError("User", "username already taken")
                user = repo.add(repo.model(username=username, password_hash=digest))
                out = UserRegistrationOut(user=to_user_public(user))
        except IntegrityError as exc:
            if not any(violates(exc, name) for name in USERNAME_CONSTRAINTS):
                raise
            # Lost a race against a concurrent registration of the same name
            logger.info("user.register_conflict", extra={"username": username})
            raise ConflictError("User", "username already taken") from exc

        logger.info("user.registered", extra={"user_id": out.user.id, "username": username})
        return out
