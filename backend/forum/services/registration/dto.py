"""
DTOs for UserRegistrationService.
"""

from __future__ import annotations

from dataclasses import dataclass

from forum.services.auth.dto import UserPublicOut


@dataclass(frozen=True, slots=True)
class UserRegistrationIn:
    """
    Input payload for the registration process.

    :param username: Public handle (unique, trimmed before storage).
    :type username: str
    :param password: Raw password; only its digest is persisted.
    :type password: str
    """

    username: str
    password: str


@dataclass(frozen=True, slots=True)
class UserRegistrationOut:
    """
    Output summary for the registration process.

    :param user: Public-safe user payload.
    :type user: :class:`UserPublicOut`
    """

    user: UserPublicOut
