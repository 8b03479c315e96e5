# forum/services/auth/dto.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

# ---------------------------- Input DTOs ---------------------------------- #


@dataclass(frozen=True, slots=True)
class LoginIn:
    """
    Input DTO for login.

    :param username: Public handle (surrounding whitespace is ignored).
    :type username: str
    :param password: Raw password (to be verified).
    :type password: str
    """

    username: str
    password: str


# --------------------------- Output DTOs ---------------------------------- #


@dataclass(frozen=True, slots=True)
class TokenOut:
    """
    Output DTO for a successful login.

    :param access_token: Encoded session token.
    :type access_token: str
    :param expires_at: Instant (UTC) from which the token is rejected.
    :type expires_at: datetime
    :param token_type: Scheme to use in the ``Authorization`` header.
    :type token_type: str
    """

    access_token: str
    expires_at: datetime
    token_type: str = "bearer"


@dataclass(frozen=True, slots=True)
class UserPublicOut:
    """
    Public-safe view of a user; never carries the password digest.

    :param id: User identifier.
    :type id: int
    :param username: Public handle.
    :type username: str
    :param created_at: Registration timestamp.
    :type created_at: datetime | None
    """

    id: int
    username: str
    created_at: datetime | None = None
