"""User repository: credential lookups by unique username."""

from __future__ import annotations

from forum.models.user import User
from forum.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Persistence-only repository for :class:`User`.

    It never hashes or verifies passwords; that belongs to the services.
    """

    model = User

    def _unique_fields(self):
        return {"username": User.username}

    def get_by_username(self, username: str) -> User | None:
        """Fetch a user by exact username, ignoring surrounding whitespace."""
        return self.find_unique_by("username", username.strip())
