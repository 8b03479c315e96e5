from __future__ import annotations

from typing import Protocol


class PasswordHasher(Protocol):
    """
    Port for salted, deliberately slow password digests.

    Implementations hold no shared mutable state and are safe to call from
    concurrent requests.
    """

    def hash(self, plaintext: str) -> str:
        """
        Return a salted digest of ``plaintext``; two calls never return the same value.

        :raises ValueError: If ``plaintext`` is empty or not a string.
        """
        ...

    def verify(self, plaintext: str, digest: str) -> bool:
        """Return ``True`` when ``plaintext`` matches ``digest``; never raises."""
        ...
