"""
forum.services._shared.ports
============================

Collection of *ports* (hexagonal interfaces) that define the contracts for
credential hashing and session-token handling.

These ports decouple the service layer from concrete implementations.

Modules
-------
- :mod:`password_hasher`:
    Defines :class:`~.PasswordHasher`: salted one-way password digests.

- :mod:`token_provider`:
    Defines :class:`~.TokenProvider`, :class:`~.TokenConfig` and
    :class:`~.Identity`: signed, time-bounded session tokens.

Design Notes
------------
Concrete adapters live under ``forum.infra`` and are built once per
application in :func:`forum.core.extensions.init_security`.
"""

from __future__ import annotations

from .password_hasher import PasswordHasher
from .token_provider import Identity, IssuedToken, TokenConfig, TokenProvider

__all__ = [
    "Identity",
    "IssuedToken",
    "PasswordHasher",
    "TokenConfig",
    "TokenProvider",
]
