# forum/infra/security/werkzeug_password_hasher.py
from __future__ import annotations

from dataclasses import dataclass

from werkzeug.security import check_password_hash, generate_password_hash

from forum.services._shared.ports import PasswordHasher


@dataclass(frozen=True, slots=True)
class WerkzeugPasswordHasher(PasswordHasher):
    """
    Password hasher backed by :mod:`werkzeug.security`.

    Digests are self-describing (``method$salt$hash``) so verification reuses
    the embedded salt and parameters; the comparison is ``hmac.compare_digest``.

    :param method: Werkzeug method string (``scrypt`` or ``pbkdf2:sha256[:iterations]``).
    :param salt_length: Length of the random salt generated per call.
    """

    method: str = "scrypt"
    salt_length: int = 16

    def hash(self, plaintext: str) -> str:
        if not isinstance(plaintext, str) or not plaintext:
            raise ValueError("Password must be a non-empty string.")
        return generate_password_hash(plaintext, method=self.method, salt_length=self.salt_length)

    def verify(self, plaintext: str, digest: str) -> bool:
        if not isinstance(plaintext, str) or not isinstance(digest, str) or not digest:
            return False
        try:
            # ``check_password_hash`` is untyped; coerce to bool for mypy.
            return bool(check_password_hash(digest, plaintext))
        except (ValueError, TypeError, OverflowError):
            # unknown method, bad iteration count, corrupt scrypt params...
            return False
