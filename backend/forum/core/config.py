"""Environment-driven configuration classes for the forum API."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Final

from dotenv import load_dotenv

ENV_VAR: Final[str] = "APP_ENV"  # 'development' | 'testing' | 'production'

# Placeholder secrets; production start-up refuses them
DEFAULT_SECRET_KEY: Final[str] = "CHANGE_ME"
DEFAULT_JWT_SECRET_KEY: Final[str] = "CHANGE_ME_JWT"

_TRUTHY = frozenset({"1", "true", "yes", "y", "on"})

# Reads ./.env when present; real environment variables win
load_dotenv()


def env_bool(name: str, default: bool = False) -> bool:
    """Read a boolean flag (``1/true/yes/y/on``, case-insensitive)."""
    val = os.getenv(name)
    if val is None:
        return default
    return val.strip().lower() in _TRUTHY


def env_int(name: str, default: int) -> int:
    """Read an integer, falling back to ``default`` when unset or blank."""
    val = os.getenv(name)
    if val is None or not val.strip():
        return default
    return int(val)


class BaseConfig:
    """Settings shared by every environment.

    Attributes
    ----------
    APP_ENV: str
        Name of the active environment; ``flask seed`` refuses ``production``.
    API_BASE_PREFIX: str
        Mount point of the versioned API (``/api`` gives ``/api/v1/...``).
    JWT_SECRET_KEY: str
        HMAC key for session tokens. Read once at start-up into an immutable
        :class:`~forum.services._shared.ports.TokenConfig`.
    JWT_ALGORITHM: str
        Token signing algorithm.
    JWT_ACCESS_TOKEN_TTL_SECONDS: int
        Session token lifetime.
    PASSWORD_HASH_METHOD: str
        Werkzeug method string used by the password hasher.
    CORS_ORIGINS: str
        Comma-separated browser origins allowed to call the API (``*`` for any).
    USE_PROXYFIX / PROXYFIX_HOPS:
        Trust ``X-Forwarded-*`` headers from this many reverse proxies.
    """

    APP_ENV = "development"
    API_BASE_PREFIX = "/api"

    # Flask
    SECRET_KEY = os.getenv("SECRET_KEY", DEFAULT_SECRET_KEY)
    JSON_SORT_KEYS = False
    PROPAGATE_EXCEPTIONS = False
    DEBUG = False
    TESTING = False

    # Session tokens and passwords
    JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", DEFAULT_JWT_SECRET_KEY)
    JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
    JWT_ACCESS_TOKEN_TTL_SECONDS = env_int("JWT_ACCESS_TOKEN_TTL_SECONDS", 3600)
    PASSWORD_HASH_METHOD = os.getenv("PASSWORD_HASH_METHOD", "scrypt")

    # Database
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", "sqlite:///./forum.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ECHO = env_bool("SQLALCHEMY_ECHO", False)

    # HTTP edge
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "http://localhost:5173")
    CORS_MAX_AGE = env_int("CORS_MAX_AGE", 600)
    USE_PROXYFIX = env_bool("USE_PROXYFIX", True)
    PROXYFIX_HOPS = env_int("PROXYFIX_HOPS", 1)


class DevelopmentConfig(BaseConfig):
    """Local development: debug on unless ``FLASK_DEBUG`` says otherwise."""

    APP_ENV = "development"
    DEBUG = env_bool("FLASK_DEBUG", True)


class TestingConfig(BaseConfig):
    """Automated test runs.

    In-memory SQLite unless ``TEST_DATABASE_URL`` is set, a fixed signing
    secret, and a cheap pbkdf2 round count so hashing does not dominate test
    time. Exceptions propagate so pytest shows tracebacks.
    """

    APP_ENV = "testing"
    TESTING = True
    JWT_SECRET_KEY = "testing-secret-key-with-enough-length-for-hs256"
    PASSWORD_HASH_METHOD = "pbkdf2:sha256:1000"
    SQLALCHEMY_DATABASE_URI = os.getenv("TEST_DATABASE_URL", "sqlite:///:memory:")
    PROPAGATE_EXCEPTIONS = True


class ProductionConfig(BaseConfig):
    """Production: ``JWT_SECRET_KEY`` and ``DATABASE_URL`` must come from the environment."""

    APP_ENV = "production"
    SQLALCHEMY_ECHO = False


CONFIG_MAP: Mapping[str, type[BaseConfig]] = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
}


def get_config() -> type[BaseConfig]:
    """Return the config class named by ``APP_ENV`` (development when unset or unknown)."""
    name = os.getenv(ENV_VAR, "development").strip().lower()
    return CONFIG_MAP.get(name, DevelopmentConfig)
