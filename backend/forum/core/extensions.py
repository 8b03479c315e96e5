"""Global Flask extension instances and initialization helpers."""

from __future__ import annotations

from datetime import timedelta

from flask import Flask, current_app
from flask_migrate import Migrate
from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import MetaData

from forum.core.config import DEFAULT_JWT_SECRET_KEY
from forum.infra.jwt.jwt_token_provider import JWTTokenProvider
from forum.infra.security.werkzeug_password_hasher import WerkzeugPasswordHasher
from forum.services._shared.ports import PasswordHasher, TokenConfig, TokenProvider

# Global naming convention for all constraints
convention = {
    "ix": "ix_%(table_name)s_%(column_0_name)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

metadata = MetaData(naming_convention=convention)

# Global singletons (import-safe)
db: SQLAlchemy = SQLAlchemy(session_options={"autoflush": False}, metadata=metadata)
migrate = Migrate(render_as_batch=True)

TOKEN_PROVIDER_KEY = "forum.token_provider"
PASSWORD_HASHER_KEY = "forum.password_hasher"


def init_app(app: Flask) -> None:
    """Initialize SQLAlchemy, migrations, and the security adapters.

    Parameters
    ----------
    app: flask.Flask
        Application used to bind extension instances. This call imports the
        :mod:`forum.models` package to ensure SQLAlchemy metadata is ready for
        migrations.
    """
    db.init_app(app)

    # Ensure models are imported so Alembic sees metadata
    from forum import models as _models  # noqa: F401

    migrate.init_app(app, db)
    init_security(app)


def init_security(app: Flask) -> None:
    """Build the token provider and password hasher from configuration.

    The signing secret is read exactly once here and frozen into a
    :class:`TokenConfig`; request handlers only ever see the provider.

    :raises RuntimeError: If the placeholder secret is used outside debug/testing.
    """
    secret = str(app.config.get("JWT_SECRET_KEY") or "")
    if secret in {"", DEFAULT_JWT_SECRET_KEY} and not (app.debug or app.testing):
        raise RuntimeError("JWT_SECRET_KEY must be set to a real secret in production.")

    token_cfg = TokenConfig(
        secret_key=secret,
        ttl=timedelta(seconds=int(app.config.get("JWT_ACCESS_TOKEN_TTL_SECONDS", 3600))),
        algorithm=str(app.config.get("JWT_ALGORITHM", "HS256")),
    )
    app.extensions[TOKEN_PROVIDER_KEY] = JWTTokenProvider(config=token_cfg)
    app.extensions[PASSWORD_HASHER_KEY] = WerkzeugPasswordHasher(
        method=str(app.config.get("PASSWORD_HASH_METHOD", "scrypt"))
    )


def get_token_provider() -> TokenProvider:
    """Return the token provider bound to the current application."""
    provider = current_app.extensions.get(TOKEN_PROVIDER_KEY)
    if provider is None:
        raise RuntimeError("Token provider is not initialized. Call init_app() first.")
    return provider


def get_password_hasher() -> PasswordHasher:
    """Return the password hasher bound to the current application."""
    hasher = current_app.extensions.get(PASSWORD_HASHER_KEY)
    if hasher is None:
        raise RuntimeError("Password hasher is not initialized. Call init_app() first.")
    return hasher
