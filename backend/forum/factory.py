"""Application factory for the forum API."""

from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError, version

from flask import Flask

from forum.core.config import BaseConfig, get_config
from forum.core.logger import configure_logging

log = logging.getLogger(__name__)

DISTRIBUTION = "forum-backend"


def _installed_version() -> str:
    try:
        return version(DISTRIBUTION)
    except PackageNotFoundError:
        return "dev"


def _load_config(app: Flask, config: object | None, instance_file: str | None) -> None:
    app.config.from_object(get_config() if config is None else config)
    if instance_file:
        app.config.from_pyfile(instance_file, silent=True)
    app.config.setdefault("APP_VERSION", _installed_version())


def _init_platform(app: Flask) -> None:
    """Middleware, database, security adapters, request ids and CORS."""
    from forum.core import cors, extensions, logger, proxy

    proxy.init_app(app)
    extensions.init_app(app)
    logger.init_app(app)
    cors.init_app(app)


def _init_interfaces(app: Flask) -> None:
    """HTTP routes, error rendering and ``flask`` CLI commands."""
    from forum import cli
    from forum.api import init_app as init_api
    from forum.core import errors

    init_api(app)
    errors.init_app(app)
    cli.init_app(app)


def create_app(
    config: str | type[BaseConfig] | object | None = None,
    *,
    instance_relative_config: bool = True,
    instance_config_filename: str = "config.py",
) -> Flask:
    """Build the forum application.

    :param config: Config class, import string or object with upper-case
        attributes. ``None`` selects a class from ``APP_ENV``.
    :param instance_relative_config: Also read ``instance/<filename>`` when present.
    :param instance_config_filename: Name of the optional instance config file.
    :returns: Configured :class:`flask.Flask` application.
    :raises RuntimeError: If production settings lack a real signing secret.
    """
    app = Flask(__name__, instance_relative_config=instance_relative_config)
    _load_config(app, config, instance_config_filename if instance_relative_config else None)

    configure_logging(app.config.get("LOG_LEVEL", "INFO"))
    _init_platform(app)
    _init_interfaces(app)

    log.debug("app.created env=%s version=%s", app.config.get("APP_ENV"), app.config["APP_VERSION"])
    return app
