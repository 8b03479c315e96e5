"""API v1 blueprint package bundling versioned routes."""

from __future__ import annotations

from flask import Blueprint

API_VERSION = "v1"

# Blueprints are imported here only, after API_VERSION is defined.
from .auth import bp as auth_bp  # noqa: E402
from .health import bp as health_bp  # noqa: E402
from .posts import bp as posts_bp  # noqa: E402
from .reactions import bp as reactions_bp  # noqa: E402
from .replies import bp as replies_bp  # noqa: E402
from .search import bp as search_bp  # noqa: E402

# Each tuple: (blueprint, url_prefix_relative_to_version)
REGISTRY: list[tuple[Blueprint, str]] = [
    (health_bp, ""),  # -> /api/v1/health
    (auth_bp, "/auth"),
    (posts_bp, "/posts"),
    (replies_bp, "/replies"),
    (reactions_bp, "/reactions"),
    (search_bp, "/search"),
]
