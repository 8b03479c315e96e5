"""Expose the application factory at package level.

Provide convenient access to :func:`forum.factory.create_app` so callers can
``from forum import create_app`` (e.g. ``gunicorn "forum:create_app()"``).
"""

from __future__ import annotations

from .factory import create_app

__all__ = ["create_app"]
