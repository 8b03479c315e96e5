"""CORS policy for browser clients of the forum API."""

from __future__ import annotations

from flask import Flask
from flask_cors import CORS

from forum.core.logger import REQUEST_ID_HEADER

# Browsers only need to read these on cross-origin responses
EXPOSED_HEADERS = [REQUEST_ID_HEADER, "WWW-Authenticate", "Retry-After"]
ALLOWED_HEADERS = ["Authorization", "Content-Type", REQUEST_ID_HEADER]


def parse_origins(raw: str | None) -> list[str]:
    """Split a comma-separated ``CORS_ORIGINS`` value; ``[]`` means any origin."""
    origins = [o.strip() for o in (raw or "").split(",") if o.strip()]
    return [] if "*" in origins else origins


def init_app(app: Flask) -> None:
    """Enable CORS on the routes below ``API_BASE_PREFIX``.

    Session tokens travel in the ``Authorization`` header, never in cookies,
    so credentialed CORS stays off even when origins are listed.
    """
    origins = parse_origins(app.config.get("CORS_ORIGINS"))
    api_base = app.config.get("API_BASE_PREFIX", "/api").rstrip("/")

    CORS(
        app,
        resources={rf"{api_base}/*": {"origins": origins or "*"}},
        methods=["GET", "POST", "OPTIONS"],
        allow_headers=ALLOWED_HEADERS,
        expose_headers=EXPOSED_HEADERS,
        supports_credentials=False,
        max_age=app.config.get("CORS_MAX_AGE", 600),
    )
