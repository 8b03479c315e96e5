"""Liveness and database reachability."""

from __future__ import annotations

from flask import Blueprint, current_app
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from forum.api.deps import json_response, timing
from forum.core.extensions import db

bp = Blueprint("health", __name__)


def _database_reachable() -> bool:
    try:
        db.session.execute(text("SELECT 1"))
    except SQLAlchemyError:
        current_app.logger.warning("health.db_unreachable", exc_info=True)
        db.session.rollback()
        return False
    return True


@bp.get("/health")
@timing
def healthcheck():
    """``200`` when the database answers, ``503`` (``status=degraded``) otherwise."""
    db_ok = _database_reachable()
    payload = {
        "status": "ok" if db_ok else "degraded",
        "db": "ok" if db_ok else "fail",
        "version": current_app.config.get("APP_VERSION", "dev"),
    }
    return json_response(payload, status=200 if db_ok else 503)
