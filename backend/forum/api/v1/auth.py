"""Authentication endpoints: register, login, whoami."""

from __future__ import annotations

from flask import Blueprint, request

from forum.api.deps import (
    auth_service,
    current_identity,
    json_response,
    registration_service,
    require_auth,
    timing,
)
from forum.schemas import LoginSchema, RegisterSchema, TokenResponseSchema, UserSchema
from forum.services.auth.dto import LoginIn
from forum.services.registration.dto import UserRegistrationIn

bp = Blueprint("auth", __name__)

register_schema = RegisterSchema()
login_schema = LoginSchema()
user_schema = UserSchema()
token_schema = TokenResponseSchema()


@bp.post("/register")
@timing
def register():
    """Register a new user and return the created representation."""

    payload = register_schema.load(request.get_json(silent=True) or {})
    result = registration_service().register(UserRegistrationIn(**payload))
    return json_response({"data": user_schema.dump(result.user)}, status=201)


@bp.post("/login")
@timing
def login():
    """Authenticate credentials and issue an access token."""

    payload = login_schema.load(request.get_json(silent=True) or {})
    token = auth_service().login(LoginIn(**payload))
    return json_response({"data": token_schema.dump(token)})


@bp.get("/whoami")
@require_auth
@timing
def whoami():
    """Return the authenticated user."""

    user = auth_service().whoami(current_identity())
    return json_response({"data": user_schema.dump(user)})
