"""Shared API helpers for request parsing and cross-cutting concerns."""

from __future__ import annotations

import functools
import time
from collections.abc import Callable
from typing import Any, TypeVar, cast

from flask import Response, current_app, g, jsonify, request

from forum.core.errors import Unauthorized
from forum.core.extensions import get_password_hasher, get_token_provider
from forum.services._shared.ports import Identity
from forum.services.auth.guard import AuthGuard, RejectionReason
from forum.services.auth.service import AuthService
from forum.services.posts.service import PostService
from forum.services.reactions.service import ReactionLedger
from forum.services.registration.service import UserRegistrationService

F = TypeVar("F", bound=Callable[..., Any])

_CHALLENGES = {
    RejectionReason.MISSING_TOKEN: "Bearer",
    RejectionReason.INVALID_TOKEN: 'Bearer error="invalid_token"',
}
_MESSAGES = {
    RejectionReason.MISSING_TOKEN: "Authentication required",
    RejectionReason.INVALID_TOKEN: "Invalid or expired token",
}


# ------------------------------ Service wiring ------------------------------


def auth_service() -> AuthService:
    return AuthService(token_provider=get_token_provider(), password_hasher=get_password_hasher())


def registration_service() -> UserRegistrationService:
    return UserRegistrationService(password_hasher=get_password_hasher())


def post_service() -> PostService:
    return PostService()


def reaction_ledger() -> ReactionLedger:
    return ReactionLedger()


# ------------------------------ Authentication ------------------------------


def require_auth(func: F) -> F:
    """Reject the request with 401 unless it carries a valid bearer token.

    The verified :class:`Identity` is stored on ``flask.g.identity``. The view
    body, and therefore any write, never runs for a rejected request.
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any):
        guard = AuthGuard(token_provider=get_token_provider())
        result = guard.check(request.headers.get("Authorization"))
        if result.identity is None:
            reason = cast(RejectionReason, result.reason)
            raise Unauthorized(
                _MESSAGES[reason], code=reason.value, challenge=_CHALLENGES[reason]
            )
        g.identity = result.identity
        return func(*args, **kwargs)

    return wrapper  # type: ignore[return-value]


def current_identity() -> Identity:
    """Return the identity set by :func:`require_auth`."""

    identity = g.get("identity")
    if identity is None:  # pragma: no cover - only reachable without require_auth
        raise Unauthorized("Authentication required", code="missing_token")
    return cast(Identity, identity)


# ------------------------------ Responses -----------------------------------


def json_response(payload: Any, *, status: int = 200) -> Response:
    """Return a JSON response enforcing a consistent MIME type."""

    response = jsonify(payload)
    response.status_code = status
    return response


def timing(func: F) -> F:
    """Decorator capturing handler execution time in milliseconds."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any):
        start = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            elapsed_ms = (time.perf_counter() - start) * 1000
            request_endpoint = getattr(request, "endpoint", None)
            current_app.logger.debug(
                "request.elapsed",
                extra={"endpoint": request_endpoint, "elapsed_ms": round(elapsed_ms, 2)},
            )

    return wrapper  # type: ignore[return-value]
