"""Base class shared by the application services."""

from __future__ import annotations

from forum.core import errors as api_errors
from forum.services._shared.errors import (
    AuthError,
    ConflictError,
    NotFoundError,
    PersistenceError,
    ServiceError,
    ValidationError,
)
from forum.uow.sqlalchemy_uow import (
    SQLAlchemyReadOnlyUnitOfWork,
    SQLAlchemyUnitOfWork,
)

# Checked in order; the first matching service error wins
_API_ERRORS: tuple[tuple[type[ServiceError], type[api_errors.APIError]], ...] = (
    (NotFoundError, api_errors.NotFound),
    (ConflictError, api_errors.Conflict),
    (AuthError, api_errors.Unauthorized),
    (ValidationError, api_errors.UnprocessableEntity),
    (PersistenceError, api_errors.ServiceUnavailable),
)


class BaseService:
    """
    Services orchestrate one use case inside one Unit of Work and return DTOs.

    They never reach for the global session and never hand ORM instances to
    the HTTP layer.
    """

    DEFAULT_READ_ISOLATION = "READ COMMITTED"

    def rw_uow(self) -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork()

    def ro_uow(
        self, *, isolation: str | None = None, enforce_db_readonly: bool = True
    ) -> SQLAlchemyReadOnlyUnitOfWork:
        """
        Open a read-only scope.

        :param isolation: Isolation level; defaults to :attr:`DEFAULT_READ_ISOLATION`.
        :type isolation: str | None
        :param enforce_db_readonly: Also ask the database for ``READ ONLY``.
        :type enforce_db_readonly: bool
        :rtype: SQLAlchemyReadOnlyUnitOfWork
        """
        return SQLAlchemyReadOnlyUnitOfWork(
            isolation_level=isolation or self.DEFAULT_READ_ISOLATION,
            enforce_db_readonly=enforce_db_readonly,
        )

    @staticmethod
    def translate_exceptions(exc: Exception) -> Exception:
        """
        Turn a service error into the matching :class:`~forum.core.errors.APIError`.

        Anything that is not a :class:`ServiceError` is returned unchanged.
        Unknown service errors become a plain 400.
        """
        if not isinstance(exc, ServiceError):
            return exc
        for service_type, api_type in _API_ERRORS:
            if isinstance(exc, service_type):
                return api_type(str(exc))
        return api_errors.APIError(message=str(exc))
