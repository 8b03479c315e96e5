"""
Units of Work over the Flask-SQLAlchemy scoped session.
"""

from __future__ import annotations

import logging
from contextlib import suppress

from sqlalchemy import event, text
from sqlalchemy.engine import Connection
from sqlalchemy.exc import InvalidRequestError, SQLAlchemyError
from sqlalchemy.orm import Session, SessionTransaction, scoped_session

from forum.core.extensions import db
from forum.repositories import PostRepository, ReplyRepository, UserRepository
from forum.uow.base import UnitOfWork

log = logging.getLogger(__name__)

# Dialects that understand ``SET TRANSACTION ...`` directives
_SET_TRANSACTION_DIALECTS = ("postgresql", "mysql", "mariadb")

# First SQL keyword of statements the read-only scope refuses
_WRITE_KEYWORDS = (
    "insert",
    "update",
    "delete",
    "merge",
    "replace",
    "create",
    "alter",
    "drop",
    "truncate",
)


def _concrete(session: Session | scoped_session) -> Session:
    return session() if isinstance(session, scoped_session) else session


class _ForumRepositories:
    """``users``, ``posts`` and ``replies`` bound to one session."""

    def __init__(self, session: Session) -> None:
        self.session = session
        self.users = UserRepository(session=session)
        self.posts = PostRepository(session=session)
        self.replies = ReplyRepository(session=session)


class SQLAlchemyUnitOfWork(_ForumRepositories, UnitOfWork):
    """
    Read-write scope: commit on a clean exit, roll back when the block raises.

    A failing commit is rolled back too, and its exception propagates.
    """

    def __init__(self) -> None:
        super().__init__(db.session)

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is not None:
            self.rollback()
            return
        try:
            self.commit()
        except Exception:
            self.rollback()
            raise

    def commit(self) -> None:
        self.session.commit()

    def rollback(self) -> None:
        self.session.rollback()


class _WriteGuards:
    """Event listeners that turn any write attempt into ``RuntimeError``."""

    def __init__(self, session: Session, connection: Connection) -> None:
        self._session = session
        self._connection = connection
        self._active = False

    @staticmethod
    def _block_flush(session, flush_context, instances) -> None:
        if session.new or session.dirty or session.deleted:
            raise RuntimeError("Read-only UnitOfWork: ORM flush blocked.")

    @staticmethod
    def _block_dml(conn, cursor, statement, parameters, context, executemany) -> None:
        keyword = statement.lstrip().split(None, 1)[0].lower() if statement else ""
        if keyword.startswith(_WRITE_KEYWORDS):
            raise RuntimeError(f"Read-only UnitOfWork: SQL statement blocked: {keyword.upper()}")

    def install(self) -> None:
        if self._active:
            return
        event.listen(self._session, "before_flush", self._block_flush)
        event.listen(self._connection, "before_cursor_execute", self._block_dml)
        self._active = True

    def remove(self) -> None:
        if not self._active:
            return
        with suppress(InvalidRequestError):
            event.remove(self._session, "before_flush", self._block_flush)
        with suppress(InvalidRequestError):
            event.remove(self._connection, "before_cursor_execute", self._block_dml)
        self._active = False


class SQLAlchemyReadOnlyUnitOfWork(_ForumRepositories, UnitOfWork):
    """
    Read-only scope used by queries (login, listings, search).

    Writes are blocked by session and connection guards on every backend.
    On PostgreSQL and MySQL the transaction is additionally opened with the
    requested isolation level and ``READ ONLY``. The scope always rolls back
    and :meth:`commit` raises.

    When the session already has a transaction (for instance the SAVEPOINT
    session of the test-suite) the scope joins it and skips the
    ``SET TRANSACTION`` directives.
    """

    def __init__(
        self,
        *,
        isolation_level: str | None = "READ COMMITTED",
        enforce_db_readonly: bool = True,
    ) -> None:
        super().__init__(db.session)
        self.isolation_level = isolation_level
        self.enforce_db_readonly = enforce_db_readonly
        self._own_txn: SessionTransaction | None = None
        self._guards: _WriteGuards | None = None

    def __enter__(self) -> SQLAlchemyReadOnlyUnitOfWork:
        try:
            self._own_txn = self.session.begin()
        except InvalidRequestError:
            self._own_txn = None

        connection = self.session.connection()
        self._guards = _WriteGuards(_concrete(self.session), connection)
        self._guards.install()

        if self._own_txn is not None and connection.dialect.name in _SET_TRANSACTION_DIALECTS:
            self._set_transaction_characteristics()
        return self

    def _set_transaction_characteristics(self) -> None:
        try:
            if self.isolation_level:
                level = self.isolation_level.upper().strip()
                self.session.execute(text(f"SET TRANSACTION ISOLATION LEVEL {level}"))
            if self.enforce_db_readonly:
                self.session.execute(text("SET TRANSACTION READ ONLY"))
        except SQLAlchemyError as exc:
            log.warning("SET TRANSACTION failed (%s); relying on guards only.", exc)

    def __exit__(self, exc_type, exc, tb) -> None:
        try:
            if self._own_txn is not None:
                with suppress(SQLAlchemyError):
                    self.session.rollback()
                self._own_txn = None
        finally:
            if self._guards is not None:
                self._guards.remove()
                self._guards = None

    def commit(self) -> None:
        """
        :raises RuntimeError: always; reads never commit.
        """
        raise RuntimeError("Read-only UnitOfWork does not allow commit().")

    def rollback(self) -> None:
        self.session.rollback()
