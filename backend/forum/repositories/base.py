"""Storage contract shared by the forum repositories.

Every repository exposes the same four primitives the services rely on:

* :meth:`BaseRepository.get`: fetch by primary key.
* :meth:`BaseRepository.add`: insert and return the row with its id.
* :meth:`BaseRepository.find_unique_by`: look up by a whitelisted unique column.
* :meth:`BaseRepository.increment`: atomic ``col = col + delta`` on a
  whitelisted counter column.

Repositories never commit or roll back; the Unit of Work owns the transaction.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Generic, TypeVar, cast

from sqlalchemy import Select, select, update
from sqlalchemy.orm import InstrumentedAttribute, Session

from forum.core.extensions import db
from forum.models.base import MAX_ID

E = TypeVar("E")  # SQLAlchemy mapped entity type

LIKE_ESCAPE = "\\"


def escape_like(value: str, escape: str = LIKE_ESCAPE) -> str:
    """Escape ``LIKE`` wildcards so ``value`` matches literally.

    :param value: Raw user input.
    :param escape: Escape character passed along with the ``LIKE`` clause.
    :returns: Escaped pattern fragment.
    """
    return (
        value.replace(escape, escape * 2).replace("%", f"{escape}%").replace("_", f"{escape}_")
    )


class BaseRepository(Generic[E]):
    """Persistence-only access to one mapped model.

    Subclasses set ``model`` and opt into lookups and counters by overriding
    :meth:`_unique_fields` and :meth:`_counter_fields`. Anything not listed
    there is refused with :class:`ValueError`, so column names coming from
    callers never reach SQL unchecked.
    """

    #: SQLAlchemy mapped model (must be set by subclasses)
    model: type[E]

    def __init__(self, session: Session | None = None) -> None:
        # ``None`` means "use the Flask-scoped session"
        self._session: Session | None = session

    @property
    def session(self) -> Session:
        """Injected session, or the Flask-scoped one."""
        if self._session is not None:
            return self._session
        return cast(Session, db.session)

    # ------------------------------ Hooks ------------------------------------

    def _default_eagerload(self, stmt: Select[Any]) -> Select[Any]:
        """Attach loader options to every select built here."""
        return stmt

    def _unique_fields(self) -> Mapping[str, InstrumentedAttribute[Any]]:
        """Columns accepted by :meth:`find_unique_by`."""
        return {}

    def _counter_fields(self) -> Mapping[str, InstrumentedAttribute[Any]]:
        """Integer columns accepted by :meth:`increment`."""
        return {}

    def _column(
        self, allowed: Mapping[str, InstrumentedAttribute[Any]], field: str, kind: str
    ) -> InstrumentedAttribute[Any]:
        col = allowed.get(field)
        if not isinstance(col, InstrumentedAttribute):
            raise ValueError(f"{field!r} is not a {kind} field of {self.model.__name__}.")
        return col

    def _pk(self) -> InstrumentedAttribute[Any]:
        return cast(InstrumentedAttribute[Any], self.model.id)  # type: ignore[attr-defined]

    @staticmethod
    def _storable_id(entity_id: int) -> bool:
        # Out-of-range ids would overflow the driver instead of matching nothing
        return 1 <= entity_id <= MAX_ID

    # ------------------------------ Contract ---------------------------------

    def add(self, instance: E) -> E:
        """Stage ``instance`` and flush so its generated id is available.

        :param instance: New, transient entity.
        :type instance: E
        :returns: The same instance, now persistent within the transaction.
        :rtype: E
        """
        self.session.add(instance)
        self.session.flush()
        return instance

    def get(self, entity_id: int, *, refresh: bool = False) -> E | None:
        """Fetch one row by primary key.

        :param entity_id: Primary-key value.
        :type entity_id: int
        :param refresh: Overwrite any copy already held in the identity map
            with the row as the database sees it now.
        :type refresh: bool
        :returns: Entity or ``None``.
        :rtype: E | None
        """
        if not self._storable_id(entity_id):
            return None
        stmt = self._default_eagerload(select(self.model).where(self._pk() == entity_id))
        if refresh:
            stmt = stmt.execution_options(populate_existing=True)
        return cast(E | None, self.session.execute(stmt).scalars().first())

    def find_unique_by(self, field: str, value: Any) -> E | None:
        """Fetch the row whose unique ``field`` equals ``value``.

        :param field: Key declared in :meth:`_unique_fields`.
        :type field: str
        :param value: Value to match exactly.
        :type value: Any
        :returns: Entity or ``None``.
        :rtype: E | None
        :raises ValueError: If ``field`` is not a declared unique field.
        """
        col = self._column(self._unique_fields(), field, "unique")
        stmt = self._default_eagerload(select(self.model).where(col == value))
        return cast(E | None, self.session.execute(stmt).scalars().first())

    def increment(self, entity_id: int, field: str, delta: int = 1) -> E | None:
        """Atomically add ``delta`` to a counter and return the fresh row.

        Emits ``UPDATE <table> SET <field> = <field> + :delta WHERE id = :id``
        so the database serializes concurrent callers and no increment is
        lost. The row is then re-read inside the same transaction.

        :param entity_id: Primary-key value.
        :type entity_id: int
        :param field: Key declared in :meth:`_counter_fields`.
        :type field: str
        :param delta: Amount to add.
        :type delta: int
        :returns: Updated entity, or ``None`` when no row matched (nothing written).
        :rtype: E | None
        :raises ValueError: If ``field`` is not a declared counter.
        """
        col = self._column(self._counter_fields(), field, "counter")
        if not self._storable_id(entity_id):
            return None
        stmt = (
            update(self.model)
            .where(self._pk() == entity_id)
            .values({col.key: col + int(delta)})
            .execution_options(synchronize_session=False)
        )
        if self.session.execute(stmt).rowcount == 0:
            return None
        return self.get(entity_id, refresh=True)
