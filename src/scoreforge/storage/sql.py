# src/scoreforge/storage/sql.py

"""SQLAlchemy-backed durable key-value store."""

from __future__ import annotations

import logging

from sqlalchemy import Engine
from sqlalchemy.exc import SQLAlchemyError

from scoreforge.db.models import Base, PlayerPref
from scoreforge.db.session import create_db_engine, make_session_factory
from scoreforge.exceptions import StorageUnavailableError

logger = logging.getLogger(__name__)


class SqlKeyValueStore:
    """Key-value store persisted in the ``player_prefs`` table.

    Writes are flushed to the open transaction immediately, so ``get`` sees
    them, but they only become durable when :meth:`flush` commits. Any
    database error rolls the transaction back and is raised as
    ``StorageUnavailableError``.
    """

    def __init__(self, engine: Engine | None = None, url: str | None = None):
        self._owns_engine = engine is None
        self._engine = engine if engine is not None else create_db_engine(url)
        try:
            Base.metadata.create_all(self._engine)
        except SQLAlchemyError as e:
            logger.error("Could not prepare preference table: %s", e, exc_info=True)
            raise StorageUnavailableError("connect", reason=str(e)) from e
        self._session = make_session_factory(self._engine)()

    def _fail(self, operation: str, key: str | None, exc: SQLAlchemyError):
        logger.error(
            "Database error during %s, rolling back: %s",
            operation,
            exc,
            extra={"operation": operation, "key": key},
            exc_info=True,
        )
        try:
            self._session.rollback()
        except SQLAlchemyError as rollback_exc:
            logger.error(
                "Rollback after failed %s also failed: %s",
                operation,
                rollback_exc,
                extra={"operation": operation, "key": key},
            )
        return StorageUnavailableError(operation, key, str(exc))

    def get(self, key: str, default: str = "") -> str:
        try:
            pref = self._session.get(PlayerPref, key)
        except SQLAlchemyError as e:
            raise self._fail("get", key, e) from e
        return pref.value if pref is not None else default

    def set(self, key: str, value: str) -> None:
        try:
            pref = self._session.get(PlayerPref, key)
            if pref is None:
                self._session.add(PlayerPref(key=key, value=value))
            else:
                pref.value = value
            self._session.flush()
        except SQLAlchemyError as e:
            raise self._fail("set", key, e) from e

    def delete(self, key: str) -> None:
        try:
            pref = self._session.get(PlayerPref, key)
            if pref is not None:
                self._session.delete(pref)
                self._session.flush()
        except SQLAlchemyError as e:
            raise self._fail("delete", key, e) from e

    def flush(self) -> None:
        try:
            self._session.commit()
        except SQLAlchemyError as e:
            raise self._fail("flush", None, e) from e

    def close(self) -> None:
        """Close the session, discarding uncommitted writes."""
        self._session.close()
        if self._owns_engine:
            self._engine.dispose()

    def __enter__(self) -> "SqlKeyValueStore":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
