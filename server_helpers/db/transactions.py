"""Transaction wrappers and batch helpers built on SQLAlchemy sessions."""
from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, Iterable, List, Optional, Sequence, TypeVar

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from server_helpers.db.models.app_version import AppVersion
from server_helpers.db.session import get_db_context
from server_helpers.utils.exceptions import ConflictError

T = TypeVar("T")

DEFAULT_BATCH_SIZE = 1000


@dataclass(frozen=True, slots=True)
class DbConstraintAndMessage:
    """A database constraint name and the user facing message for violating it."""

    db_constraint: str
    message: str


def db_transaction_wrap(
    operation: Callable[[Session], T],
    session: Optional[Session] = None,
    *,
    session_factory: Optional[sessionmaker] = None,
) -> T:
    """Run ``operation`` inside a transaction.

    When the caller already holds a session the operation joins it and the
    caller stays responsible for committing. Otherwise a new session is
    opened, committed on success and rolled back on error.
    """

    if session is not None:
        return operation(session)

    factory = session_factory or get_db_context
    with factory() as new_session, new_session.begin():
        return operation(new_session)


def _as_uuid(value: Any) -> uuid.UUID:
    return value if isinstance(value, uuid.UUID) else uuid.UUID(str(value))


def update_timestamp_for_app_version(session: Session, app_version_id: Any) -> None:
    app_version = session.get(AppVersion, _as_uuid(app_version_id))
    if app_version is not None:
        app_version.updated_at = datetime.now(timezone.utc)
        session.flush()


def db_transaction_for_app_version_associations_update(
    operation: Callable[[Session], T],
    app_version_id: Any,
    *,
    session_factory: Optional[sessionmaker] = None,
) -> T:
    """Run ``operation`` and bump the owning app version in the same transaction."""

    def _operation(session: Session) -> T:
        result = operation(session)
        update_timestamp_for_app_version(session, app_version_id)
        return result

    return db_transaction_wrap(_operation, session_factory=session_factory)


def catch_db_exception(
    operation: Callable[[], T],
    db_constraints: Iterable[DbConstraintAndMessage],
) -> T:
    """Translate violations of the listed constraints into ``ConflictError``."""

    try:
        return operation()
    except SQLAlchemyError as err:
        message = str(err)
        for constraint in db_constraints:
            if constraint.db_constraint in message:
                logger.warning(f"Constraint {constraint.db_constraint} violated: {constraint.message}")
                raise ConflictError(constraint.message) from err
        raise


def process_data_in_batches(
    session: Session,
    get_data: Callable[[Session, int, int], Sequence[T]],
    process_batch: Callable[[Session, List[T]], None],
    batch_size: int = DEFAULT_BATCH_SIZE,
) -> None:
    """Page through ``get_data`` with skip/take until a short page comes back."""

    skip = 0
    while True:
        data = list(get_data(session, skip, batch_size))
        skip += batch_size

        if data:
            logger.debug("Processing batch", offset=skip - batch_size, size=len(data))
            process_batch(session, data)

        if len(data) != batch_size:
            break
