"""Transactional create/update/delete for a single mapped record.

Every write runs inside its own begin/commit/rollback envelope. A failed
write is rolled back and re-raised as TransactionFailedError, which records
whether the rollback itself succeeded.
"""

from enum import Enum
from typing import Any, Callable, Optional

from sqlalchemy.orm import Session

from repokit.config.loader import RepokitSettings
from repokit.database.schema import VALIDITY_COLUMN
from repokit.errors import TransactionFailedError
from repokit.utils.logging import emphasis_end, emphasis_start, get_logger

logger = get_logger(__name__)

Mutation = Callable[[Any], Any]


class Operation(str, Enum):
    CREATE = "CREATE"
    UPDATE = "UPDATE"
    DELETE = "DELETE"
    CHANGE = "CHANGE"


def describe(record: Any, operation: Operation, origin: Optional[str] = None) -> str:
    """
    Build the audit description for a write.

    Example:
        >>> describe(order, Operation.UPDATE, "checkout_service:42")
        'Order UPDATE in checkout_service:42'
    """
    description = f"{type(record).__name__} {operation.value}"
    if origin:
        description += f" in {origin}"
    return description


class TransactionalWriter:
    """
    Wraps single-record writes in a transaction.

    Args:
        session: SQLAlchemy session that owns the transaction
        persist: Stores a created/updated record. Defaults to add + flush.
        remove: Deletes a record. Defaults to delete + flush.
        validity_field: Name of the 0/1 validity attribute, or None to
            disable toggle_validity_flag
        settings: RepokitSettings; `data.logging_transaction` enables audit lines

    Not safe for concurrent use. When the session has no open transaction the
    writer begins and commits one; otherwise the write runs in a savepoint and
    only that savepoint is released or rolled back.
    """

    def __init__(
        self,
        session: Session,
        persist: Optional[Mutation] = None,
        remove: Optional[Mutation] = None,
        validity_field: Optional[str] = VALIDITY_COLUMN,
        settings: Optional[RepokitSettings] = None,
    ) -> None:
        self.session = session
        self.persist = persist or self._default_persist
        self.remove = remove or self._default_remove
        self.validity_field = validity_field
        self.settings = settings or RepokitSettings()

    def _default_persist(self, record: Any) -> None:
        self.session.add(record)
        self.session.flush()

    def _default_remove(self, record: Any) -> None:
        self.session.delete(record)
        self.session.flush()

    @property
    def logging_enabled(self) -> bool:
        return self.settings.data.logging_transaction

    def _begin(self):
        # An already open transaction belongs to the caller: the write gets a
        # savepoint inside it and the caller's own commit makes it durable.
        if self.session.in_transaction():
            return self.session.begin_nested()
        return self.session.begin()

    def transaction(self, description: str, transactional: Callable[[], Any]) -> None:
        """
        Run `transactional` between begin and commit.

        Raises:
            TransactionFailedError: If `transactional` or the commit raises.
                `rolled_back` tells whether the rollback succeeded; when it
                did not, `rollback_error` carries the rollback failure.
        """
        transaction = self._begin()
        if self.logging_enabled:
            emphasis_start(logger, "TRANSACTION")

        failure: Optional[TransactionFailedError] = None
        try:
            transactional()
            transaction.commit()
            if self.logging_enabled:
                logger.info(f"SUCCESS TRANSACTION {description}")
        except Exception as e:
            if self.logging_enabled:
                logger.info(f"FAILURE TRANSACTION {description}")
            failure = self._rollback(transaction, description, e)

        if self.logging_enabled:
            emphasis_end(logger, "TRANSACTION")

        if failure is not None:
            raise failure

    def _rollback(self, transaction, description: str, cause: Exception) -> TransactionFailedError:
        try:
            transaction.rollback()
        except Exception as rollback_error:
            # Logged regardless of the audit toggle: the session is now in an unknown state.
            logger.error(f"ROLLBACK: failure {description}")
            logger.error(f"CAUSED: {rollback_error}")
            return TransactionFailedError(description, cause, rollback_error)

        if self.logging_enabled:
            logger.info("ROLLBACK: success")
        return TransactionFailedError(description, cause)

    def _safe_save(self, record: Any, operation: Operation, mutate: Optional[Mutation], origin: Optional[str]) -> None:
        def save() -> None:
            if mutate is not None:
                mutate(record)
            self.persist(record)

        self.transaction(describe(record, operation, origin), save)

    def safe_create(self, record: Any, mutate: Optional[Mutation] = None, origin: Optional[str] = None) -> None:
        """Insert `record` atomically. `mutate(record)` runs first, inside the transaction."""
        self._safe_save(record, Operation.CREATE, mutate, origin)

    def safe_update(self, record: Any, mutate: Optional[Mutation] = None, origin: Optional[str] = None) -> None:
        """
        Apply `mutate(record)` and persist it atomically.

        On failure every attribute reverts to its committed value on the
        next access.
        """
        self._safe_save(record, Operation.UPDATE, mutate, origin)

    def safe_delete(self, record: Any, origin: Optional[str] = None) -> None:
        self.transaction(describe(record, Operation.DELETE, origin), lambda: self.remove(record))

    def has_validity_field(self, record: Any) -> bool:
        return self.validity_field is not None and hasattr(record, self.validity_field)

    def toggle_validity_flag(self, record: Any, is_valid: int, origin: Optional[str] = None) -> None:
        """Set the validity flag and persist. No-op when the record has no such field."""
        if not self.has_validity_field(record):
            logger.debug(f"{type(record).__name__} has no {self.validity_field!r} field; skipping")
            return

        def change(target: Any) -> None:
            setattr(target, self.validity_field, is_valid)

        self._safe_save(record, Operation.CHANGE, change, origin)

    def is_valid(self, record: Any) -> bool:
        """Whether the record is flagged valid. False when it has no validity field."""
        if not self.has_validity_field(record):
            return False
        return bool(getattr(record, self.validity_field))
