"""Exceptions raised by the repository and transaction layers.

Errors raised by SQLAlchemy while executing a query are not wrapped; they
reach the caller unchanged.
"""

from typing import Optional


class RepokitError(Exception):
    """Base class for all repokit errors."""


class QueryConstructionError(RepokitError, ValueError):
    """Raised while building a query from input the facade cannot express."""


class TransactionFailedError(RepokitError):
    """
    A write inside a transaction envelope failed.

    Attributes:
        description: Audit description of the write (e.g. "Order UPDATE in checkout")
        cause: Exception raised by the mutation or persist call
        rollback_error: Exception raised by the rollback itself, if any
        rolled_back: True when the rollback completed
    """

    def __init__(
        self,
        description: str,
        cause: BaseException,
        rollback_error: Optional[BaseException] = None,
    ) -> None:
        self.description = description
        self.cause = cause
        self.rollback_error = rollback_error
        self.rolled_back = rollback_error is None

        message = f"FAILURE TRANSACTION {description}".rstrip()
        if self.rolled_back:
            message += " SUCCESS ROLLBACK"
        else:
            message += f" FAILURE ROLLBACK Caused By {rollback_error}"
        super().__init__(message)
        self.__cause__ = cause
