"""repokit: fluent repositories, result projections and transactional writes on SQLAlchemy."""

from repokit.config.loader import RepokitSettings, load_settings
from repokit.errors import QueryConstructionError, RepokitError, TransactionFailedError
from repokit.models.transactional import Operation, TransactionalWriter
from repokit.repositories.base_repository import BaseRepository, Page
from repokit.repositories.results.base_result import BaseResult

__all__ = [
    "BaseRepository",
    "BaseResult",
    "Operation",
    "Page",
    "QueryConstructionError",
    "RepokitError",
    "RepokitSettings",
    "TransactionFailedError",
    "TransactionalWriter",
    "load_settings",
]
