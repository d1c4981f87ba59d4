"""Base repository: a reusable fluent facade over a SQLAlchemy Query.

Builder methods only record state and return the repository for chaining.
Terminal methods (get/get_raw/find/find_raw/count/exists/paginate) execute
the built query and then reset the repository to a fresh query bound to the
same model, so one instance can serve any number of independent queries.
"""

import copy
import operator as op
from dataclasses import dataclass, field
from typing import Any, Callable, ClassVar, List, Optional, Sequence, Tuple, Type, Union

from sqlalchemy import and_, extract, func, inspect, literal, literal_column, not_, or_, select, table, text
from sqlalchemy.orm import Query, Session, selectinload

from repokit.config.loader import RepokitSettings
from repokit.database.schema import VALIDITY_COLUMN
from repokit.errors import QueryConstructionError
from repokit.repositories.results.base_result import BaseResult
from repokit.utils.logging import get_logger
from repokit.utils.time import DateInput, TimeInput, now, to_date_string, to_time_string

logger = get_logger(__name__)

ColumnRef = Union[str, Any]
Columns = Union[ColumnRef, Sequence[ColumnRef]]

_OPERATORS: dict[str, Callable[[Any, Any], Any]] = {
    "=": op.eq,
    "!=": op.ne,
    "<>": op.ne,
    ">": op.gt,
    ">=": op.ge,
    "<": op.lt,
    "<=": op.le,
    "like": lambda column, value: column.like(value),
    "not like": lambda column, value: column.not_like(value),
}

_AND = "and"
_OR = "or"


@dataclass
class Page:
    """One page of raw records plus the total matching the same predicate."""
    total: int
    items: List[Any] = field(default_factory=list)


def _compare(left: Any, operator: str, right: Any) -> Any:
    try:
        build = _OPERATORS[operator.strip().lower()]
    except KeyError:
        raise QueryConstructionError(f"Unsupported operator: {operator!r}") from None
    return build(left, right)


def _combine(clauses: List[Tuple[str, Any]]) -> Any:
    """
    Fold (boolean, clause) pairs the way flat SQL reads them.

    AND binds tighter than OR, so `a AND b OR c AND d` becomes
    `(a AND b) OR (c AND d)`.
    """
    if not clauses:
        return None
    groups: List[List[Any]] = []
    for boolean, clause in clauses:
        if boolean == _OR and groups:
            groups.append([clause])
        elif groups:
            groups[-1].append(clause)
        else:
            groups.append([clause])
    return or_(*[and_(*group) for group in groups])


class BaseRepository:
    """
    Wraps a Query bound to one mapped model.

    Subclasses set `model` and `result_type`, or override `to_result`:

        class OrderRepository(BaseRepository):
            model = Order
            result_type = OrderResult

        repo = OrderRepository(session)
        repo.valid().where_greater("total", 100).desc().get()

    Not safe for concurrent use; one instance per session/thread.
    """

    model: ClassVar[Optional[type]] = None
    result_type: ClassVar[Optional[Type[BaseResult]]] = None

    def __init__(self, session: Session, settings: Optional[RepokitSettings] = None) -> None:
        if self.model is None:
            raise TypeError(f"{type(self).__name__} must define a mapped `model`")
        self.session = session
        self.settings = settings or RepokitSettings()
        self._initialize()

    def _initialize(self) -> None:
        mapper = inspect(self.model)
        self._column_attrs = {attr.key for attr in mapper.column_attrs}
        self._query: Query = self.session.query(self.model)
        self._table_name: str = mapper.local_table.name
        self._wheres: List[Tuple[str, Any]] = []
        self._havings: List[Tuple[str, Any]] = []
        self._limit: Optional[int] = None
        self._offset: Optional[int] = None

    def reset(self) -> "BaseRepository":
        self._initialize()
        return self

    def query(self) -> Query:
        """The live query with the recorded predicates applied."""
        query = self._query
        where = _combine(self._wheres)
        if where is not None:
            query = query.filter(where)
        having = _combine(self._havings)
        if having is not None:
            query = query.having(having)
        if self._limit is not None:
            query = query.limit(self._limit)
        if self._offset is not None:
            query = query.offset(self._offset)
        return query

    def table_name(self) -> str:
        return self._table_name

    # Conversion

    def to_result(self, entity: Any) -> BaseResult:
        """Convert one record into this repository's Result projection."""
        if self.result_type is None:
            raise NotImplementedError(f"{type(self).__name__} must define `result_type` or override to_result()")
        return self.result_type.from_record(entity)

    def to_result_list(self, entities: Sequence[Any]) -> Optional[List[BaseResult]]:
        """Convert records to projections. Returns None for an empty sequence."""
        if not entities:
            return None
        return [self.to_result(entity) for entity in entities]

    def serialize(
        self,
        results: Union[BaseResult, Sequence[BaseResult], None],
        omit_nulls: Optional[bool] = None,
    ) -> Any:
        """Serialize one projection or a list of them using the configured null policy."""
        if omit_nulls is None:
            omit_nulls = self.settings.omit_null_fields
        if results is None:
            return None
        if isinstance(results, BaseResult):
            return results.serialize(omit_nulls=omit_nulls)
        return [result.serialize(omit_nulls=omit_nulls) for result in results]

    # Terminal operations

    def _apply_equality(self, column: Optional[str], value: Any) -> None:
        if column is not None and value is not None:
            self.where(column, value)

    def get(self, column: Optional[str] = None, value: Any = None) -> Optional[List[BaseResult]]:
        """
        Execute and return Result projections.

        Returns:
            List of projections, or None when no rows match
        """
        return self.to_result_list(self.get_raw(column, value))

    def get_raw(self, column: Optional[str] = None, value: Any = None) -> List[Any]:
        """Execute and return raw records (possibly empty, never None)."""
        self._apply_equality(column, value)
        try:
            return self.query().all()
        finally:
            self.reset()

    def find(self, column: Optional[str] = None, value: Any = None) -> Optional[BaseResult]:
        entity = self.find_raw(column, value)
        if entity is None:
            return None
        return self.to_result(entity)

    def find_raw(self, column: Optional[str] = None, value: Any = None) -> Optional[Any]:
        self._apply_equality(column, value)
        try:
            return self.query().first()
        finally:
            self.reset()

    def count(self, column: Optional[str] = None, value: Any = None) -> int:
        self._apply_equality(column, value)
        try:
            return self.query().count()
        finally:
            self.reset()

    def exists(self, column: Optional[str] = None, value: Any = None) -> bool:
        self._apply_equality(column, value)
        try:
            return bool(self.session.query(self.query().exists()).scalar())
        finally:
            self.reset()

    def paginate(self, page: int, limit: int) -> Page:
        """
        Count everything matching the current predicate, then fetch one page of it.

        Args:
            page: 1-based page number
            limit: Page size

        Returns:
            Page with `total` (ignores paging) and raw `items`
        """
        if page < 1 or limit < 1:
            self.reset()
            raise QueryConstructionError(f"Invalid page/limit: page={page}, limit={limit}")

        state = (self._query, list(self._wheres), list(self._havings))
        self._limit = None
        self._offset = None
        total = self.count()

        self._query, self._wheres, self._havings = state
        items = self.for_page(page, limit).get_raw()
        logger.debug(f"Paginated {self._table_name}: page={page} limit={limit} total={total}")
        return Page(total=total, items=items)

    # Predefined shortcuts

    def valid(self) -> "BaseRepository":
        return self.where(VALIDITY_COLUMN, 1)

    def invalid(self) -> "BaseRepository":
        return self.where(VALIDITY_COLUMN, 0)

    def is_valid(self, is_valid: int) -> "BaseRepository":
        if is_valid == 0:
            return self.invalid()
        if is_valid == 1:
            return self.valid()
        return self.where(VALIDITY_COLUMN, is_valid)

    def find_by_id(self, id: int) -> Optional[BaseResult]:
        return self.find("id", id)

    def find_raw_by_id(self, id: int) -> Optional[Any]:
        return self.find_raw("id", id)

    def find_by_user_id(self, user_id: int) -> Optional[BaseResult]:
        return self.find("user_id", user_id)

    def find_raw_by_user_id(self, user_id: int) -> Optional[Any]:
        return self.find_raw("user_id", user_id)

    def get_by_user_id(self, user_id: int) -> Optional[List[BaseResult]]:
        return self.get("user_id", user_id)

    def get_raw_by_user_id(self, user_id: int) -> List[Any]:
        return self.get_raw("user_id", user_id)

    # Column resolution

    def _column(self, column: ColumnRef) -> Any:
        """
        Mapped attribute for a known column name; anything else is passed
        through as literal SQL so the database reports bad names on execution.
        """
        if not isinstance(column, str):
            return column
        if column in self._column_attrs:
            return getattr(self.model, column)
        return literal_column(column)

    def _columns(self, columns: Columns) -> List[Any]:
        if isinstance(columns, (list, tuple)):
            return [self._column(column) for column in columns]
        return [self._column(columns)]

    def _add_where(self, clause: Any, boolean: str = _AND) -> "BaseRepository":
        self._wheres.append((boolean, clause))
        return self

    def _add_having(self, clause: Any, boolean: str = _AND) -> "BaseRepository":
        self._havings.append((boolean, clause))
        return self

    def _blank(self) -> "BaseRepository":
        clone = copy.copy(self)
        clone._initialize()
        return clone

    # Selection

    def select(self, columns: Columns) -> "BaseRepository":
        """Replace the selection. Results become Rows instead of mapped objects."""
        self._query = self._query.with_entities(*self._columns(columns))
        return self

    def add_select(self, columns: Columns) -> "BaseRepository":
        self._query = self._query.add_columns(*self._columns(columns))
        return self

    def select_raw(self, sql: str) -> "BaseRepository":
        self._query = self._query.add_columns(literal_column(sql))
        return self

    # WHERE

    def where(self, column: ColumnRef, value: Any, operator: str = "=") -> "BaseRepository":
        return self._add_where(_compare(self._column(column), operator, value))

    def where_like(self, column: ColumnRef, value: Any) -> "BaseRepository":
        return self.where(column, _like_pattern(value), "like")

    def where_greater(self, column: ColumnRef, value: Any) -> "BaseRepository":
        return self.where(column, value, ">")

    def where_greater_equal(self, column: ColumnRef, value: Any) -> "BaseRepository":
        return self.where(column, value, ">=")

    def where_less(self, column: ColumnRef, value: Any) -> "BaseRepository":
        return self.where(column, value, "<")

    def where_less_equal(self, column: ColumnRef, value: Any) -> "BaseRepository":
        return self.where(column, value, "<=")

    def where_group(self, build: Callable[["BaseRepository"], Any]) -> "BaseRepository":
        """
        Add a parenthesised group of predicates.

        `build` receives a blank repository of the same type; whatever it
        records is combined here as one clause.
        """
        return self._add_group(build, _AND)

    def where_not(self, column: ColumnRef, value: Any) -> "BaseRepository":
        return self._add_where(not_(self._column(column) == value))

    def where_in(self, column: ColumnRef, values: Sequence[Any]) -> "BaseRepository":
        return self._add_where(self._column(column).in_(list(values)))

    def where_not_in(self, column: ColumnRef, values: Sequence[Any]) -> "BaseRepository":
        return self._add_where(self._column(column).not_in(list(values)))

    def where_between(self, column: ColumnRef, start: Any, end: Any) -> "BaseRepository":
        return self._add_where(self._column(column).between(start, end))

    def where_not_between(self, column: ColumnRef, start: Any, end: Any) -> "BaseRepository":
        return self._add_where(not_(self._column(column).between(start, end)))

    def where_null(self, column: ColumnRef) -> "BaseRepository":
        return self._add_where(self._column(column).is_(None))

    def where_not_null(self, column: ColumnRef) -> "BaseRepository":
        return self._add_where(self._column(column).is_not(None))

    def where_column(self, column1: ColumnRef, column2: ColumnRef, operator: str = "=") -> "BaseRepository":
        return self._add_where(_compare(self._column(column1), operator, self._column(column2)))

    def where_column_greater(self, column1: ColumnRef, column2: ColumnRef) -> "BaseRepository":
        return self.where_column(column1, column2, ">")

    def where_column_greater_equal(self, column1: ColumnRef, column2: ColumnRef) -> "BaseRepository":
        return self.where_column(column1, column2, ">=")

    def where_column_less(self, column1: ColumnRef, column2: ColumnRef) -> "BaseRepository":
        return self.where_column(column1, column2, "<")

    def where_column_less_equal(self, column1: ColumnRef, column2: ColumnRef) -> "BaseRepository":
        return self.where_column(column1, column2, "<=")

    # OR WHERE

    def or_where(self, column: ColumnRef, value: Any, operator: str = "=") -> "BaseRepository":
        return self._add_where(_compare(self._column(column), operator, value), _OR)

    def or_where_like(self, column: ColumnRef, value: Any) -> "BaseRepository":
        return self.or_where(column, _like_pattern(value), "like")

    def or_where_greater(self, column: ColumnRef, value: Any) -> "BaseRepository":
        return self.or_where(column, value, ">")

    def or_where_greater_equal(self, column: ColumnRef, value: Any) -> "BaseRepository":
        return self.or_where(column, value, ">=")

    def or_where_less(self, column: ColumnRef, value: Any) -> "BaseRepository":
        return self.or_where(column, value, "<")

    def or_where_less_equal(self, column: ColumnRef, value: Any) -> "BaseRepository":
        return self.or_where(column, value, "<=")

    def or_where_group(self, build: Callable[["BaseRepository"], Any]) -> "BaseRepository":
        return self._add_group(build, _OR)

    def or_where_not(self, column: ColumnRef, value: Any) -> "BaseRepository":
        return self._add_where(not_(self._column(column) == value), _OR)

    def or_where_in(self, column: ColumnRef, values: Sequence[Any]) -> "BaseRepository":
        return self._add_where(self._column(column).in_(list(values)), _OR)

    def or_where_not_in(self, column: ColumnRef, values: Sequence[Any]) -> "BaseRepository":
        return self._add_where(self._column(column).not_in(list(values)), _OR)

    def or_where_between(self, column: ColumnRef, start: Any, end: Any) -> "BaseRepository":
        return self._add_where(self._column(column).between(start, end), _OR)

    def or_where_not_between(self, column: ColumnRef, start: Any, end: Any) -> "BaseRepository":
        return self._add_where(not_(self._column(column).between(start, end)), _OR)

    def or_where_null(self, column: ColumnRef) -> "BaseRepository":
        return self._add_where(self._column(column).is_(None), _OR)

    def or_where_not_null(self, column: ColumnRef) -> "BaseRepository":
        return self._add_where(self._column(column).is_not(None), _OR)

    def or_where_column(self, column1: ColumnRef, column2: ColumnRef, operator: str = "=") -> "BaseRepository":
        return self._add_where(_compare(self._column(column1), operator, self._column(column2)), _OR)

    def or_where_column_greater(self, column1: ColumnRef, column2: ColumnRef) -> "BaseRepository":
        return self.or_where_column(column1, column2, ">")

    def or_where_column_greater_equal(self, column1: ColumnRef, column2: ColumnRef) -> "BaseRepository":
        return self.or_where_column(column1, column2, ">=")

    def or_where_column_less(self, column1: ColumnRef, column2: ColumnRef) -> "BaseRepository":
        return self.or_where_column(column1, column2, "<")

    def or_where_column_less_equal(self, column1: ColumnRef, column2: ColumnRef) -> "BaseRepository":
        return self.or_where_column(column1, column2, "<=")

    def _add_group(self, build: Callable[["BaseRepository"], Any], boolean: str) -> "BaseRepository":
        nested = self._blank()
        build(nested)
        clause = _combine(nested._wheres)
        if clause is None:
            return self
        return self._add_where(clause.self_group(), boolean)

    # JSON

    def where_json_contains(self, column: ColumnRef, values: Any) -> "BaseRepository":
        """Match rows whose JSON array column holds every one of `values`."""
        if not isinstance(values, (list, tuple, set)):
            values = [values]
        for value in values:
            elements = func.json_each(self._column(column)).table_valued("value")
            self._add_where(select(literal(1)).select_from(elements).where(elements.c.value == value).exists())
        return self

    def where_json_length(self, column: ColumnRef, length: int, operator: str = "=") -> "BaseRepository":
        return self._add_where(_compare(func.json_array_length(self._column(column)), operator, length))

    def where_json_length_greater(self, column: ColumnRef, length: int) -> "BaseRepository":
        return self.where_json_length(column, length, ">")

    def where_json_length_greater_equal(self, column: ColumnRef, length: int) -> "BaseRepository":
        return self.where_json_length(column, length, ">=")

    def where_json_length_less(self, column: ColumnRef, length: int) -> "BaseRepository":
        return self.where_json_length(column, length, "<")

    def where_json_length_less_equal(self, column: ColumnRef, length: int) -> "BaseRepository":
        return self.where_json_length(column, length, "<=")

    # Date components. A None value means "the current one".

    def where_date(self, column: ColumnRef, date: DateInput = None, operator: str = "=") -> "BaseRepository":
        return self._add_where(_compare(func.date(self._column(column)), operator, to_date_string(date)))

    def where_date_greater(self, column: ColumnRef, date: DateInput = None) -> "BaseRepository":
        return self.where_date(column, date, ">")

    def where_date_greater_equal(self, column: ColumnRef, date: DateInput = None) -> "BaseRepository":
        return self.where_date(column, date, ">=")

    def where_date_less(self, column: ColumnRef, date: DateInput = None) -> "BaseRepository":
        return self.where_date(column, date, "<")

    def where_date_less_equal(self, column: ColumnRef, date: DateInput = None) -> "BaseRepository":
        return self.where_date(column, date, "<=")

    def _where_part(self, part: str, column: ColumnRef, value: int, operator: str) -> "BaseRepository":
        return self._add_where(_compare(extract(part, self._column(column)), operator, value))

    def where_year(self, column: ColumnRef, year: Optional[int] = None, operator: str = "=") -> "BaseRepository":
        return self._where_part("year", column, now().year if year is None else year, operator)

    def where_year_greater(self, column: ColumnRef, year: Optional[int] = None) -> "BaseRepository":
        return self.where_year(column, year, ">")

    def where_year_greater_equal(self, column: ColumnRef, year: Optional[int] = None) -> "BaseRepository":
        return self.where_year(column, year, ">=")

    def where_year_less(self, column: ColumnRef, year: Optional[int] = None) -> "BaseRepository":
        return self.where_year(column, year, "<")

    def where_year_less_equal(self, column: ColumnRef, year: Optional[int] = None) -> "BaseRepository":
        return self.where_year(column, year, "<=")

    def where_month(self, column: ColumnRef, month: Optional[int] = None, operator: str = "=") -> "BaseRepository":
        return self._where_part("month", column, now().month if month is None else month, operator)

    def where_month_greater(self, column: ColumnRef, month: Optional[int] = None) -> "BaseRepository":
        return self.where_month(column, month, ">")

    def where_month_greater_equal(self, column: ColumnRef, month: Optional[int] = None) -> "BaseRepository":
        return self.where_month(column, month, ">=")

    def where_month_less(self, column: ColumnRef, month: Optional[int] = None) -> "BaseRepository":
        return self.where_month(column, month, "<")

    def where_month_less_equal(self, column: ColumnRef, month: Optional[int] = None) -> "BaseRepository":
        return self.where_month(column, month, "<=")

    def where_day(self, column: ColumnRef, day: Optional[int] = None, operator: str = "=") -> "BaseRepository":
        return self._where_part("day", column, now().day if day is None else day, operator)

    def where_day_greater(self, column: ColumnRef, day: Optional[int] = None) -> "BaseRepository":
        return self.where_day(column, day, ">")

    def where_day_greater_equal(self, column: ColumnRef, day: Optional[int] = None) -> "BaseRepository":
        return self.where_day(column, day, ">=")

    def where_day_less(self, column: ColumnRef, day: Optional[int] = None) -> "BaseRepository":
        return self.where_day(column, day, "<")

    def where_day_less_equal(self, column: ColumnRef, day: Optional[int] = None) -> "BaseRepository":
        return self.where_day(column, day, "<=")

    def where_time(self, column: ColumnRef, time: TimeInput = None, operator: str = "=") -> "BaseRepository":
        return self._add_where(_compare(func.time(self._column(column)), operator, to_time_string(time)))

    def where_time_greater(self, column: ColumnRef, time: TimeInput = None) -> "BaseRepository":
        return self.where_time(column, time, ">")

    def where_time_greater_equal(self, column: ColumnRef, time: TimeInput = None) -> "BaseRepository":
        return self.where_time(column, time, ">=")

    def where_time_less(self, column: ColumnRef, time: TimeInput = None) -> "BaseRepository":
        return self.where_time(column, time, "<")

    def where_time_less_equal(self, column: ColumnRef, time: TimeInput = None) -> "BaseRepository":
        return self.where_time(column, time, "<=")

    # Ordering

    def order_by(self, column: ColumnRef, direction: str = "asc") -> "BaseRepository":
        direction = direction.lower()
        if direction not in ("asc", "desc"):
            raise QueryConstructionError(f"Unsupported order direction: {direction!r}")
        resolved = self._column(column)
        self._query = self._query.order_by(resolved.asc() if direction == "asc" else resolved.desc())
        return self

    def asc(self, column: ColumnRef = "created_at") -> "BaseRepository":
        return self.order_by(column, "asc")

    def desc(self, column: ColumnRef = "created_at") -> "BaseRepository":
        return self.order_by(column, "desc")

    # Grouping

    def group_by(self, columns: Columns) -> "BaseRepository":
        self._query = self._query.group_by(*self._columns(columns))
        return self

    def having(self, column: ColumnRef, value: Any, operator: str = "=") -> "BaseRepository":
        return self._add_having(_compare(self._column(column), operator, value))

    def having_greater(self, column: ColumnRef, value: Any) -> "BaseRepository":
        return self.having(column, value, ">")

    def having_greater_equal(self, column: ColumnRef, value: Any) -> "BaseRepository":
        return self.having(column, value, ">=")

    def having_less(self, column: ColumnRef, value: Any) -> "BaseRepository":
        return self.having(column, value, "<")

    def having_less_equal(self, column: ColumnRef, value: Any) -> "BaseRepository":
        return self.having(column, value, "<=")

    def having_between(self, column: ColumnRef, start: Any, end: Any) -> "BaseRepository":
        return self._add_having(self._column(column).between(start, end))

    # Paging. Applied after every other clause when the query is built.

    def limit(self, limit: int) -> "BaseRepository":
        self._limit = limit
        return self

    def offset(self, offset: int) -> "BaseRepository":
        self._offset = offset
        return self

    def for_page(self, page: int, limit: int) -> "BaseRepository":
        return self.limit(limit).offset((page - 1) * limit)

    # Raw SQL fragments. Parameters use SQLAlchemy's :name style.

    def where_raw(self, sql: str, **params: Any) -> "BaseRepository":
        return self._add_where(text(sql).bindparams(**params))

    def or_where_raw(self, sql: str, **params: Any) -> "BaseRepository":
        return self._add_where(text(sql).bindparams(**params), _OR)

    def having_raw(self, sql: str, **params: Any) -> "BaseRepository":
        return self._add_having(text(sql).bindparams(**params))

    def or_having_raw(self, sql: str, **params: Any) -> "BaseRepository":
        return self._add_having(text(sql).bindparams(**params), _OR)

    def order_by_raw(self, sql: str, **params: Any) -> "BaseRepository":
        self._query = self._query.order_by(text(sql).bindparams(**params))
        return self

    def group_by_raw(self, sql: str) -> "BaseRepository":
        self._query = self._query.group_by(text(sql))
        return self

    # Joins: <this table>.<column> <operator> <table>.<table_column>

    def _join_target(self, name: str) -> Any:
        known = self.model.metadata.tables.get(name)
        return known if known is not None else table(name)

    def _join_condition(self, name: str, table_column: str, column: str, operator: str) -> Any:
        return _compare(
            literal_column(f"{self._table_name}.{column}"),
            operator,
            literal_column(f"{name}.{table_column}"),
        )

    def join(self, table_name: str, table_column: str, column: str, operator: str = "=") -> "BaseRepository":
        onclause = self._join_condition(table_name, table_column, column, operator)
        self._query = self._query.join(self._join_target(table_name), onclause)
        return self

    def left_join(self, table_name: str, table_column: str, column: str, operator: str = "=") -> "BaseRepository":
        onclause = self._join_condition(table_name, table_column, column, operator)
        self._query = self._query.join(self._join_target(table_name), onclause, isouter=True)
        return self

    def with_(self, relationship: str) -> "BaseRepository":
        """Eager-load a relationship of the bound model."""
        attr = getattr(self.model, relationship, None)
        if attr is None:
            raise QueryConstructionError(f"{self.model.__name__} has no relationship {relationship!r}")
        self._query = self._query.options(selectinload(attr))
        return self


def _like_pattern(value: Any) -> str:
    """Wrap in % for a contains-match unless the caller wrote a pattern."""
    value = str(value)
    if "%" in value:
        return value
    return f"%{value}%"
