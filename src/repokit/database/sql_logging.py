"""Log executed SQL statements with their bindings inlined."""

import re
import time
from collections.abc import Mapping
from datetime import date, datetime
from typing import Any

from sqlalchemy import event
from sqlalchemy.engine import Engine

from repokit.utils.logging import get_logger

logger = get_logger(__name__)

_POSITIONAL = re.compile(r"\?|%s")
_START_KEY = "repokit_query_start"


def render_binding(value: Any) -> str:
    """
    Render one bound parameter the way it would read in a SQL console.

    Strings and timestamps are quoted, None becomes null and booleans 1/0.
    """
    if isinstance(value, bool):
        return "1" if value else "0"
    if value is None:
        return "null"
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str):
        return f"'{value}'"
    if isinstance(value, datetime):
        return f"'{value.strftime('%Y-%m-%d %H:%M:%S')}'"
    if isinstance(value, date):
        return f"'{value.isoformat()}'"
    return str(value)


def inline_bindings(statement: str, parameters: Any) -> str:
    if not parameters:
        return statement
    if isinstance(parameters, Mapping):
        for key, value in parameters.items():
            rendered = render_binding(value)
            statement = statement.replace(f"%({key})s", rendered)
            statement = re.sub(rf":{re.escape(str(key))}\b", lambda _: rendered, statement)
        return statement

    values = iter(parameters)
    return _POSITIONAL.sub(lambda _: render_binding(next(values, None)), statement)


def _before_cursor_execute(conn, cursor, statement, parameters, context, executemany):
    conn.info.setdefault(_START_KEY, []).append(time.perf_counter())


def _after_cursor_execute(conn, cursor, statement, parameters, context, executemany):
    started = conn.info[_START_KEY].pop()
    elapsed_ms = (time.perf_counter() - started) * 1000
    if executemany:
        sql = f"{statement} (x{len(parameters)})"
    else:
        sql = inline_bindings(statement, parameters)
    logger.info(f'SQL: "{sql};", time: {elapsed_ms:.2f} ms')


def _handle_error(context):
    # after_cursor_execute never fires for a failed statement.
    if context.connection is None or context.cursor is None:
        return
    started = context.connection.info.get(_START_KEY)
    if started:
        started.pop()


def install_sql_logging(engine: Engine) -> None:
    """Register cursor listeners on the engine. Safe to call more than once."""
    if event.contains(engine, "before_cursor_execute", _before_cursor_execute):
        return
    event.listen(engine, "before_cursor_execute", _before_cursor_execute)
    event.listen(engine, "after_cursor_execute", _after_cursor_execute)
    event.listen(engine, "handle_error", _handle_error)
