"""
Built-in dialect profiles, looked up by name.
"""

import threading
from typing import Callable, Dict, List

from dialectforge.dialects.base import Dialect, build_dialect, core_keywords
from dialectforge.dialects.generic import build_generic_dialect
from dialectforge.dialects.mssql import build_mssql_dialect
from dialectforge.dialects.mysql import build_mysql_dialect
from dialectforge.dialects.oracle import build_oracle_dialect
from dialectforge.dialects.postgres import build_postgres_dialect
from dialectforge.dialects.sqlite import build_sqlite_dialect
from dialectforge.exceptions import DialectError
from dialectforge.logging_config import get_logger

logger = get_logger("dialects")

DIALECT_BUILDERS: Dict[str, Callable[[], Dialect]] = {
    "generic": build_generic_dialect,
    "postgres": build_postgres_dialect,
    "mysql": build_mysql_dialect,
    "sqlite": build_sqlite_dialect,
    "oracle": build_oracle_dialect,
    "mssql": build_mssql_dialect,
}

ALIASES = {
    "basic": "generic",
    "postgresql": "postgres",
    "sqlserver": "mssql",
}

_dialects: Dict[str, Dialect] = {}
_lock = threading.Lock()


def available_dialects() -> List[str]:
    return sorted(DIALECT_BUILDERS)


def get_dialect(name: str) -> Dialect:
    """
    Return the shared profile for a dialect, building it on first use.

    Raises:
        DialectError: No built-in dialect has that name
    """
    key = ALIASES.get(name.lower(), name.lower())
    if key not in DIALECT_BUILDERS:
        raise DialectError(name)
    with _lock:
        dialect = _dialects.get(key)
        if dialect is None:
            dialect = DIALECT_BUILDERS[key]()
            _dialects[key] = dialect
            logger.debug("Registered dialect profile", extra={"dialect": key, "operation": "register"})
    return dialect


__all__ = [
    "Dialect",
    "DialectError",
    "available_dialects",
    "build_dialect",
    "core_keywords",
    "get_dialect",
]
