"""
SQLAlchemy-backed metadata adapters.

Reserved word lists are read from SQLAlchemy's dialect identifier preparers,
and SQLAlchemy column types (declared or reflected with ``inspect()``) are
described as ``ColumnTypeInfo`` values. Nothing here opens a connection.
"""

from functools import lru_cache
from typing import Any, FrozenSet, Mapping, Optional

from sqlalchemy import exc
from sqlalchemy import types as sqltypes
from sqlalchemy.dialects import registry
from sqlalchemy.sql import compiler

from dialectforge.constants import DataKind
from dialectforge.exceptions import DialectError
from dialectforge.logging_config import get_logger
from dialectforge.models import ColumnTypeInfo

logger = get_logger("introspection")

_GENERIC_TYPE_NAMES = {
    "string": "VARCHAR",
    "unicode": "VARCHAR",
    "enum": "VARCHAR",
    "text": "TEXT",
    "unicode_text": "TEXT",
    "numeric": "NUMERIC",
    "float": "FLOAT",
    "double": "DOUBLE",
    "integer": "INTEGER",
    "small_integer": "SMALLINT",
    "big_integer": "BIGINT",
    "boolean": "BOOLEAN",
    "datetime": "TIMESTAMP",
    "date": "DATE",
    "time": "TIME",
    "interval": "INTERVAL",
    "large_binary": "BLOB",
    "uuid": "UUID",
}

_BINARY_TYPES = (sqltypes.LargeBinary, sqltypes.BINARY, sqltypes.VARBINARY)
_TEMPORAL_TYPES = (sqltypes.DateTime, sqltypes.Date, sqltypes.Time, sqltypes.Interval)


@lru_cache(maxsize=None)
def sqlalchemy_reserved_words(dialect_name: Optional[str] = None) -> FrozenSet[str]:
    """
    Upper-cased reserved words SQLAlchemy quotes for a dialect.

    Args:
        dialect_name: SQLAlchemy dialect name (``postgresql``, ``mysql`` ...);
            None for SQLAlchemy's generic ANSI list

    Raises:
        DialectError: SQLAlchemy has no dialect with that name
    """
    if not dialect_name:
        words = compiler.RESERVED_WORDS
    else:
        try:
            dialect_cls = registry.load(dialect_name)
        except exc.NoSuchModuleError as e:
            raise DialectError(dialect_name, "No SQLAlchemy dialect") from e
        words = dialect_cls.preparer.reserved_words
    logger.debug(
        f"Loaded {len(words)} reserved words",
        extra={"dialect": dialect_name or "ansi", "operation": "reserved_words"},
    )
    return frozenset(w.upper() for w in words)


def _type_name(sa_type: sqltypes.TypeEngine) -> str:
    class_name = type(sa_type).__name__
    if class_name.isupper():
        return class_name
    visit_name = getattr(sa_type, "__visit_name__", class_name)
    return _GENERIC_TYPE_NAMES.get(visit_name, visit_name.upper())


def describe_column_type(sa_type: Any) -> ColumnTypeInfo:
    """Describe a SQLAlchemy type (class or instance) for modifier decisions."""
    if isinstance(sa_type, type):
        sa_type = sa_type()

    name = _type_name(sa_type)
    if isinstance(sa_type, sqltypes.String):
        return ColumnTypeInfo(name, DataKind.STRING, max_length=sa_type.length or 0)
    if isinstance(sa_type, _BINARY_TYPES):
        return ColumnTypeInfo(name, DataKind.BINARY, max_length=getattr(sa_type, "length", None) or 0)
    if isinstance(sa_type, sqltypes.Boolean):
        return ColumnTypeInfo(name, DataKind.BOOLEAN)
    if isinstance(sa_type, sqltypes.Numeric):
        return ColumnTypeInfo(
            name, DataKind.NUMERIC,
            precision=sa_type.precision,
            scale=getattr(sa_type, "scale", None),
        )
    if isinstance(sa_type, sqltypes.Integer):
        return ColumnTypeInfo(name, DataKind.NUMERIC)
    if isinstance(sa_type, _TEMPORAL_TYPES):
        return ColumnTypeInfo(name, DataKind.DATETIME)
    return ColumnTypeInfo(name, DataKind.OTHER)


def describe_reflected_column(column: Mapping[str, Any]) -> ColumnTypeInfo:
    """Describe one entry of ``Inspector.get_columns()``."""
    return describe_column_type(column["type"])
