"""
DialectForge SQL Constants

Centralized definitions for keyword classes, identifier case policies and the
default tables shared by the built-in dialect profiles.
"""

from enum import Enum
from typing import FrozenSet, Tuple


class KeywordType(str, Enum):
    """Classification of a registered word."""

    KEYWORD = "KEYWORD"
    FUNCTION = "FUNCTION"
    TYPE = "TYPE"
    OTHER = "OTHER"


class IdentifierCase(str, Enum):
    """How an engine stores identifiers."""

    UPPER = "UPPER"
    LOWER = "LOWER"
    MIXED = "MIXED"


class ObjectUsage(str, Enum):
    """Where catalog or schema names may appear in statements."""

    NONE = "NONE"
    DML = "DML"
    DDL = "DDL"
    ALL = "ALL"


class MultiValueInsertMode(str, Enum):
    """Multi-row INSERT support."""

    NOT_SUPPORTED = "NOT_SUPPORTED"
    GROUP_ROWS = "GROUP_ROWS"
    PLAIN = "PLAIN"


class ParameterKind(str, Enum):
    """Stored routine parameter direction."""

    IN = "IN"
    OUT = "OUT"
    INOUT = "INOUT"
    RETURN = "RETURN"


class ProcedureType(str, Enum):
    PROCEDURE = "PROCEDURE"
    FUNCTION = "FUNCTION"


class DataKind(str, Enum):
    """Broad value category of a column type."""

    STRING = "STRING"
    NUMERIC = "NUMERIC"
    BOOLEAN = "BOOLEAN"
    DATETIME = "DATETIME"
    BINARY = "BINARY"
    CONTENT = "CONTENT"
    OTHER = "OTHER"


class SQLStateType(str, Enum):
    SQL99 = "SQL99"
    XOPEN = "XOPEN"


KEYWORD_SELECT = "SELECT"
KEYWORD_EXPLAIN = "EXPLAIN"

STRUCT_SEPARATOR = "."
ML_COMMENT_START = "/*"
ML_COMMENT_END = "*/"

# Feature key reported by a data source for the longest declarable string
FEATURE_MAX_STRING_LENGTH = "datasource.max-string-length"

# Java-style int bounds used by drivers for "unbounded" lengths
MAX_INT_LENGTH = 2 ** 31 - 1
MAX_LONG_LENGTH = 2 ** 63 - 1

DEFAULT_IDENTIFIER_QUOTES: Tuple[Tuple[str, str], ...] = (('"', '"'),)
DEFAULT_STRING_QUOTES: Tuple[Tuple[str, str], ...] = (("'", "'"),)
DEFAULT_SINGLE_LINE_COMMENTS: Tuple[str, ...] = ("--",)
DEFAULT_SCRIPT_DELIMITERS: Tuple[str, ...] = (";",)
QUERY_KEYWORDS: Tuple[str, ...] = (KEYWORD_SELECT,)

TRANSACTION_NON_MODIFYING_KEYWORDS: FrozenSet[str] = frozenset(
    {KEYWORD_SELECT, "SHOW", "USE", "SET", KEYWORD_EXPLAIN}
)

# SQL-92 reserved words; every built-in profile starts from these
SQL92_KEYWORDS: FrozenSet[str] = frozenset({
    "ABSOLUTE", "ACTION", "ADD", "ALL", "ALLOCATE", "ALTER", "AND", "ANY",
    "ARE", "AS", "ASC", "ASSERTION", "AT", "AUTHORIZATION", "BEGIN",
    "BETWEEN", "BOTH", "BY", "CASCADE", "CASCADED", "CASE", "CAST",
    "CATALOG", "CHECK", "CLOSE", "COLLATE", "COLLATION", "COLUMN", "COMMIT",
    "CONNECT", "CONNECTION", "CONSTRAINT", "CONSTRAINTS", "CONTINUE",
    "CORRESPONDING", "CREATE", "CROSS", "CURRENT", "CURSOR", "DEALLOCATE",
    "DECLARE", "DEFAULT", "DEFERRABLE", "DEFERRED", "DELETE", "DESC",
    "DESCRIBE", "DESCRIPTOR", "DIAGNOSTICS", "DISCONNECT", "DISTINCT",
    "DOMAIN", "DROP", "ELSE", "END", "ESCAPE", "EXCEPT", "EXCEPTION", "EXEC",
    "EXECUTE", "EXISTS", "EXTERNAL", "FALSE", "FETCH", "FIRST", "FOR",
    "FOREIGN", "FOUND", "FROM", "FULL", "GET", "GLOBAL", "GO", "GOTO",
    "GRANT", "GROUP", "HAVING", "IDENTITY", "IMMEDIATE", "IN", "INDICATOR",
    "INITIALLY", "INNER", "INPUT", "INSENSITIVE", "INSERT", "INTERSECT",
    "INTERVAL", "INTO", "IS", "ISOLATION", "JOIN", "KEY", "LANGUAGE", "LAST",
    "LEADING", "LEFT", "LEVEL", "LIKE", "LOCAL", "MATCH", "MODULE", "NAMES",
    "NATIONAL", "NATURAL", "NEXT", "NO", "NOT", "NULL", "OF", "ON", "ONLY",
    "OPEN", "OPTION", "OR", "ORDER", "OUTER", "OUTPUT", "OVERLAPS", "PAD",
    "PARTIAL", "POSITION", "PREPARE", "PRESERVE", "PRIMARY", "PRIOR",
    "PRIVILEGES", "PROCEDURE", "PUBLIC", "READ", "REFERENCES", "RELATIVE",
    "RESTRICT", "REVOKE", "RIGHT", "ROLLBACK", "ROWS", "SCHEMA", "SCROLL",
    "SECTION", "SELECT", "SESSION", "SET", "SIZE", "SOME", "SPACE", "SQL",
    "SQLCODE", "SQLERROR", "SQLSTATE", "TABLE", "TEMPORARY", "THEN", "TO",
    "TRAILING", "TRANSACTION", "TRANSLATE", "TRANSLATION", "TRUE", "UNION",
    "UNIQUE", "UNKNOWN", "UPDATE", "USAGE", "USER", "USING", "VALUE",
    "VALUES", "VIEW", "WHEN", "WHENEVER", "WHERE", "WITH", "WORK", "WRITE",
    "MERGE", "TRUNCATE", "CALL", "REPLACE", "SHOW", "USE", "EXPLAIN",
})

SQL92_FUNCTIONS: FrozenSet[str] = frozenset({
    "AVG", "COUNT", "MAX", "MIN", "SUM", "COALESCE", "NULLIF", "LOWER",
    "UPPER", "TRIM", "SUBSTRING", "CHAR_LENGTH", "CHARACTER_LENGTH",
    "OCTET_LENGTH", "BIT_LENGTH", "EXTRACT", "CURRENT_DATE", "CURRENT_TIME",
    "CURRENT_TIMESTAMP", "CURRENT_USER", "SESSION_USER", "SYSTEM_USER", "ABS",
    "MOD", "CONVERT",
})

SQL92_TYPES: FrozenSet[str] = frozenset({
    "BIT", "CHAR", "CHARACTER", "VARCHAR", "NCHAR", "INTEGER", "INT",
    "SMALLINT", "BIGINT", "DECIMAL", "DEC", "NUMERIC", "FLOAT", "REAL",
    "DOUBLE", "PRECISION", "DATE", "TIME", "TIMESTAMP", "BOOLEAN", "VARYING",
})

# Words after which a table name is expected
TABLE_QUERY_WORDS: FrozenSet[str] = frozenset({
    "FROM", "UPDATE", "INTO", "TABLE", "JOIN",
})

# Words after which a column name is expected
COLUMN_QUERY_WORDS: FrozenSet[str] = frozenset({
    "WHERE", "SET", "ON", "AND", "OR", "BY", "HAVING",
})
