from typing import Any, Optional

from dialectforge.capabilities import BASIC_CAPABILITIES, quote_uuid_values
from dialectforge.constants import (
    TRANSACTION_NON_MODIFYING_KEYWORDS,
    IdentifierCase,
    MultiValueInsertMode,
    ObjectUsage,
)
from dialectforge.dialects.base import Dialect, build_dialect, core_keywords
from dialectforge.models import ColumnTypeInfo


def escape_mysql_string(value: str) -> str:
    return value.replace("'", "''").replace("\\", "\\\\")


def unescape_mysql_string(value: str) -> str:
    return value.replace("\\\\", "\\").replace("''", "'")


def format_mysql_value(codec, type_info: Optional[ColumnTypeInfo], value: Any, text: str) -> str:
    if isinstance(value, (bytes, bytearray)):
        return f"0x{bytes(value).hex()}"
    return quote_uuid_values(codec, type_info, value, text)


MYSQL_CAPABILITIES = BASIC_CAPABILITIES.with_overrides(
    name="mysql",
    identifier_quotes=(("`", "`"),),
    string_quotes=(("'", "'"), ('"', '"')),
    unquoted_case=IdentifierCase.MIXED,
    single_line_comments=("--", "#"),
    script_delimiter_redefiner="DELIMITER",
    catalog_usage=ObjectUsage.ALL,
    string_escape_character="\\",
    search_string_escape="\\",
    execute_keywords=("CALL",),
    dml_keywords=("INSERT", "UPDATE", "DELETE", "REPLACE"),
    transaction_commit_keywords=("COMMIT",),
    transaction_rollback_keywords=("ROLLBACK",),
    non_transaction_modifying_keywords=TRANSACTION_NON_MODIFYING_KEYWORDS | {"DESCRIBE", "DESC", "HELP"},
    block_bound_strings=(("BEGIN", "END"),),
    supports_alias_in_update=True,
    multi_value_insert_mode=MultiValueInsertMode.GROUP_ROWS,
    test_sql="SELECT 1",
    escape_string=escape_mysql_string,
    unescape_string=unescape_mysql_string,
    format_typed_value=format_mysql_value,
)


def build_mysql_dialect() -> Dialect:
    return build_dialect(
        MYSQL_CAPABILITIES,
        core_keywords("mysql"),
        keywords=("DESCRIBE", "HELP"),
        functions=("CONCAT", "IFNULL", "GROUP_CONCAT", "DATE_FORMAT", "NOW", "LAST_INSERT_ID"),
        types=("TINYINT", "MEDIUMINT", "TEXT", "LONGTEXT", "BLOB", "DATETIME", "ENUM", "JSON"),
    )
