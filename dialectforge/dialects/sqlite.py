from typing import Any, Optional

from dialectforge.capabilities import BASIC_CAPABILITIES, quote_uuid_values
from dialectforge.constants import IdentifierCase, MultiValueInsertMode
from dialectforge.dialects.base import Dialect, build_dialect, core_keywords
from dialectforge.models import ColumnTypeInfo


def format_sqlite_value(codec, type_info: Optional[ColumnTypeInfo], value: Any, text: str) -> str:
    if isinstance(value, (bytes, bytearray)):
        return f"X'{bytes(value).hex()}'"
    return quote_uuid_values(codec, type_info, value, text)


SQLITE_CAPABILITIES = BASIC_CAPABILITIES.with_overrides(
    name="sqlite",
    identifier_quotes=(('"', '"'), ("[", "]"), ("`", "`")),
    unquoted_case=IdentifierCase.MIXED,
    case_insensitive_name_lookup=True,
    transaction_commit_keywords=("COMMIT", "END"),
    transaction_rollback_keywords=("ROLLBACK",),
    multi_value_insert_mode=MultiValueInsertMode.GROUP_ROWS,
    test_sql="SELECT 1",
    format_typed_value=format_sqlite_value,
)


def build_sqlite_dialect() -> Dialect:
    return build_dialect(
        SQLITE_CAPABILITIES,
        core_keywords("sqlite"),
        keywords=("PRAGMA", "VACUUM", "ATTACH", "DETACH"),
        functions=("IFNULL", "LENGTH", "SUBSTR", "DATETIME", "STRFTIME", "GROUP_CONCAT", "JSON_EXTRACT"),
        types=("TEXT", "BLOB", "REAL"),
    )
