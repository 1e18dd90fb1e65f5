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


def format_postgres_value(codec, type_info: Optional[ColumnTypeInfo], value: Any, text: str) -> str:
    if isinstance(value, (bytes, bytearray)):
        return f"decode('{bytes(value).hex()}', 'hex')"
    return quote_uuid_values(codec, type_info, value, text)


POSTGRES_CAPABILITIES = BASIC_CAPABILITIES.with_overrides(
    name="postgres",
    unquoted_case=IdentifierCase.LOWER,
    catalog_usage=ObjectUsage.DML,
    schema_usage=ObjectUsage.ALL,
    parameter_prefixes=("$",),
    execute_keywords=("CALL",),
    ddl_keywords=("CREATE", "ALTER", "DROP", "COMMENT"),
    dml_keywords=("INSERT", "UPDATE", "DELETE", "MERGE", "COPY"),
    transaction_commit_keywords=("COMMIT", "END"),
    transaction_rollback_keywords=("ROLLBACK", "ABORT"),
    non_transaction_modifying_keywords=TRANSACTION_NON_MODIFYING_KEYWORDS | {"VACUUM"},
    block_bound_strings=(("BEGIN", "END"),),
    block_header_strings=("DECLARE",),
    supports_alias_in_update=True,
    supports_table_drop_cascade=True,
    supports_nested_comments=True,
    supports_comment_query=True,
    multi_value_insert_mode=MultiValueInsertMode.GROUP_ROWS,
    test_sql="SELECT 1",
    format_typed_value=format_postgres_value,
)


def build_postgres_dialect() -> Dialect:
    return build_dialect(
        POSTGRES_CAPABILITIES,
        core_keywords("postgresql"),
        keywords=("ILIKE", "RETURNING", "LISTEN", "NOTIFY", "VACUUM", "ANALYZE", "COPY", "ABORT"),
        functions=("NOW", "STRING_AGG", "ARRAY_AGG", "GENERATE_SERIES", "TO_CHAR",
                   "DATE_TRUNC", "JSONB_BUILD_OBJECT"),
        types=("TEXT", "SERIAL", "BIGSERIAL", "JSON", "JSONB", "UUID", "BYTEA", "INET", "TIMESTAMPTZ"),
    )
