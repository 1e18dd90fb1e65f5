from typing import Tuple

from dialectforge.capabilities import BASIC_CAPABILITIES, double_embedded_quotes, undouble_embedded_quotes
from dialectforge.constants import IdentifierCase, MultiValueInsertMode, ObjectUsage
from dialectforge.dialects.base import Dialect, build_dialect, core_keywords

BRACKETS = ("[", "]")


def escape_mssql_identifier(pair: Tuple[str, str], identifier: str) -> str:
    if tuple(pair) == BRACKETS:
        return identifier.replace("]", "]]")
    return double_embedded_quotes(pair, identifier)


def unescape_mssql_identifier(pair: Tuple[str, str], body: str) -> str:
    if tuple(pair) == BRACKETS:
        return body.replace("]]", "]")
    return undouble_embedded_quotes(pair, body)


MSSQL_CAPABILITIES = BASIC_CAPABILITIES.with_overrides(
    name="mssql",
    identifier_quotes=(BRACKETS, ('"', '"')),
    unquoted_case=IdentifierCase.MIXED,
    case_insensitive_name_lookup=True,
    catalog_usage=ObjectUsage.ALL,
    schema_usage=ObjectUsage.ALL,
    parameter_prefixes=("@",),
    script_delimiters=(";", "GO"),
    # ODBC call escape: { CALL proc(?) }
    execute_keywords=("CALL", "EXEC", "EXECUTE"),
    use_brackets_for_exec=True,
    dml_keywords=("INSERT", "UPDATE", "DELETE", "MERGE"),
    transaction_commit_keywords=("COMMIT",),
    transaction_rollback_keywords=("ROLLBACK",),
    block_bound_strings=(("BEGIN", "END"),),
    supports_alias_in_update=True,
    multi_value_insert_mode=MultiValueInsertMode.GROUP_ROWS,
    test_sql="SELECT 1",
    escape_identifier=escape_mssql_identifier,
    unescape_identifier=unescape_mssql_identifier,
)


def build_mssql_dialect() -> Dialect:
    return build_dialect(
        MSSQL_CAPABILITIES,
        core_keywords("mssql"),
        keywords=("TOP", "NOLOCK", "OUTPUT"),
        functions=("GETDATE", "ISNULL", "LEN", "NEWID", "DATEADD", "DATEDIFF"),
        types=("NVARCHAR", "DATETIME2", "UNIQUEIDENTIFIER", "MONEY", "VARBINARY"),
    )
