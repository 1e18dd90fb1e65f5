from dialectforge.capabilities import BASIC_CAPABILITIES
from dialectforge.constants import IdentifierCase, ObjectUsage
from dialectforge.dialects.base import Dialect, build_dialect, core_keywords
from dialectforge.models import ProcedureCallSpec


def oracle_call_end_clause(spec: ProcedureCallSpec) -> str:
    # Oracle SELECT requires a FROM clause
    return "FROM DUAL" if spec.is_function else ""


ORACLE_CAPABILITIES = BASIC_CAPABILITIES.with_overrides(
    name="oracle",
    unquoted_case=IdentifierCase.UPPER,
    schema_usage=ObjectUsage.ALL,
    catalog_separator="@",
    catalog_at_start=False,
    execute_keywords=("CALL", "EXEC", "EXECUTE"),
    ddl_keywords=("CREATE", "ALTER", "DROP", "TRUNCATE", "COMMENT"),
    dml_keywords=("INSERT", "UPDATE", "DELETE", "MERGE"),
    transaction_commit_keywords=("COMMIT",),
    transaction_rollback_keywords=("ROLLBACK",),
    block_bound_strings=(("BEGIN", "END"),),
    block_header_strings=("DECLARE", "CREATE", "PACKAGE", "FUNCTION", "PROCEDURE", "TRIGGER"),
    inner_block_prefixes=("AS", "IS"),
    delimiter_after_block=True,
    supports_table_drop_cascade=True,
    test_sql="SELECT 1 FROM DUAL",
    dual_table_name="DUAL",
    call_end_clause=oracle_call_end_clause,
)


def build_oracle_dialect() -> Dialect:
    return build_dialect(
        ORACLE_CAPABILITIES,
        core_keywords("oracle"),
        keywords=("CONNECT", "START", "PRIOR", "MINUS"),
        functions=("NVL", "NVL2", "DECODE", "TO_CHAR", "TO_DATE", "SYSDATE", "LISTAGG"),
        types=("VARCHAR2", "NVARCHAR2", "NUMBER", "CLOB", "NCLOB", "BLOB", "RAW"),
    )
