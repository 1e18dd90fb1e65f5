"""
Dialect capability profiles.

A ``DialectCapabilities`` value is the fixed "profile" of one database engine:
quote tables, comment and delimiter tokens, feature flags and a handful of
strategy functions that engines override instead of subclassing.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any, Callable, FrozenSet, Mapping, Optional, Tuple

from dialectforge.constants import (
    COLUMN_QUERY_WORDS,
    DEFAULT_IDENTIFIER_QUOTES,
    DEFAULT_SCRIPT_DELIMITERS,
    DEFAULT_SINGLE_LINE_COMMENTS,
    DEFAULT_STRING_QUOTES,
    ML_COMMENT_END,
    ML_COMMENT_START,
    QUERY_KEYWORDS,
    STRUCT_SEPARATOR,
    TABLE_QUERY_WORDS,
    TRANSACTION_NON_MODIFYING_KEYWORDS,
    IdentifierCase,
    MultiValueInsertMode,
    ObjectUsage,
    SQLStateType,
)

if TYPE_CHECKING:
    from dialectforge.literals import StringLiteralCodec
    from dialectforge.models import ColumnTypeInfo, ProcedureCallSpec

QuotePairs = Tuple[Tuple[str, str], ...]


def is_letter(ch: str) -> bool:
    return ch.isalpha()


def is_letter_digit_or_underscore(ch: str) -> bool:
    return ch.isalpha() or ch.isdigit() or ch == "_"


SELF_ESCAPED_QUOTES = ('"', "'")


def double_embedded_quotes(pair: Tuple[str, str], identifier: str) -> str:
    """Double embedded quote chars when the pair is a self-paired `"` or `'`."""
    open_quote, close_quote = pair
    if open_quote == close_quote and open_quote in SELF_ESCAPED_QUOTES:
        return identifier.replace(open_quote, open_quote * 2)
    return identifier


def undouble_embedded_quotes(pair: Tuple[str, str], body: str) -> str:
    open_quote, close_quote = pair
    if open_quote == close_quote and open_quote in SELF_ESCAPED_QUOTES:
        return body.replace(open_quote * 2, open_quote)
    return body


def double_single_quotes(value: str) -> str:
    return value.replace("'", "''")


def undouble_single_quotes(value: str) -> str:
    return value.replace("''", "'")


def quote_uuid_values(codec: "StringLiteralCodec", type_info: Optional["ColumnTypeInfo"],
                      value: Any, text: str) -> str:
    """Default script value policy: only UUIDs need to become string literals."""
    if isinstance(value, uuid.UUID):
        return codec.quote_literal(text)
    return text


def no_call_end_clause(spec: "ProcedureCallSpec") -> str:
    return ""


@dataclass(frozen=True)
class DialectCapabilities:
    """
    Immutable description of what an engine's SQL looks like.

    Derive variants with ``with_overrides`` rather than mutating.
    """

    name: str = "basic"

    # Quoting
    identifier_quotes: QuotePairs = DEFAULT_IDENTIFIER_QUOTES
    string_quotes: QuotePairs = DEFAULT_STRING_QUOTES
    quote_reserved_words: bool = True
    unquoted_case: IdentifierCase = IdentifierCase.UPPER
    quoted_case: IdentifierCase = IdentifierCase.MIXED
    case_insensitive_name_lookup: bool = False
    supports_unquoted_mixed_case: bool = True
    supports_quoted_mixed_case: bool = True
    search_string_escape: str = ""
    string_escape_character: str = ""

    # Comments and script structure
    single_line_comments: Tuple[str, ...] = DEFAULT_SINGLE_LINE_COMMENTS
    multi_line_comments: Optional[Tuple[str, str]] = (ML_COMMENT_START, ML_COMMENT_END)
    script_delimiters: Tuple[str, ...] = DEFAULT_SCRIPT_DELIMITERS
    script_delimiter_redefiner: Optional[str] = None
    block_bound_strings: QuotePairs = ()
    block_header_strings: Tuple[str, ...] = ()
    inner_block_prefixes: Tuple[str, ...] = ()
    delimiter_after_query: bool = False
    delimiter_after_block: bool = False

    # Object naming
    catalog_usage: ObjectUsage = ObjectUsage.NONE
    schema_usage: ObjectUsage = ObjectUsage.NONE
    catalog_separator: str = STRUCT_SEPARATOR
    struct_separator: str = STRUCT_SEPARATOR
    catalog_at_start: bool = True
    parameter_prefixes: Tuple[str, ...] = ()
    in_clause_parentheses: Tuple[str, str] = ("(", ")")

    # Statement keywords
    query_keywords: Tuple[str, ...] = QUERY_KEYWORDS
    execute_keywords: Tuple[str, ...] = ()
    ddl_keywords: Tuple[str, ...] = ()
    dml_keywords: Tuple[str, ...] = ()
    transaction_commit_keywords: Tuple[str, ...] = ()
    transaction_rollback_keywords: Tuple[str, ...] = ()
    non_transaction_modifying_keywords: FrozenSet[str] = TRANSACTION_NON_MODIFYING_KEYWORDS
    table_query_words: FrozenSet[str] = TABLE_QUERY_WORDS
    column_query_words: FrozenSet[str] = COLUMN_QUERY_WORDS
    keyword_indents: Mapping[str, int] = field(default_factory=dict, hash=False)

    # Feature flags
    supports_subqueries: bool = True
    supports_alias_in_select: bool = False
    supports_alias_in_update: bool = False
    supports_table_drop_cascade: bool = False
    supports_order_by_index: bool = True
    supports_nested_comments: bool = False
    supports_comment_query: bool = False
    supports_nullability: bool = True
    supports_alter_table: bool = True
    supports_insert_all_default_values: bool = False
    multi_value_insert_mode: MultiValueInsertMode = MultiValueInsertMode.NOT_SUPPORTED
    sql_state_type: SQLStateType = SQLStateType.SQL99
    test_sql: Optional[str] = None
    dual_table_name: Optional[str] = None

    # Routine calls
    use_brackets_for_exec: bool = False
    call_includes_out_parameters: bool = True

    # Strategies
    valid_identifier_start: Callable[[str], bool] = field(
        default=is_letter, compare=False, repr=False)
    valid_identifier_part: Callable[[str], bool] = field(
        default=is_letter_digit_or_underscore, compare=False, repr=False)
    escape_identifier: Callable[[Tuple[str, str], str], str] = field(
        default=double_embedded_quotes, compare=False, repr=False)
    unescape_identifier: Callable[[Tuple[str, str], str], str] = field(
        default=undouble_embedded_quotes, compare=False, repr=False)
    escape_string: Callable[[str], str] = field(
        default=double_single_quotes, compare=False, repr=False)
    unescape_string: Callable[[str], str] = field(
        default=undouble_single_quotes, compare=False, repr=False)
    format_typed_value: Callable[..., str] = field(
        default=quote_uuid_values, compare=False, repr=False)
    call_end_clause: Callable[["ProcedureCallSpec"], str] = field(
        default=no_call_end_clause, compare=False, repr=False)

    @property
    def supports_identifier_quoting(self) -> bool:
        return bool(self.identifier_quotes)

    @property
    def supports_index_create_and_drop(self) -> bool:
        return self.supports_alter_table

    def with_overrides(self, **changes) -> "DialectCapabilities":
        return replace(self, **changes)


BASIC_CAPABILITIES = DialectCapabilities()
