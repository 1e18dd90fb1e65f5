"""
The dialect bundle shared by SQL tooling.
"""

from typing import Any, Iterable, List, Mapping, Optional, TextIO

from dialectforge.capabilities import DialectCapabilities
from dialectforge.constants import SQL92_FUNCTIONS, SQL92_KEYWORDS, SQL92_TYPES, KeywordType
from dialectforge.introspection import describe_column_type, sqlalchemy_reserved_words
from dialectforge.keywords import KeywordRegistry, KeywordRegistryBuilder
from dialectforge.literals import StringLiteralCodec
from dialectforge.logging_config import get_logger
from dialectforge.models import ColumnTypeInfo, ProcedureCallSpec
from dialectforge.procedures import ProcedureCallGenerator
from dialectforge.quoting import IdentifierQuoter
from dialectforge.transactions import StatementTokenizer, TransactionClassifier

logger = get_logger("dialects")


def core_keywords(sqlalchemy_dialect: Optional[str] = None) -> KeywordRegistryBuilder:
    """
    Start a keyword builder with the SQL-92 core words.

    Args:
        sqlalchemy_dialect: SQLAlchemy dialect whose reserved words are added
            as keywords; None adds SQLAlchemy's generic list

    Returns:
        Builder for further dialect-specific registrations
    """
    return (
        KeywordRegistryBuilder()
        .add_keywords(SQL92_KEYWORDS)
        .add_keywords(sqlalchemy_reserved_words(sqlalchemy_dialect))
        .add_functions(SQL92_FUNCTIONS)
        .add_types(SQL92_TYPES)
    )


class Dialect:
    """
    One engine's capabilities, keyword registry and the components driven by
    them. Built once and shared; nothing here mutates after construction.
    """

    def __init__(self, capabilities: DialectCapabilities, keywords: KeywordRegistry,
                 tokenizer: Optional[StatementTokenizer] = None):
        self.capabilities = capabilities
        self.keywords = keywords
        self.quoter = IdentifierQuoter(capabilities, keywords)
        self.literals = StringLiteralCodec(capabilities)
        self.transactions = TransactionClassifier(capabilities, keywords, tokenizer)
        self.procedures = ProcedureCallGenerator(capabilities, self.quoter)
        logger.debug(
            f"Dialect ready with {len(keywords)} words",
            extra={"dialect": capabilities.name, "operation": "init"},
        )

    @property
    def name(self) -> str:
        return self.capabilities.name

    # Keywords

    def keyword_type(self, word: str) -> Optional[KeywordType]:
        return self.keywords.classify(word)

    def matched_keywords(self, prefix: str) -> List[str]:
        return self.keywords.prefix_search(prefix)

    def is_keyword_start(self, prefix: str) -> bool:
        return self.keywords.has_prefix_match(prefix)

    def is_entity_query_word(self, word: str) -> bool:
        return word.upper() in self.capabilities.table_query_words

    def is_attribute_query_word(self, word: str) -> bool:
        return word.upper() in self.capabilities.column_query_words

    def keyword_next_line_indent(self, word: str) -> int:
        return self.capabilities.keyword_indents.get(word.upper(), 0)

    # Identifiers

    def quote_identifier(self, identifier: str, force_case_sensitive: bool = False,
                         force_quotes: bool = False) -> str:
        return self.quoter.quote(identifier, force_case_sensitive, force_quotes)

    def unquote_identifier(self, identifier: str) -> str:
        return self.quoter.unquote(identifier)

    def is_quoted_identifier(self, identifier: str) -> bool:
        return self.quoter.is_quoted(identifier)

    def full_name(self, *parts: Optional[str], catalog: Optional[str] = None) -> str:
        return self.quoter.quote_qualified(*parts, catalog=catalog)

    # Literals

    def quote_string(self, value: str) -> str:
        return self.literals.quote_literal(value)

    def unquote_string(self, value: str) -> str:
        return self.literals.unquote_literal(value)

    def escape_script_value(self, value: Any, text: str,
                            type_info: Optional[ColumnTypeInfo] = None) -> str:
        return self.literals.format_typed_value(type_info, value, text)

    def column_type_modifiers(self, column: Any,
                              features: Optional[Mapping[str, Any]] = None) -> Optional[str]:
        """Accepts a ``ColumnTypeInfo`` or any SQLAlchemy type."""
        if not isinstance(column, ColumnTypeInfo):
            column = describe_column_type(column)
        return self.literals.decide_column_type_modifiers(column, features)

    # Statements

    def is_transaction_modifying(self, sql: str) -> bool:
        return self.transactions.is_transaction_modifying(sql)

    def generate_procedure_call(self, spec: ProcedureCallSpec, out: Optional[TextIO] = None) -> str:
        return self.procedures.generate_call(spec, out)

    def __repr__(self):
        return f"Dialect(name='{self.name}', words={len(self.keywords)})"


def build_dialect(capabilities: DialectCapabilities, builder: KeywordRegistryBuilder,
                  keywords: Iterable[str] = (), functions: Iterable[str] = (),
                  types: Iterable[str] = ()) -> Dialect:
    builder.add_keywords(keywords).add_functions(functions).add_types(types)
    return Dialect(capabilities, builder.build())
