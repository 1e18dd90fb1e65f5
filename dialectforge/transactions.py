"""
Transaction classification of statements.
"""

from typing import Optional, Protocol

from dialectforge.capabilities import DialectCapabilities
from dialectforge.constants import KeywordType
from dialectforge.keywords import KeywordRegistry
from dialectforge.logging_config import get_logger
from dialectforge.tokenizer import SqlTokenizer

logger = get_logger("transactions")


class StatementTokenizer(Protocol):
    def strip_comments(self, sql: str) -> str: ...

    def leading_keyword(self, sql: str) -> str: ...


class TransactionClassifier:
    """
    Decides whether a statement takes part in an open transaction.

    Known keywords are modifying unless they are on the dialect's read-only
    allow list; unknown leading words are never modifying.
    """

    def __init__(self, capabilities: DialectCapabilities, keywords: KeywordRegistry,
                 tokenizer: Optional[StatementTokenizer] = None):
        self.capabilities = capabilities
        self.keywords = keywords
        self.tokenizer = tokenizer or SqlTokenizer(capabilities)

    def first_keyword(self, sql: str) -> str:
        stripped = self.tokenizer.strip_comments(sql or "")
        return self.tokenizer.leading_keyword(stripped).upper()

    def is_transaction_modifying_keyword(self, keyword: str) -> bool:
        keyword = keyword.upper()
        if self.keywords.classify(keyword) != KeywordType.KEYWORD:
            return False
        return keyword not in self.capabilities.non_transaction_modifying_keywords

    def is_transaction_modifying(self, sql: str) -> bool:
        stripped = self.tokenizer.strip_comments(sql or "")
        if not stripped:
            # Nothing left but comments: metadata reads and the like
            return False
        keyword = self.tokenizer.leading_keyword(stripped).upper()
        if not keyword:
            return False
        modifying = self.is_transaction_modifying_keyword(keyword)
        logger.debug(
            f"Statement starting with {keyword} is {'' if modifying else 'not '}transaction modifying",
            extra={"dialect": self.capabilities.name, "keyword": keyword},
        )
        return modifying

    def is_commit(self, sql: str) -> bool:
        return self._starts_with(sql, self.capabilities.transaction_commit_keywords)

    def is_rollback(self, sql: str) -> bool:
        return self._starts_with(sql, self.capabilities.transaction_rollback_keywords)

    def _starts_with(self, sql: str, keywords) -> bool:
        if not keywords:
            return False
        keyword = self.first_keyword(sql or "")
        return bool(keyword) and keyword in {k.upper() for k in keywords}
