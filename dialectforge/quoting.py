"""
Identifier quoting decisions.
"""

from typing import Optional, Tuple

from dialectforge.capabilities import DialectCapabilities
from dialectforge.constants import IdentifierCase, KeywordType
from dialectforge.keywords import KeywordRegistry

_CONFLICTING_TYPES = (KeywordType.KEYWORD, KeywordType.TYPE, KeywordType.OTHER)


class IdentifierQuoter:
    def __init__(self, capabilities: DialectCapabilities, keywords: KeywordRegistry):
        self.capabilities = capabilities
        self.keywords = keywords

    def _matching_pair(self, identifier: str) -> Optional[Tuple[str, str]]:
        for pair in self.capabilities.identifier_quotes:
            open_quote, close_quote = pair
            if (len(identifier) >= len(open_quote) + len(close_quote)
                    and identifier.startswith(open_quote)
                    and identifier.endswith(close_quote)):
                return pair
        return None

    def is_quoted(self, identifier: str) -> bool:
        return self._matching_pair(identifier) is not None

    def must_be_quoted(self, identifier: str, force_case_sensitive: bool = False) -> bool:
        caps = self.capabilities
        if not identifier:
            return False

        if caps.quote_reserved_words and self.keywords.classify(identifier) in _CONFLICTING_TYPES:
            return True

        if not caps.valid_identifier_start(identifier[0]):
            return True

        if force_case_sensitive and not caps.case_insensitive_name_lookup:
            # Identifiers whose case differs from the unquoted storage case
            # would be folded by the engine
            if caps.unquoted_case == IdentifierCase.UPPER and identifier != identifier.upper():
                return True
            if caps.unquoted_case == IdentifierCase.LOWER and identifier != identifier.lower():
                return True

        return any(not caps.valid_identifier_part(ch) for ch in identifier[1:])

    def quote(self, identifier: str, force_case_sensitive: bool = False,
              force_quotes: bool = False) -> str:
        if not identifier or self.is_quoted(identifier):
            return identifier

        quote_pairs = self.capabilities.identifier_quotes
        if not quote_pairs:
            return identifier

        if force_quotes or self.must_be_quoted(identifier, force_case_sensitive):
            open_quote, close_quote = quote_pairs[0]
            identifier = self.capabilities.escape_identifier(quote_pairs[0], identifier)
            return f"{open_quote}{identifier}{close_quote}"
        return identifier

    def unquote(self, identifier: str) -> str:
        pair = self._matching_pair(identifier)
        if pair is None:
            return identifier
        open_quote, close_quote = pair
        body = identifier[len(open_quote):len(identifier) - len(close_quote)]
        return self.capabilities.unescape_identifier(pair, body)

    def quote_qualified(self, *parts: Optional[str], catalog: Optional[str] = None,
                        force_quotes: bool = False) -> str:
        """
        Quote each non-empty name part and join them into a qualified name.

        ``catalog`` is placed before or after the rest depending on the
        dialect's catalog position.
        """
        caps = self.capabilities
        name = caps.struct_separator.join(
            self.quote(p, force_quotes=force_quotes) for p in parts if p
        )
        if not catalog:
            return name
        quoted_catalog = self.quote(catalog, force_quotes=force_quotes)
        if not name:
            return quoted_catalog
        if caps.catalog_at_start:
            return f"{quoted_catalog}{caps.catalog_separator}{name}"
        return f"{name}{caps.catalog_separator}{quoted_catalog}"
