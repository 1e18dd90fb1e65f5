"""
Keyword classification index.

A ``KeywordRegistryBuilder`` collects words while a dialect is being
configured; ``build()`` freezes them into a ``KeywordRegistry`` that is safe to
share between threads. Words are stored upper-case. Once a word is a
``KEYWORD`` it stays one: functions and types may share its spelling but must
not lift the reservation.
"""

from bisect import bisect_left
from typing import Dict, FrozenSet, Iterable, Iterator, List, Optional, Set

from dialectforge.constants import KeywordType
from dialectforge.logging_config import get_logger

logger = get_logger("keywords")


def _normalize(word: str) -> str:
    return word.upper()


class KeywordRegistryBuilder:
    """Mutable, construction-time collector of classified words."""

    def __init__(self):
        self._words: Dict[str, KeywordType] = {}
        self._functions: Set[str] = set()
        self._types: Set[str] = set()

    def register(self, word: str, keyword_type: KeywordType) -> "KeywordRegistryBuilder":
        word = _normalize(word)
        if self._words.get(word) != KeywordType.KEYWORD:
            self._words[word] = keyword_type
        return self

    def unregister(self, word: str) -> "KeywordRegistryBuilder":
        word = _normalize(word)
        self._words.pop(word, None)
        self._functions.discard(word)
        self._types.discard(word)
        return self

    def add_keywords(self, words: Iterable[str]) -> "KeywordRegistryBuilder":
        for word in words:
            self.register(word, KeywordType.KEYWORD)
        return self

    def add_functions(self, words: Iterable[str]) -> "KeywordRegistryBuilder":
        for word in words:
            self._functions.add(_normalize(word))
            self.register(word, KeywordType.FUNCTION)
        return self

    def add_types(self, words: Iterable[str]) -> "KeywordRegistryBuilder":
        for word in words:
            self._types.add(_normalize(word))
            self.register(word, KeywordType.TYPE)
        return self

    def turn_function_into_keyword(self, word: str) -> "KeywordRegistryBuilder":
        self._functions.discard(_normalize(word))
        return self.register(word, KeywordType.KEYWORD)

    def build(self) -> "KeywordRegistry":
        registry = KeywordRegistry(self._words, self._functions, self._types)
        logger.debug(
            f"Built keyword registry with {len(registry)} words",
            extra={"operation": "build"},
        )
        return registry


class KeywordRegistry:
    """
    Immutable snapshot of a dialect's classified words.

    Lookups are case-insensitive. Prefix queries bisect a sorted tuple of the
    words, so they cost one logarithmic lookup plus the matches returned.
    """

    def __init__(self, words: Dict[str, KeywordType], functions: Iterable[str] = (),
                 types: Iterable[str] = ()):
        self._words = dict(words)
        self._sorted = tuple(sorted(self._words))
        self._reserved = frozenset(self._words)
        self._functions = frozenset(functions)
        self._types = frozenset(types)

    @property
    def reserved_words(self) -> FrozenSet[str]:
        return self._reserved

    @property
    def functions(self) -> FrozenSet[str]:
        return self._functions

    @property
    def types(self) -> FrozenSet[str]:
        return self._types

    def classify(self, word: str) -> Optional[KeywordType]:
        return self._words.get(_normalize(word))

    def prefix_search(self, prefix: str) -> List[str]:
        prefix = _normalize(prefix)
        result = []
        for i in range(bisect_left(self._sorted, prefix), len(self._sorted)):
            word = self._sorted[i]
            if not word.startswith(prefix):
                break
            result.append(word)
        return result

    def has_prefix_match(self, prefix: str) -> bool:
        prefix = _normalize(prefix)
        i = bisect_left(self._sorted, prefix)
        return i < len(self._sorted) and self._sorted[i].startswith(prefix)

    def to_builder(self) -> KeywordRegistryBuilder:
        """Start a new builder pre-loaded with this registry's words."""
        builder = KeywordRegistryBuilder()
        builder._words.update(self._words)
        builder._functions.update(self._functions)
        builder._types.update(self._types)
        return builder

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and _normalize(word) in self._words

    def __iter__(self) -> Iterator[str]:
        return iter(self._sorted)

    def __len__(self) -> int:
        return len(self._sorted)

    def __repr__(self):
        return f"KeywordRegistry(words={len(self._sorted)})"
