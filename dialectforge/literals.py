"""
String literal quoting and column type modifier decisions.
"""

from numbers import Number
from typing import Any, Mapping, Optional

from dialectforge.capabilities import DialectCapabilities
from dialectforge.constants import (
    FEATURE_MAX_STRING_LENGTH,
    MAX_INT_LENGTH,
    MAX_LONG_LENGTH,
    DataKind,
)
from dialectforge.models import ColumnTypeInfo

_EXACT_NUMERIC_TYPES = ("DECIMAL", "NUMERIC", "NUMBER")


class StringLiteralCodec:
    def __init__(self, capabilities: DialectCapabilities):
        self.capabilities = capabilities

    @property
    def quote_char(self) -> str:
        if self.capabilities.string_quotes:
            return self.capabilities.string_quotes[0][0]
        return "'"

    def escape(self, value: str) -> str:
        return self.capabilities.escape_string(value)

    def unescape(self, value: Optional[str]) -> str:
        return self.capabilities.unescape_string(value or "")

    def is_quoted_literal(self, value: str) -> bool:
        quote = self.quote_char
        return len(value) >= 2 and value.startswith(quote) and value.endswith(quote)

    def quote_literal(self, value: str) -> str:
        quote = self.quote_char
        return f"{quote}{self.escape(value)}{quote}"

    def unquote_literal(self, value: str) -> str:
        if not self.is_quoted_literal(value):
            return value
        return self.unescape(value[1:-1])

    def format_typed_value(self, type_info: Optional[ColumnTypeInfo], value: Any, text: str) -> str:
        """Render ``value`` (already formatted as ``text``) for use in a script."""
        return self.capabilities.format_typed_value(self, type_info, value, text)

    def decide_column_type_modifiers(self, column: ColumnTypeInfo,
                                     features: Optional[Mapping[str, Any]] = None) -> Optional[str]:
        """
        Return the ``(length)`` / ``(precision,scale)`` suffix a column
        definition needs, or None when the bare type name is enough.

        Args:
            column: Column type as reported by the metadata provider
            features: Data source features; ``FEATURE_MAX_STRING_LENGTH`` caps
                string lengths, a value <= 0 meaning unlimited

        Returns:
            Parenthesized suffix or None
        """
        type_name = (column.type_name or "").upper()

        user_type = column.user_type
        if user_type is not None and user_type.scale == column.scale and (
                ((user_type.precision or 0) > 0 and user_type.precision == column.precision)
                or (user_type.max_length > 0 and user_type.max_length == column.max_length)):
            return None

        kind = column.data_kind
        if kind == DataKind.STRING:
            if "(" in type_name:
                return None
            max_length = column.max_length
            if max_length <= 0 or max_length in (MAX_INT_LENGTH, MAX_LONG_LENGTH):
                return None
            limit = (features or {}).get(FEATURE_MAX_STRING_LENGTH)
            if isinstance(limit, Number) and not isinstance(limit, bool):
                limit = int(limit)
                if limit <= 0:
                    return None
                max_length = min(max_length, limit)
            return f"({max_length})"

        if kind in (DataKind.BINARY, DataKind.CONTENT):
            if "LOB" in type_name:
                return None
            if 0 < column.max_length < MAX_INT_LENGTH:
                return f"({column.max_length})"
            return None

        if kind in (DataKind.NUMERIC, DataKind.BOOLEAN):
            if kind == DataKind.NUMERIC and type_name in _EXACT_NUMERIC_TYPES:
                scale = column.scale
                precision = column.precision or 0
                if precision == 0:
                    precision = column.max_length
                if scale is not None and scale >= 0 and precision >= 0 and not (scale == 0 and precision == 0):
                    return f"({precision},{scale})"
            elif type_name == "BIT":
                precision = column.precision or 0
                if precision > 1:
                    return f"({precision})"
        return None
