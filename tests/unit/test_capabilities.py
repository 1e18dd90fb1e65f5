import dataclasses
import uuid

import pytest

from dialectforge.capabilities import BASIC_CAPABILITIES, DialectCapabilities
from dialectforge.constants import IdentifierCase, SQLStateType
from dialectforge.literals import StringLiteralCodec


class TestDefaults:

    def test_basic_profile(self):
        caps = BASIC_CAPABILITIES
        assert caps.identifier_quotes == (('"', '"'),)
        assert caps.string_quotes == (("'", "'"),)
        assert caps.unquoted_case == IdentifierCase.UPPER
        assert caps.quoted_case == IdentifierCase.MIXED
        assert caps.script_delimiters == (";",)
        assert caps.multi_line_comments == ("/*", "*/")
        assert caps.sql_state_type == SQLStateType.SQL99
        assert caps.call_includes_out_parameters is True

    def test_derived_properties(self):
        assert BASIC_CAPABILITIES.supports_identifier_quoting is True
        assert BASIC_CAPABILITIES.with_overrides(identifier_quotes=()).supports_identifier_quoting is False
        assert BASIC_CAPABILITIES.with_overrides(supports_alter_table=False).supports_index_create_and_drop is False

    def test_identifier_chars(self):
        caps = BASIC_CAPABILITIES
        assert caps.valid_identifier_start("a") is True
        assert caps.valid_identifier_start("1") is False
        assert caps.valid_identifier_part("_") is True
        assert caps.valid_identifier_part("-") is False


class TestOverrides:

    def test_with_overrides_leaves_original(self):
        derived = BASIC_CAPABILITIES.with_overrides(name="custom", quote_reserved_words=False)
        assert derived.name == "custom"
        assert derived.quote_reserved_words is False
        assert BASIC_CAPABILITIES.quote_reserved_words is True

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            BASIC_CAPABILITIES.name = "changed"

    def test_strategies_ignored_in_equality(self):
        assert DialectCapabilities(escape_string=str.upper) == DialectCapabilities()

    def test_default_typed_value_policy(self):
        codec = StringLiteralCodec(BASIC_CAPABILITIES)
        value = uuid.UUID("12345678-1234-5678-1234-567812345678")
        assert codec.format_typed_value(None, value, str(value)) == "'12345678-1234-5678-1234-567812345678'"
        assert codec.format_typed_value(None, 42, "42") == "42"
