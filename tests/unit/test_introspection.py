import pytest
import sqlalchemy
from sqlalchemy.types import BINARY, VARCHAR

from dialectforge.constants import DataKind
from dialectforge.exceptions import DialectError
from dialectforge.introspection import (
    describe_column_type,
    describe_reflected_column,
    sqlalchemy_reserved_words,
)


class TestReservedWords:

    def test_generic_list(self):
        words = sqlalchemy_reserved_words()
        assert "SELECT" in words
        assert "CURRENT_DATE" in words
        assert all(w == w.upper() for w in words)

    def test_postgres_list(self):
        words = sqlalchemy_reserved_words("postgresql")
        assert "ANALYSE" in words
        assert "ILIKE" in words

    def test_oracle_list(self):
        words = sqlalchemy_reserved_words("oracle")
        assert "VARCHAR2" in words
        assert "MINUS" in words

    def test_unknown_dialect(self):
        with pytest.raises(DialectError, match="No SQLAlchemy dialect"):
            sqlalchemy_reserved_words("no_such_engine")


class TestDescribeColumnType:

    def test_string(self):
        info = describe_column_type(sqlalchemy.String(255))
        assert info.type_name == "VARCHAR"
        assert info.data_kind == DataKind.STRING
        assert info.max_length == 255

    def test_unbounded_string(self):
        info = describe_column_type(sqlalchemy.Text())
        assert info.type_name == "TEXT"
        assert info.max_length == 0

    def test_uppercase_type_class(self):
        info = describe_column_type(VARCHAR)
        assert info.type_name == "VARCHAR"
        assert info.data_kind == DataKind.STRING

    def test_numeric(self):
        info = describe_column_type(sqlalchemy.Numeric(10, 2))
        assert info.type_name == "NUMERIC"
        assert info.data_kind == DataKind.NUMERIC
        assert info.precision == 10
        assert info.scale == 2

    def test_integer(self):
        info = describe_column_type(sqlalchemy.Integer)
        assert info.type_name == "INTEGER"
        assert info.data_kind == DataKind.NUMERIC
        assert info.precision is None

    def test_boolean(self):
        assert describe_column_type(sqlalchemy.Boolean()).data_kind == DataKind.BOOLEAN

    def test_binary(self):
        assert describe_column_type(sqlalchemy.LargeBinary()).data_kind == DataKind.BINARY
        info = describe_column_type(BINARY(16))
        assert info.type_name == "BINARY"
        assert info.max_length == 16

    def test_datetime(self):
        info = describe_column_type(sqlalchemy.DateTime())
        assert info.type_name == "TIMESTAMP"
        assert info.data_kind == DataKind.DATETIME

    def test_other(self):
        assert describe_column_type(sqlalchemy.JSON()).data_kind == DataKind.OTHER

    def test_reflected_column(self):
        column = {"name": "email", "type": sqlalchemy.String(120), "nullable": True}
        info = describe_reflected_column(column)
        assert info.data_kind == DataKind.STRING
        assert info.max_length == 120
