"""
Tests for statement tokenizing and transaction classification.
"""
import pytest
from dialectforge.capabilities import DialectCapabilities
from dialectforge.keywords import KeywordRegistryBuilder
from dialectforge.tokenizer import SqlTokenizer, strip_block_comments
from dialectforge.transactions import TransactionClassifier
from dialectforge.dialects import available_dialects, get_dialect


@pytest.fixture
def classifier():
    keywords = KeywordRegistryBuilder().add_keywords([
        "SELECT", "UPDATE", "INSERT", "DELETE", "CREATE", "SET", "SHOW", "EXPLAIN", "USE", "COMMIT",
    ]).add_functions(["NOW"]).build()
    return TransactionClassifier(DialectCapabilities(transaction_commit_keywords=("COMMIT",)), keywords)


class TestSqlTokenizer:
    """Test the sqlparse-backed tokenizer."""

    def test_strip_comments(self):
        tokenizer = SqlTokenizer()
        assert tokenizer.strip_comments("  -- comment\nUPDATE t SET x=1") == "UPDATE t SET x=1"
        assert tokenizer.strip_comments("/* block */ SELECT 1") == "SELECT 1"

    def test_strip_comments_only_comments(self):
        tokenizer = SqlTokenizer()
        assert tokenizer.strip_comments("-- nothing here") == ""
        assert tokenizer.strip_comments("") == ""

    def test_first_keyword(self):
        tokenizer = SqlTokenizer()
        assert tokenizer.first_keyword("select * from t") == "select"
        assert tokenizer.first_keyword("/* x */\n  DELETE FROM t") == "DELETE"

    def test_first_keyword_not_a_word(self):
        tokenizer = SqlTokenizer()
        assert tokenizer.first_keyword("(SELECT 1)") == ""
        assert tokenizer.first_keyword("   ") == ""

    def test_dialect_specific_line_comment(self):
        tokenizer = SqlTokenizer(DialectCapabilities(single_line_comments=("--", "//")))
        assert tokenizer.first_keyword("// note\nINSERT INTO t VALUES (1)") == "INSERT"

    def test_leading_keyword_skips_leftover_comments(self):
        assert SqlTokenizer().leading_keyword("/* x */ update t set a = 1") == "update"

    def test_large_statement(self):
        sql = "-- load\nINSERT INTO t VALUES " + ",".join("(%d, 'x')" % i for i in range(20000))
        tokenizer = SqlTokenizer()
        assert tokenizer.first_keyword(sql) == "INSERT"
        assert tokenizer.strip_comments(sql).startswith("INSERT INTO t VALUES (0, 'x'),(1, ")

    def test_nested_block_comment(self):
        tokenizer = SqlTokenizer(DialectCapabilities(supports_nested_comments=True))
        assert tokenizer.strip_comments("/* a /* b */ c */ UPDATE t SET a = 1") == "UPDATE t SET a = 1"
        assert tokenizer.first_keyword("/* a /* b */ c */ UPDATE t SET a = 1") == "UPDATE"

    def test_custom_block_comment_markers(self):
        tokenizer = SqlTokenizer(DialectCapabilities(multi_line_comments=("{", "}")))
        assert tokenizer.first_keyword("{ note } DELETE FROM t") == "DELETE"


class TestStripBlockComments:
    """Test the depth-counting block comment pass."""

    def test_flat(self):
        assert strip_block_comments("a /* x /* y */ b", "/*", "*/") == "a   b"

    def test_nested(self):
        assert strip_block_comments("a /* x /* y */ z */ b", "/*", "*/", nested=True) == "a   b"

    def test_markers_in_literals_kept(self):
        sql = "SELECT '/* not a comment */'"
        assert strip_block_comments(sql, "/*", "*/", nested=True) == sql

    def test_markers_in_line_comments_kept(self):
        sql = "-- don't /* open\nSELECT 1"
        assert strip_block_comments(sql, "/*", "*/", nested=True, line_comments=("--",)) == sql


class TestTransactionClassifier:
    """Test read-only / modifying decisions."""

    def test_select_not_modifying(self, classifier):
        assert classifier.is_transaction_modifying("SELECT * FROM t") is False

    def test_update_after_comment_modifying(self, classifier):
        assert classifier.is_transaction_modifying("  -- comment\nUPDATE t SET x=1") is True

    def test_empty_not_modifying(self, classifier):
        assert classifier.is_transaction_modifying("") is False
        assert classifier.is_transaction_modifying(None) is False
        assert classifier.is_transaction_modifying("/* only a comment */") is False

    def test_explain_not_modifying(self, classifier):
        assert classifier.is_transaction_modifying("EXPLAIN SELECT 1") is False

    @pytest.mark.parametrize("sql", ["SHOW TABLES", "USE db", "SET search_path = x", "set x = 1"])
    def test_allow_listed_keywords(self, classifier, sql):
        assert classifier.is_transaction_modifying(sql) is False

    @pytest.mark.parametrize("sql", [
        "INSERT INTO t VALUES (1)",
        "delete from t",
        "CREATE TABLE t (id INT)",
    ])
    def test_dml_and_ddl_modifying(self, classifier, sql):
        assert classifier.is_transaction_modifying(sql) is True

    def test_unknown_leading_word_not_modifying(self, classifier):
        assert classifier.is_transaction_modifying("MERGE INTO t USING s ON 1=1") is False
        assert classifier.is_transaction_modifying("frobnicate everything") is False

    def test_non_keyword_classification_not_modifying(self, classifier):
        assert classifier.is_transaction_modifying_keyword("now") is False

    def test_custom_allow_list(self):
        keywords = KeywordRegistryBuilder().add_keywords(["VACUUM", "UPDATE"]).build()
        caps = DialectCapabilities(non_transaction_modifying_keywords=frozenset({"VACUUM"}))
        classifier = TransactionClassifier(caps, keywords)
        assert classifier.is_transaction_modifying("VACUUM t") is False
        assert classifier.is_transaction_modifying("UPDATE t SET a = 1") is True

    def test_injected_tokenizer(self):
        class FixedTokenizer:
            def strip_comments(self, sql):
                return sql

            def leading_keyword(self, sql):
                return "update"

        keywords = KeywordRegistryBuilder().add_keywords(["UPDATE"]).build()
        classifier = TransactionClassifier(DialectCapabilities(), keywords, FixedTokenizer())
        assert classifier.is_transaction_modifying("anything") is True

    def test_commit_and_rollback(self, classifier):
        assert classifier.is_commit("commit") is True
        assert classifier.is_commit("SELECT 1") is False
        # No rollback keywords configured
        assert classifier.is_rollback("ROLLBACK") is False


class TestDialectVerbs:
    """Every built-in dialect registers its DML/DDL verbs as keywords."""

    @pytest.mark.parametrize("name", available_dialects())
    @pytest.mark.parametrize("sql", [
        "INSERT INTO t VALUES (1)",
        "UPDATE t SET a = 1",
        "DELETE FROM t",
        "MERGE INTO t USING s ON (t.id = s.id) WHEN MATCHED THEN DELETE",
        "CREATE TABLE t (id INT)",
        "ALTER TABLE t ADD c INT",
        "DROP TABLE t",
        "TRUNCATE TABLE t",
    ])
    def test_modifying(self, name, sql):
        assert get_dialect(name).is_transaction_modifying(sql) is True

    @pytest.mark.parametrize("name", available_dialects())
    @pytest.mark.parametrize("sql", ["SELECT 1", "EXPLAIN SELECT 1", "SHOW x", "-- nothing"])
    def test_read_only(self, name, sql):
        assert get_dialect(name).is_transaction_modifying(sql) is False


class TestLargeAndNestedStatements:
    """Classification of statements that are long or open with nested comments."""

    def test_large_insert(self):
        sql = "INSERT INTO t VALUES " + ",".join("(%d, 'x')" % i for i in range(20000))
        assert get_dialect("generic").is_transaction_modifying(sql) is True

    def test_large_update_after_comments(self):
        sql = "-- c\n" * 5 + "UPDATE t SET " + ", ".join("c%d = %d" % (i, i) for i in range(20000))
        assert get_dialect("generic").is_transaction_modifying(sql) is True

    def test_large_select(self):
        sql = "SELECT " + ", ".join("c%d" % i for i in range(20000)) + " FROM t"
        assert get_dialect("mysql").is_transaction_modifying(sql) is False

    def test_postgres_nested_comment(self):
        dialect = get_dialect("postgres")
        assert dialect.is_transaction_modifying("/* a /* b */ c */ UPDATE t SET a = 1") is True
        assert dialect.is_transaction_modifying("/* a /* b */ c */ SELECT 1") is False

    def test_comments_stripped_once(self):
        class CountingTokenizer(SqlTokenizer):
            calls = 0

            def strip_comments(self, sql):
                CountingTokenizer.calls += 1
                return super().strip_comments(sql)

        keywords = KeywordRegistryBuilder().add_keywords(["UPDATE"]).build()
        classifier = TransactionClassifier(DialectCapabilities(), keywords, CountingTokenizer())
        assert classifier.is_transaction_modifying("-- c\nUPDATE t SET a = 1") is True
        assert CountingTokenizer.calls == 1
