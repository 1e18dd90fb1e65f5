"""
Tests for main.py CLI functionality.
"""
import pytest

from dialectforge.main import build_arg_parser, main, read_version, run_command


class TestCLIHelpers:
    """Test helper functions in main.py"""

    def test_read_version(self):
        assert read_version() == '0.1.0'

    def test_parser_defaults(self):
        args = build_arg_parser().parse_args(['quote', '--text', 'abc'])
        assert args.dialect == 'generic'
        assert args.force_quotes is False
        assert args.log_format == 'text'

    def test_run_command_quote(self):
        args = build_arg_parser().parse_args(['quote', '--text', 'order', '--dialect', 'mysql'])
        assert run_command(args) == '`order`'

    def test_run_command_classify_unknown(self):
        args = build_arg_parser().parse_args(['classify', '--text', 'customers'])
        assert run_command(args) == 'UNKNOWN'


class TestMain:
    """Test the CLI entry point end to end."""

    def test_quote(self, capsys):
        main(['quote', '--text', 'select'])
        assert capsys.readouterr().out == '"select"\n'

    def test_force_quotes(self, capsys):
        main(['quote', '--text', 'abc', '--force-quotes'])
        assert capsys.readouterr().out == '"abc"\n'

    def test_unquote(self, capsys):
        main(['unquote', '--text', '[my col]', '--dialect', 'mssql'])
        assert capsys.readouterr().out == 'my col\n'

    def test_literal(self, capsys):
        main(['literal', '--text', "it's"])
        assert capsys.readouterr().out == "'it''s'\n"

    def test_classify(self, capsys):
        main(['classify', '--text', 'count'])
        assert capsys.readouterr().out == 'FUNCTION\n'

    def test_complete(self, capsys):
        main(['complete', '--text', 'sel'])
        assert 'SELECT' in capsys.readouterr().out.splitlines()

    def test_complete_no_match(self, capsys):
        main(['complete', '--text', 'qqq'])
        assert capsys.readouterr().out == ''

    def test_txn_modifying(self, capsys):
        main(['txn', '--text', 'UPDATE t SET a = 1'])
        assert capsys.readouterr().out == 'modifying\n'

    def test_txn_read_only(self, capsys):
        main(['txn', '--text', '-- note\nSELECT 1', '-v', '--log-format', 'json'])
        assert capsys.readouterr().out == 'read-only\n'

    def test_unknown_dialect(self):
        with pytest.raises(SystemExit) as exc_info:
            main(['quote', '--text', 'a', '--dialect', 'informix'])
        assert exc_info.value.code == 2

    def test_library_error_exits(self, capsys, monkeypatch):
        from dialectforge import main as main_module
        from dialectforge.exceptions import DialectError

        def fail(name):
            raise DialectError(name)

        monkeypatch.setattr(main_module, 'get_dialect', fail)
        with pytest.raises(SystemExit) as exc_info:
            main(['quote', '--text', 'a'])
        assert exc_info.value.code == 1
        assert 'Error: Unknown dialect: generic' in capsys.readouterr().err
