import argparse
import os
import sys

from dialectforge.dialects import available_dialects, get_dialect
from dialectforge.exceptions import DialectForgeError
from dialectforge.logging_config import setup_logging

COMMANDS = ['quote', 'unquote', 'literal', 'classify', 'complete', 'txn']


def read_version() -> str:
    """
    Reads the package version from the VERSION file next to this module.
    """
    version_path = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'VERSION')
    if os.path.exists(version_path):
        with open(version_path, 'r') as f:
            return f.read().strip()
    return 'Unknown'


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='DialectForge - SQL dialect rules')
    parser.add_argument('command', choices=COMMANDS, help='Operation to perform')
    parser.add_argument('--text', required=True, help='Identifier, value, word prefix or statement to process')
    parser.add_argument('--dialect', default='generic', choices=available_dialects(), help='SQL Dialect')

    parser.add_argument('--force-quotes', action='store_true', help='Always quote identifiers (quote)')
    parser.add_argument('--case-sensitive', action='store_true', help='Preserve identifier case (quote)')

    # Quality of Life flags
    parser.add_argument('--no-color', action='store_true', help='Disable colored log output')
    parser.add_argument('--log-format', choices=['text', 'json'], default='text', help='Log output format')
    parser.add_argument('--verbose', '-v', action='count', default=0, help='Increase log verbosity')
    parser.add_argument('--version', action='version', version=f'DialectForge v{read_version()}')
    return parser


def run_command(args) -> str:
    dialect = get_dialect(args.dialect)

    if args.command == 'quote':
        return dialect.quote_identifier(args.text, args.case_sensitive, args.force_quotes)
    if args.command == 'unquote':
        return dialect.unquote_identifier(args.text)
    if args.command == 'literal':
        return dialect.quote_string(args.text)
    if args.command == 'classify':
        keyword_type = dialect.keyword_type(args.text)
        return keyword_type.value if keyword_type else 'UNKNOWN'
    if args.command == 'complete':
        return "\n".join(dialect.matched_keywords(args.text))
    if args.command == 'txn':
        return 'modifying' if dialect.is_transaction_modifying(args.text) else 'read-only'
    raise DialectForgeError(f"Unknown command: {args.command}")


def main(argv=None):
    args = build_arg_parser().parse_args(argv)
    logger = setup_logging(verbose=args.verbose, log_format=args.log_format, no_color=args.no_color)
    logger.info(f"Running {args.command}", extra={"dialect": args.dialect, "operation": args.command})

    try:
        output = run_command(args)
    except DialectForgeError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if output:
        print(output)


if __name__ == '__main__':
    main()
