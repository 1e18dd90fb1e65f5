"""
Minimal statement tokenizer built on the sqlparse lexer.

Only the services the rules engine consumes are provided: comment stripping
and extraction of a statement's first keyword. Both work on sqlparse's flat
token stream; statements are never grouped, so input size is not limited.
"""

import re
from typing import Iterator, Optional, Tuple

from sqlparse import tokens as T
from sqlparse.lexer import Lexer

from dialectforge.capabilities import DialectCapabilities
from dialectforge.constants import ML_COMMENT_END, ML_COMMENT_START

# Comment markers sqlparse already recognizes on its own
_NATIVE_LINE_COMMENTS = ("--", "#")
_NATIVE_BLOCK_COMMENTS = (ML_COMMENT_START, ML_COMMENT_END)
_WORD = re.compile(r"^\w+$", re.UNICODE)


def strip_block_comments(sql: str, start: str, end: str, nested: bool = False,
                         line_comments: Tuple[str, ...] = ()) -> str:
    """
    Replace ``start ... end`` comments with a single space.

    With ``nested`` each ``start`` inside a comment opens another level and
    the comment ends at the matching ``end``. String literals and line
    comments are copied unchanged.
    """
    out = []
    depth = 0
    in_string = False
    i = 0
    n = len(sql)
    while i < n:
        if depth:
            if sql.startswith(end, i):
                depth -= 1
                i += len(end)
                if not depth:
                    out.append(" ")
            elif nested and sql.startswith(start, i):
                depth += 1
                i += len(start)
            else:
                i += 1
            continue

        ch = sql[i]
        if in_string:
            if ch == "'":
                in_string = False
            out.append(ch)
            i += 1
        elif ch == "'":
            in_string = True
            out.append(ch)
            i += 1
        elif sql.startswith(start, i):
            depth = 1
            i += len(start)
        elif any(sql.startswith(m, i) for m in line_comments):
            line_end = sql.find("\n", i)
            line_end = n if line_end < 0 else line_end
            out.append(sql[i:line_end])
            i = line_end
        else:
            out.append(ch)
            i += 1
    return "".join(out)


class SqlTokenizer:
    def __init__(self, capabilities: Optional[DialectCapabilities] = None):
        self.capabilities = capabilities or DialectCapabilities()
        extra = [m for m in self.capabilities.single_line_comments if m not in _NATIVE_LINE_COMMENTS]
        self._extra_line_comments = (
            re.compile(r"^[ \t]*(?:%s).*$" % "|".join(re.escape(m) for m in extra), re.MULTILINE)
            if extra else None
        )
        block = self.capabilities.multi_line_comments
        self._block_comments = block if block and (
            self.capabilities.supports_nested_comments or tuple(block) != _NATIVE_BLOCK_COMMENTS) else None

    def _preprocess(self, sql: str) -> str:
        if self._extra_line_comments is not None:
            sql = self._extra_line_comments.sub("", sql)
        if self._block_comments is not None:
            start, end = self._block_comments
            sql = strip_block_comments(
                sql, start, end,
                nested=self.capabilities.supports_nested_comments,
                line_comments=self.capabilities.single_line_comments,
            )
        return sql

    @staticmethod
    def _lex(sql: str) -> Iterator[Tuple[object, str]]:
        return Lexer.get_default_instance().get_tokens(sql)

    def strip_comments(self, sql: str) -> str:
        if not sql:
            return ""
        parts = []
        for ttype, value in self._lex(self._preprocess(sql)):
            if ttype in T.Comment:
                parts.append("\n" if value.endswith("\n") else " ")
            else:
                parts.append(value)
        return "".join(parts).strip()

    def leading_keyword(self, sql: str) -> str:
        """
        Return the first word of ``sql``, which has already been through
        ``strip_comments``.

        Whitespace and any remaining comment tokens are skipped. An empty
        string is returned when the statement does not start with a word.
        """
        for ttype, value in self._lex(sql or ""):
            if ttype in T.Whitespace or ttype in T.Comment:
                continue
            if (ttype in T.Keyword or ttype in T.Name) and _WORD.match(value):
                return value
            return ""
        return ""

    def first_keyword(self, sql: str) -> str:
        return self.leading_keyword(self.strip_comments(sql))
