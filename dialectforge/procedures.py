"""
Stored procedure / function call synthesis.
"""

import re
from typing import List, Optional, TextIO

from dialectforge.capabilities import DialectCapabilities
from dialectforge.constants import KEYWORD_SELECT, ParameterKind
from dialectforge.models import ProcedureCallSpec
from dialectforge.quoting import IdentifierQuoter

_NON_WORD_RUN = re.compile(r"[\W_]+")


def escape_bind_name(name: str) -> str:
    """Turn an arbitrary parameter name into a safe bind variable name."""
    return _NON_WORD_RUN.sub("_", name or "")


class ProcedureCallGenerator:
    def __init__(self, capabilities: DialectCapabilities, quoter: IdentifierQuoter):
        self.capabilities = capabilities
        self.quoter = quoter

    def qualified_name(self, spec: ProcedureCallSpec) -> str:
        return self.quoter.quote_qualified(spec.schema, spec.name, catalog=spec.catalog)

    def initial_clause(self, spec: ProcedureCallSpec) -> str:
        execute_keywords = self.capabilities.execute_keywords
        if spec.is_function or not execute_keywords:
            return f"{KEYWORD_SELECT} {self.qualified_name(spec)}"
        return f"{execute_keywords[0]} {self.qualified_name(spec)}"

    def call_arguments(self, spec: ProcedureCallSpec) -> List[str]:
        arguments = []
        for parameter in spec.parameters:
            if parameter.kind == ParameterKind.RETURN:
                continue
            if parameter.kind == ParameterKind.IN:
                arguments.append(f":{escape_bind_name(parameter.name)}")
            elif self.capabilities.call_includes_out_parameters:
                arguments.append("?")
        return arguments

    def generate_call(self, spec: ProcedureCallSpec, out: Optional[TextIO] = None) -> str:
        """
        Build a call statement for ``spec``.

        Args:
            spec: Routine name, type and parameters
            out: Optional stream the statement is also written to

        Returns:
            The statement followed by a blank line
        """
        use_brackets = self.capabilities.use_brackets_for_exec
        sql = "{ " if use_brackets else ""
        sql += f"{self.initial_clause(spec)}({','.join(self.call_arguments(spec))})"

        end_clause = self.capabilities.call_end_clause(spec)
        if end_clause:
            sql += f" {end_clause}"

        sql += " }" if use_brackets else ";"
        sql += "\n\n"

        if out is not None:
            out.write(sql)
        return sql
