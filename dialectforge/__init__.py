"""
DialectForge: per-engine SQL dialect rules for generic SQL tooling.
"""

from dialectforge.capabilities import BASIC_CAPABILITIES, DialectCapabilities
from dialectforge.constants import (
    DataKind,
    IdentifierCase,
    KeywordType,
    ParameterKind,
    ProcedureType,
)
from dialectforge.dialects import Dialect, available_dialects, get_dialect
from dialectforge.exceptions import DialectError, DialectForgeError
from dialectforge.keywords import KeywordRegistry, KeywordRegistryBuilder
from dialectforge.literals import StringLiteralCodec
from dialectforge.models import ColumnTypeInfo, DataTypeInfo, ProcedureCallSpec, ProcedureParameter
from dialectforge.procedures import ProcedureCallGenerator
from dialectforge.quoting import IdentifierQuoter
from dialectforge.transactions import TransactionClassifier

__all__ = [
    "BASIC_CAPABILITIES",
    "ColumnTypeInfo",
    "DataKind",
    "DataTypeInfo",
    "Dialect",
    "DialectCapabilities",
    "DialectError",
    "DialectForgeError",
    "IdentifierCase",
    "IdentifierQuoter",
    "KeywordRegistry",
    "KeywordRegistryBuilder",
    "KeywordType",
    "ParameterKind",
    "ProcedureCallGenerator",
    "ProcedureCallSpec",
    "ProcedureParameter",
    "ProcedureType",
    "StringLiteralCodec",
    "TransactionClassifier",
    "available_dialects",
    "get_dialect",
]
