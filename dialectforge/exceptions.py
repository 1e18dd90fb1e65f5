"""
DialectForge Custom Exceptions

This module defines custom exception classes used throughout DialectForge.
"""


class DialectForgeError(Exception):
    """Base exception for all DialectForge errors."""
    pass


class DialectError(DialectForgeError):
    """
    Raised when an unsupported or invalid dialect is requested.

    Attributes:
        dialect: The dialect name that could not be resolved
    """
    def __init__(self, dialect: str, reason: str = "Unknown dialect"):
        self.dialect = dialect
        self.reason = reason
        super().__init__(f"{reason}: {dialect}")
