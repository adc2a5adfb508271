"""
Java dialect module.

Renders accessor, mutator, lookup and constructor members for Java enums.
"""

from .dialect import JavaDialect
from .naming import (
    JAVA_RESERVED_WORDS,
    get_java_reserved_words,
    validate_java_identifier,
)

__all__ = [
    "JavaDialect",
    "JAVA_RESERVED_WORDS",
    "get_java_reserved_words",
    "validate_java_identifier",
]
