"""
Java boilerplate generator module.

Generates accessors, a copy constructor and equals()/hashCode() for
Java classes from their parsed field declarations.
"""

from .emitters import (
    JavaMethod,
    emit_copy_constructor,
    emit_equals,
    emit_getters,
    emit_hash_code,
    emit_setters,
)
from .generator import JavaGenerator, create_java_generator
from .naming import JAVA_RESERVED_WORDS, create_java_resolver
from .types import JavaTypeMapper, copy_statement, equality_term, hash_steps

__all__ = [
    "JavaGenerator",
    "JavaMethod",
    "JavaTypeMapper",
    "JAVA_RESERVED_WORDS",
    "create_java_generator",
    "create_java_resolver",
    # Emitters
    "emit_getters",
    "emit_setters",
    "emit_copy_constructor",
    "emit_equals",
    "emit_hash_code",
    # Per-type formulas
    "equality_term",
    "hash_steps",
    "copy_statement",
]
