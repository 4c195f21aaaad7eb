"""
Java-specific naming utilities.

Handles Java reserved words and builds the resolver used by the Java
emitters.
"""

from ...core.config import NamingConfig
from ...core.naming import NameResolver


# Java reserved words and literals that cannot be used as identifiers
JAVA_RESERVED_WORDS = {
    "abstract",
    "assert",
    "boolean",
    "break",
    "byte",
    "case",
    "catch",
    "char",
    "class",
    "const",
    "continue",
    "default",
    "do",
    "double",
    "else",
    "enum",
    "extends",
    "final",
    "finally",
    "float",
    "for",
    "goto",
    "if",
    "implements",
    "import",
    "instanceof",
    "int",
    "interface",
    "long",
    "native",
    "new",
    "package",
    "private",
    "protected",
    "public",
    "return",
    "short",
    "static",
    "strictfp",
    "super",
    "switch",
    "synchronized",
    "this",
    "throw",
    "throws",
    "transient",
    "try",
    "void",
    "volatile",
    "while",
    "true",
    "false",
    "null",
    "_",
}


def create_java_resolver(naming: NamingConfig = None) -> NameResolver:
    """Create a name resolver for Java accessors."""
    return NameResolver(naming)


def validate_java_identifier(name: str) -> list[str]:
    """
    Validate a generated Java identifier.

    Returns:
        List of validation errors (empty if valid)
    """
    errors = []

    if not name:
        errors.append("Identifier cannot be empty")
        return errors

    if name in JAVA_RESERVED_WORDS:
        errors.append(f"'{name}' is a Java reserved word")

    first = name[0]
    if not (first.isalpha() or first in "_$"):
        errors.append(f"'{name}' does not start with a letter, '_' or '$'")

    return errors
