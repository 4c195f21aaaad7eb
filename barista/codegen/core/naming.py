"""
Naming utilities for accessor generation.

Derives the plain name, capitalized fragment, getter and setter
names of a field from its declaration and the naming configuration.
"""

import re
from dataclasses import dataclass
from typing import Dict, Tuple

from .config import NamingConfig
from .schema import FieldDescriptor

# "is" followed by an uppercase letter, e.g. isReady
_IS_PREFIXED = re.compile(r"^is[A-Z]")


@dataclass(frozen=True)
class ResolvedNames:
    """All names derived from a single field."""

    plain_name: str
    pascal_fragment: str
    getter_name: str
    setter_name: str


def capitalize_first(name: str) -> str:
    """Upper-case only the first character, leaving the rest untouched."""
    return name[:1].upper() + name[1:]


def strip_prefix(name: str, prefix: str) -> str:
    """Remove a variable prefix from a name, if present."""
    if prefix and name.startswith(prefix):
        return name[len(prefix):]
    return name


class NameResolver:
    """Resolves accessor names for fields under one naming configuration."""

    def __init__(self, naming: NamingConfig = None):
        """
        Initialize name resolver.

        Args:
            naming: Variable prefix, boolean getter prefix and hash settings
        """
        self.naming = naming or NamingConfig()
        self._name_cache: Dict[Tuple[str, str], ResolvedNames] = {}

    def resolve(self, field: FieldDescriptor) -> ResolvedNames:
        """
        Derive every name for a field.

        Args:
            field: Parsed field declaration

        Returns:
            Plain name, pascal fragment, getter name and setter name
        """
        cache_key = (field.type, field.name)
        if cache_key in self._name_cache:
            return self._name_cache[cache_key]

        plain = self.plain_name(field)
        resolved = ResolvedNames(
            plain_name=plain,
            pascal_fragment=self.pascal_fragment(field),
            getter_name=self.getter_name(field),
            setter_name=self.setter_name(field),
        )

        self._name_cache[cache_key] = resolved
        return resolved

    def plain_name(self, field: FieldDescriptor) -> str:
        """Field name without the configured variable prefix."""
        return strip_prefix(field.name, self.naming.var_prefix)

    def pascal_fragment(self, field: FieldDescriptor) -> str:
        """Capitalized name fragment used to build the getter name."""
        plain = self.plain_name(field)

        # Boolean "isReady" becomes "Ready" so the getter never reads "isIsReady"
        if field.is_boolean and _IS_PREFIXED.match(plain):
            return plain[2:]

        return capitalize_first(plain)

    def getter_name(self, field: FieldDescriptor) -> str:
        if not field.is_boolean:
            return f"get{self.pascal_fragment(field)}"

        # The declared name already reads like a getter, whatever the boolean prefix
        if _IS_PREFIXED.match(field.name):
            return self.plain_name(field)

        return f"{self.naming.boolean_prefix}{self.pascal_fragment(field)}"

    def setter_name(self, field: FieldDescriptor) -> str:
        # No "is" stripping here: isElectric -> setIsElectric
        return f"set{capitalize_first(self.plain_name(field))}"

    def reset_cache(self):
        """Forget previously resolved names."""
        self._name_cache.clear()
