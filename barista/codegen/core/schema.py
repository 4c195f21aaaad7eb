"""
Core data model for boilerplate generation.

Holds the parsed field declarations of a class and the type
classification that drives the per-type equality, hash and copy rules.
"""

from dataclasses import dataclass, field
from typing import Tuple
from enum import Enum


class TypeKind(Enum):
    """Classification of a declared Java type."""

    INTEGRAL = "integral"  # int, short, byte, char
    LONG = "long"
    FLOAT = "float"
    DOUBLE = "double"
    BOOLEAN = "boolean"
    IMMUTABLE = "immutable"  # String, boxed primitives, value types
    OBJECT = "object"  # any other reference type
    ARRAY = "array"


BOOLEAN_TYPE_NAMES = frozenset({"boolean", "Boolean"})


@dataclass(frozen=True)
class FieldDescriptor:
    """Represents one eligible field of a class."""

    type: str  # Type as written, e.g. "int[]" or "Map<String, Integer>"
    name: str  # Identifier as declared, including any prefix
    line: int = field(default=0, compare=False)  # Source line, diagnostics only

    def __post_init__(self):
        """Enforce the non-empty, whitespace-free invariants."""
        if not self.type or not self.name:
            raise ValueError("Field type and name must be non-empty")
        if any(ch.isspace() for ch in self.name):
            raise ValueError(f"Field name contains whitespace: {self.name!r}")

    @property
    def is_array(self) -> bool:
        return self.type.endswith("[]")

    @property
    def array_depth(self) -> int:
        """Number of array dimensions (0 for non-arrays)."""
        depth = 0
        text = self.type
        while text.endswith("[]"):
            depth += 1
            text = text[:-2]
        return depth

    @property
    def is_boolean(self) -> bool:
        return self.type in BOOLEAN_TYPE_NAMES


@dataclass(frozen=True)
class ClassContext:
    """The resolved unit of work: one class and its eligible fields."""

    class_name: str
    fields: Tuple[FieldDescriptor, ...] = ()
    prefix_mismatches: int = 0  # Eligible fields left out by the variable prefix

    def __post_init__(self):
        """Normalize fields to a tuple so the context stays immutable."""
        object.__setattr__(self, "fields", tuple(self.fields))

    @property
    def is_empty(self) -> bool:
        return not self.fields
