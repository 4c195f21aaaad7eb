"""
Java type classification and per-type code formulas.

Every equality term, hash step and copy statement is produced by a
small pure function keyed by TypeKind, so each rule can be tested in
isolation and shared by all emitters.
"""

from typing import Callable, Dict, Iterable, List, Optional

from ...core.config import DEFAULT_IMMUTABLE_TYPES
from ...core.schema import FieldDescriptor, TypeKind

PRIMITIVE_KINDS: Dict[str, TypeKind] = {
    "int": TypeKind.INTEGRAL,
    "short": TypeKind.INTEGRAL,
    "byte": TypeKind.INTEGRAL,
    "char": TypeKind.INTEGRAL,
    "long": TypeKind.LONG,
    "float": TypeKind.FLOAT,
    "double": TypeKind.DOUBLE,
    "boolean": TypeKind.BOOLEAN,
}

# Kinds whose hash folds a 64-bit value through the shared "temp" local
WIDE_KINDS = frozenset({TypeKind.LONG, TypeKind.DOUBLE})


class JavaTypeMapper:
    """Classifies declared field types into TypeKind values."""

    def __init__(self, immutable_types: Optional[Iterable[str]] = None):
        """
        Initialize with the set of reference types treated as values.

        Args:
            immutable_types: Types copied by reference in the copy constructor
        """
        if immutable_types is None:
            immutable_types = DEFAULT_IMMUTABLE_TYPES
        self.immutable_types = frozenset(immutable_types)

    def classify(self, field: FieldDescriptor) -> TypeKind:
        """Map a field's declared type to its TypeKind."""
        if field.is_array:
            return TypeKind.ARRAY

        if field.type in PRIMITIVE_KINDS:
            return PRIMITIVE_KINDS[field.type]

        if field.type in self.immutable_types:
            return TypeKind.IMMUTABLE

        # Also accept the simple name of a qualified immutable type: java.util.UUID
        simple_name = field.type.rsplit(".", 1)[-1]
        if "<" not in field.type and simple_name in self.immutable_types:
            return TypeKind.IMMUTABLE

        return TypeKind.OBJECT

    def needs_temp(self, kinds: Iterable[TypeKind]) -> bool:
        """Whether hashCode() must declare the 64-bit fold variable."""
        return any(kind in WIDE_KINDS for kind in kinds)


# Equality terms


def _identity_equality(getter: str, field: FieldDescriptor) -> str:
    return f"{getter}() == that.{getter}()"


def _float_equality(getter: str, field: FieldDescriptor) -> str:
    return f"Float.compare(that.{getter}(), {getter}()) == 0"


def _double_equality(getter: str, field: FieldDescriptor) -> str:
    return f"Double.compare(that.{getter}(), {getter}()) == 0"


def _object_equality(getter: str, field: FieldDescriptor) -> str:
    return f"java.util.Objects.equals({getter}(), that.{getter}())"


def _array_equality(getter: str, field: FieldDescriptor) -> str:
    method = "deepEquals" if field.array_depth > 1 else "equals"
    return f"java.util.Arrays.{method}({getter}(), that.{getter}())"


_EQUALITY_TERMS: Dict[TypeKind, Callable[[str, FieldDescriptor], str]] = {
    TypeKind.INTEGRAL: _identity_equality,
    TypeKind.LONG: _identity_equality,
    TypeKind.BOOLEAN: _identity_equality,
    TypeKind.FLOAT: _float_equality,
    TypeKind.DOUBLE: _double_equality,
    TypeKind.IMMUTABLE: _object_equality,
    TypeKind.OBJECT: _object_equality,
    TypeKind.ARRAY: _array_equality,
}


def equality_term(kind: TypeKind, getter: str, field: FieldDescriptor) -> str:
    """Boolean expression comparing one field of ``this`` and ``that``."""
    return _EQUALITY_TERMS[kind](getter, field)


# Hash steps


def _accumulate(multiplier: int, value: str) -> str:
    return f"result = {multiplier} * result + {value};"


def _fold_temp(multiplier: int) -> str:
    return _accumulate(multiplier, "(int) (temp ^ (temp >>> 32))")


def hash_steps(
    kind: TypeKind, getter: str, field: FieldDescriptor, multiplier: int
) -> List[str]:
    """
    Statements folding one field into ``result``.

    Every list ends with exactly one accumulation using ``multiplier``;
    64-bit kinds first load the value into the ``temp`` local.
    """
    if kind == TypeKind.INTEGRAL:
        return [_accumulate(multiplier, f"(int) {getter}()")]
    if kind == TypeKind.BOOLEAN:
        return [_accumulate(multiplier, f"({getter}() ? 1 : 0)")]
    if kind == TypeKind.LONG:
        return [f"temp = {getter}();", _fold_temp(multiplier)]
    if kind == TypeKind.FLOAT:
        return [_accumulate(multiplier, f"Float.floatToIntBits({getter}())")]
    if kind == TypeKind.DOUBLE:
        return [f"temp = Double.doubleToLongBits({getter}());", _fold_temp(multiplier)]
    if kind == TypeKind.ARRAY:
        method = "deepHashCode" if field.array_depth > 1 else "hashCode"
        return [_accumulate(multiplier, f"java.util.Arrays.{method}({getter}())")]

    # IMMUTABLE and OBJECT
    return [
        _accumulate(multiplier, f"({getter}() == null ? 0 : {getter}().hashCode())")
    ]


# Copy statements


def copy_constructor_call(type_name: str) -> str:
    """Constructor expression for a type, using the diamond form for generics."""
    if "<" in type_name:
        return f"new {type_name.split('<', 1)[0]}<>"
    return f"new {type_name}"


def copy_statement(kind: TypeKind, field: FieldDescriptor, source: str = "other") -> str:
    """Assignment copying one field from ``source`` into ``this``."""
    name = field.name
    value = f"{source}.{name}"

    if kind == TypeKind.ARRAY:
        return (
            f"this.{name} = {value} == null ? null : "
            f"java.util.Arrays.copyOf({value}, {value}.length);"
        )

    if kind == TypeKind.OBJECT:
        return (
            f"this.{name} = {value} == null ? null : "
            f"{copy_constructor_call(field.type)}({value});"
        )

    # Primitives and immutable values are shared as-is
    return f"this.{name} = {value};"
