"""
Method emitters for Java boilerplate.

Each emitter is a pure function from a ClassContext to JavaMethod
builder values; rendering to text happens later in the generator.
"""

from dataclasses import dataclass
from typing import List, Tuple

from ...core.naming import NameResolver
from ...core.schema import ClassContext
from .types import JavaTypeMapper, copy_statement, equality_term, hash_steps

# Width of "return " so continuation terms line up under the first one
_RETURN_INDENT = " " * len("return ")


@dataclass(frozen=True)
class JavaMethod:
    """Documentation, annotations, signature and body of one method."""

    signature: str
    body: Tuple[str, ...] = ()
    doc: Tuple[str, ...] = ()
    annotations: Tuple[str, ...] = ()


def _doc(add_comments: bool, *lines: str) -> Tuple[str, ...]:
    return tuple(lines) if add_comments else ()


def emit_getters(
    context: ClassContext, resolver: NameResolver, add_comments: bool = True
) -> List[JavaMethod]:
    """One getter per field, returning the field unmodified."""
    methods = []
    for field in context.fields:
        names = resolver.resolve(field)
        methods.append(
            JavaMethod(
                signature=f"public {field.type} {names.getter_name}()",
                body=(f"return {field.name};",),
                doc=_doc(add_comments, f"@return The {names.plain_name}."),
            )
        )
    return methods


def emit_setters(
    context: ClassContext, resolver: NameResolver, add_comments: bool = True
) -> List[JavaMethod]:
    """One setter per field, assigning through an explicit ``this`` reference."""
    methods = []
    for field in context.fields:
        names = resolver.resolve(field)
        param = names.plain_name
        methods.append(
            JavaMethod(
                signature=f"public void {names.setter_name}({field.type} {param})",
                body=(f"this.{field.name} = {param};",),
                doc=_doc(add_comments, f"@param {param} The {param} to set."),
            )
        )
    return methods


def emit_copy_constructor(
    context: ClassContext, mapper: JavaTypeMapper, add_comments: bool = True
) -> JavaMethod:
    """Constructor copying every field of another instance."""
    class_name = context.class_name
    body = tuple(
        copy_statement(mapper.classify(field), field) for field in context.fields
    )
    return JavaMethod(
        signature=f"public {class_name}({class_name} other)",
        body=body,
        doc=_doc(
            add_comments,
            f"Creates a deep copy of the given {class_name}.",
            "",
            f"@param other The {class_name} to copy.",
        ),
    )


def join_terms(terms: List[str]) -> List[str]:
    """
    Build the return statement of equals() from its comparison terms.

    Terms are joined with ``&&``, one per line; an empty list returns true.
    """
    if not terms:
        return ["return true;"]

    lines = []
    for index, term in enumerate(terms):
        prefix = "return " if index == 0 else _RETURN_INDENT
        suffix = ";" if index == len(terms) - 1 else " &&"
        lines.append(f"{prefix}{term}{suffix}")
    return lines


def emit_equals(
    context: ClassContext,
    resolver: NameResolver,
    mapper: JavaTypeMapper,
    add_comments: bool = True,
) -> JavaMethod:
    """equals() comparing every field through its getter, in declaration order."""
    class_name = context.class_name
    terms = [
        equality_term(mapper.classify(field), resolver.resolve(field).getter_name, field)
        for field in context.fields
    ]

    body = [
        "if (this == o) return true;",
        "if (o == null || getClass() != o.getClass()) return false;",
    ]
    if terms:
        body.append(f"{class_name} that = ({class_name}) o;")
    body.extend(join_terms(terms))

    return JavaMethod(
        signature="public boolean equals(Object o)",
        body=tuple(body),
        doc=_doc(add_comments, f"Compares this {class_name} with another object field by field."),
        annotations=("@Override",),
    )


def emit_hash_code(
    context: ClassContext,
    resolver: NameResolver,
    mapper: JavaTypeMapper,
    add_comments: bool = True,
) -> JavaMethod:
    """hashCode() folding every field into a seed of 1, in declaration order."""
    multiplier = resolver.naming.hash_multiplier
    kinds = [mapper.classify(field) for field in context.fields]

    body = ["int result = 1;"]
    if mapper.needs_temp(kinds):
        body.append("long temp;")
    for kind, field in zip(kinds, context.fields):
        body.extend(
            hash_steps(kind, resolver.resolve(field).getter_name, field, multiplier)
        )
    body.append("return result;")

    return JavaMethod(
        signature="public int hashCode()",
        body=tuple(body),
        doc=_doc(add_comments, "Computes a hash code consistent with equals()."),
        annotations=("@Override",),
    )
