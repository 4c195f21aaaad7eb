"""Tests for the Java method emitters."""

from __future__ import annotations

from barista.codegen.core.config import NamingConfig
from barista.codegen.core.naming import NameResolver
from barista.codegen.core.schema import ClassContext, FieldDescriptor
from barista.codegen.languages.java.emitters import (
    emit_copy_constructor,
    emit_equals,
    emit_getters,
    emit_hash_code,
    emit_setters,
    join_terms,
)
from barista.codegen.languages.java.types import JavaTypeMapper

FIELDS = (
    FieldDescriptor("String", "name"),
    FieldDescriptor("int", "age"),
    FieldDescriptor("double", "height"),
    FieldDescriptor("boolean", "isMember"),
    FieldDescriptor("int[]", "scores"),
)


def _person(*fields: FieldDescriptor) -> ClassContext:
    return ClassContext("Person", fields or FIELDS)


def test_getters_one_per_field() -> None:
    methods = emit_getters(_person(), NameResolver())

    assert [m.signature for m in methods] == [
        "public String getName()",
        "public int getAge()",
        "public double getHeight()",
        "public boolean isMember()",
        "public int[] getScores()",
    ]
    assert methods[0].body == ("return name;",)
    assert methods[0].doc == ("@return The name.",)
    assert methods[0].annotations == ()


def test_getters_without_comments() -> None:
    methods = emit_getters(_person(), NameResolver(), add_comments=False)
    assert all(m.doc == () for m in methods)


def test_setters_use_plain_name_as_parameter() -> None:
    context = ClassContext("Car", [FieldDescriptor("boolean", "m_isElectric")])
    (method,) = emit_setters(context, NameResolver(NamingConfig(var_prefix="m_")))

    assert method.signature == "public void setIsElectric(boolean isElectric)"
    assert method.body == ("this.m_isElectric = isElectric;",)
    assert method.doc == ("@param isElectric The isElectric to set.",)


def test_copy_constructor() -> None:
    context = _person(
        FieldDescriptor("String", "name"),
        FieldDescriptor("Address", "address"),
    )
    method = emit_copy_constructor(context, JavaTypeMapper())

    assert method.signature == "public Person(Person other)"
    assert method.body == (
        "this.name = other.name;",
        "this.address = other.address == null ? null : new Address(other.address);",
    )
    assert method.doc[0] == "Creates a deep copy of the given Person."
    assert method.doc[-1] == "@param other The Person to copy."


def test_join_terms() -> None:
    assert join_terms([]) == ["return true;"]
    assert join_terms(["a"]) == ["return a;"]
    assert join_terms(["a", "b", "c"]) == [
        "return a &&",
        "       b &&",
        "       c;",
    ]


def test_equals_has_one_term_per_field_in_order() -> None:
    method = emit_equals(_person(), NameResolver(), JavaTypeMapper())

    assert method.annotations == ("@Override",)
    assert method.signature == "public boolean equals(Object o)"
    assert method.body[:3] == (
        "if (this == o) return true;",
        "if (o == null || getClass() != o.getClass()) return false;",
        "Person that = (Person) o;",
    )
    terms = method.body[3:]
    assert len(terms) == len(FIELDS)
    assert terms[0] == "return java.util.Objects.equals(getName(), that.getName()) &&"
    assert terms[1].strip() == "getAge() == that.getAge() &&"
    assert terms[2].strip() == "Double.compare(that.getHeight(), getHeight()) == 0 &&"
    assert terms[3].strip() == "isMember() == that.isMember() &&"
    assert terms[4].strip() == "java.util.Arrays.equals(getScores(), that.getScores());"


def test_equals_without_fields_skips_cast() -> None:
    method = emit_equals(ClassContext("Empty"), NameResolver(), JavaTypeMapper())
    assert "Empty that = (Empty) o;" not in method.body
    assert method.body[-1] == "return true;"


def test_hash_code_has_one_accumulation_per_field() -> None:
    resolver = NameResolver(NamingConfig(hash_multiplier=37))
    method = emit_hash_code(_person(), resolver, JavaTypeMapper())

    assert method.annotations == ("@Override",)
    assert method.signature == "public int hashCode()"
    assert method.body[0] == "int result = 1;"
    assert method.body[1] == "long temp;"
    assert method.body[-1] == "return result;"

    accumulations = [line for line in method.body if line.startswith("result = ")]
    assert len(accumulations) == len(FIELDS)
    assert all(line.startswith("result = 37 * result + ") for line in accumulations)
    assert "getName()" in accumulations[0]
    assert "getScores()" in accumulations[-1]


def test_hash_code_declares_temp_only_when_needed() -> None:
    context = _person(FieldDescriptor("int", "age"))
    method = emit_hash_code(context, NameResolver(), JavaTypeMapper())
    assert method.body == (
        "int result = 1;",
        "result = 31 * result + (int) getAge();",
        "return result;",
    )
