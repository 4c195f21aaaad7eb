"""End-to-end tests for the Java generator."""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Optional

from barista.codegen import (
    ClassContext,
    FieldDescriptor,
    GeneratorConfig,
    NamingConfig,
    generate_boilerplate,
    generate_code,
)
from barista.codegen.core.generator import (
    NO_FIELDS_MESSAGE,
    NO_OPTIONS_MESSAGE,
    CodeGenerator,
)
from barista.codegen.languages.java import JavaGenerator

CAR_EQUALS_HASH = """\
    // --- Equals and HashCode ---

    /**
     * Compares this Car with another object field by field.
     */
    @Override
    public boolean equals(Object o) {
        if (this == o) return true;
        if (o == null || getClass() != o.getClass()) return false;
        Car that = (Car) o;
        return java.util.Objects.equals(getMake(), that.getMake()) &&
               getYear() == that.getYear();
    }

    /**
     * Computes a hash code consistent with equals().
     */
    @Override
    public int hashCode() {
        int result = 1;
        result = 31 * result + (getMake() == null ? 0 : getMake().hashCode());
        result = 31 * result + (int) getYear();
        return result;
    }
"""

CAR_GETTERS = """\
    // --- Getters ---

    /**
     * @return The make.
     */
    public String getMake() {
        return m_make;
    }

    /**
     * @return The year.
     */
    public int getYear() {
        return m_year;
    }
"""


def _config(**kwargs) -> GeneratorConfig:
    return GeneratorConfig(naming=NamingConfig(var_prefix="m_"), **kwargs)


def test_car_equals_and_hash_code(car_source: str) -> None:
    result = generate_boilerplate(car_source, "Car", _config(generate_equals_hash=True))

    assert result.success
    assert result.code == CAR_EQUALS_HASH
    assert "isElectric" not in result.code
    assert "getColor" not in result.code


def test_car_getters(car_source: str) -> None:
    result = generate_boilerplate(car_source, "Car", _config(generate_getters=True))
    assert result.code == CAR_GETTERS


def test_sections_follow_fixed_order(car_source: str, all_enabled: GeneratorConfig) -> None:
    result = generate_boilerplate(car_source, "Car", all_enabled)

    headers = [
        line.strip() for line in result.code.splitlines() if line.strip().startswith("// ---")
    ]
    assert headers == [
        "// --- Getters ---",
        "// --- Setters ---",
        "// --- Copy Constructor ---",
        "// --- Equals and HashCode ---",
    ]
    assert "\n\n\n\n" not in result.code
    assert result.code.endswith("}\n")


def test_sections_are_separated_by_one_blank_line(car_source: str) -> None:
    config = _config(generate_getters=True, generate_setters=True)
    code = generate_boilerplate(car_source, "Car", config).code
    assert "    }\n\n    // --- Setters ---\n" in code


def test_setters_and_copy_constructor(car_source: str, all_enabled: GeneratorConfig) -> None:
    config = replace(all_enabled, naming=NamingConfig(var_prefix="m_"))
    code = generate_boilerplate(car_source, "Car", config).code

    assert "    public void setMake(String make) {\n        this.m_make = make;\n    }" in code
    assert "     * @param year The year to set.\n" in code
    assert "    public Car(Car other) {\n" in code
    assert "        this.m_make = other.m_make;\n" in code
    assert "        this.m_year = other.m_year;\n" in code
    assert "     *\n     * @param other The Car to copy.\n" in code


def test_generation_is_idempotent(car_source: str, all_enabled: GeneratorConfig) -> None:
    first = generate_boilerplate(car_source, "Car", all_enabled).code
    second = generate_boilerplate(car_source, "Car", all_enabled).code
    assert first == second


def test_excluded_fields_never_appear(all_enabled: GeneratorConfig) -> None:
    source = """\
public class Holder {
    private static int sharedCount;
    private final String id = "x";
    private transient Object cache;
    private int value;
}
"""
    code = generate_boilerplate(source, None, all_enabled).code

    assert "getValue()" in code
    for name in ("SharedCount", "Id", "Cache"):
        assert f"get{name}()" not in code
        assert f"set{name}(" not in code
    for name in ("sharedCount", "id", "cache"):
        assert f"this.{name}" not in code
        assert f"other.{name}" not in code


def test_array_field_copy(all_enabled: GeneratorConfig) -> None:
    source = "public class Scores {\n    private int[] scores;\n}\n"
    code = generate_boilerplate(source, None, all_enabled).code
    assert (
        "this.scores = other.scores == null ? null : "
        "java.util.Arrays.copyOf(other.scores, other.scores.length);"
    ) in code


def test_class_name_is_detected(car_source: str) -> None:
    result = generate_boilerplate(car_source, config={"getters": True})
    assert result.metadata["class_name"] == "Car"
    assert result.metadata["field_count"] == 4
    assert result.metadata["language"] == "java"


def test_no_options_message(car_source: str) -> None:
    result = generate_boilerplate(car_source, "Car", GeneratorConfig())
    assert result.success
    assert result.code == NO_OPTIONS_MESSAGE + "\n"


def test_no_fields_message(all_enabled: GeneratorConfig) -> None:
    result = generate_boilerplate("public class Empty {}\n", "Empty", all_enabled)
    assert result.success
    assert result.code == NO_FIELDS_MESSAGE + "\n"


def test_no_prefix_match_message(car_source: str) -> None:
    config = GeneratorConfig(
        naming=NamingConfig(var_prefix="f_"), generate_getters=True
    )
    result = generate_boilerplate(car_source, "Car", config)
    assert result.code == "// No fields found with the specified prefix 'f_'.\n"


def test_prefix_on_class_without_fields_reports_no_fields() -> None:
    config = GeneratorConfig(
        naming=NamingConfig(var_prefix="m_"), generate_getters=True
    )
    result = generate_boilerplate("public class Empty {\n}\n", "Empty", config)
    assert result.code == NO_FIELDS_MESSAGE + "\n"


def test_extraction_warnings_are_reported() -> None:
    source = "public class Pair {\n    private int a, b;\n    private int c;\n}\n"
    result = generate_boilerplate(source, None, {"getters": True})

    assert "getC()" in result.code
    assert len(result.warnings) == 1
    assert "declares more than one field" in result.warnings[0]


def test_comments_can_be_disabled(car_source: str) -> None:
    config = _config(generate_getters=True, add_comments=False)
    code = generate_boilerplate(car_source, "Car", config).code
    assert "/**" not in code
    assert code.startswith("    // --- Getters ---\n\n    public String getMake() {\n")


def test_indent_size(car_source: str) -> None:
    config = _config(generate_getters=True, indent_size=2, add_comments=False)
    code = generate_boilerplate(car_source, "Car", config).code
    assert "  public String getMake() {\n    return m_make;\n  }\n" in code


def test_duplicate_getter_warning() -> None:
    context = ClassContext(
        "Flags",
        [FieldDescriptor("boolean", "isReady"), FieldDescriptor("boolean", "ready")],
    )
    generator = JavaGenerator(GeneratorConfig(generate_getters=True))
    result = generate_code(generator, context)

    assert result.success
    assert any("both resolve to getter isReady()" in w for w in result.warnings)


def test_reserved_setter_parameter_warning() -> None:
    context = ClassContext("Course", [FieldDescriptor("String", "m_class")])
    config = _config(generate_setters=True)
    result = generate_code(JavaGenerator(config), context)
    assert any("'class' is a Java reserved word" in w for w in result.warnings)


def test_missing_templates_produce_error_result() -> None:
    class NoTemplates(JavaGenerator):
        def get_template_directory(self) -> Optional[Path]:
            return None

    context = ClassContext("Car", [FieldDescriptor("int", "year")])
    result = generate_code(NoTemplates(GeneratorConfig(generate_getters=True)), context)

    assert not result.success
    assert "template not found" in result.error_message
    assert result.code == ""


def test_java_generator_is_a_code_generator() -> None:
    generator = JavaGenerator()
    assert isinstance(generator, CodeGenerator)
    assert generator.language_name == "java"


def test_format_code_normalizes_whitespace() -> None:
    generator = JavaGenerator()
    assert generator.format_code("\n\na  \n\n\n\n\nb\n\n") == "a\n\n\nb\n"
