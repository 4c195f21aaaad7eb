"""
Java boilerplate generator implementation.

Generates getters, setters, a copy constructor and equals()/hashCode()
for a Java class from its parsed field declarations.
"""

from typing import List, Optional
from pathlib import Path

from ....logging_config import get_logger
from ...core.config import GeneratorConfig
from ...core.generator import CodeGenerator, GeneratorError
from ...core.schema import ClassContext
from .emitters import (
    JavaMethod,
    emit_copy_constructor,
    emit_equals,
    emit_getters,
    emit_hash_code,
    emit_setters,
)
from .naming import create_java_resolver, validate_java_identifier
from .types import JavaTypeMapper

logger = get_logger(__name__)

METHOD_TEMPLATE = "method.java.j2"
SECTION_TEMPLATE = "section.java.j2"


class JavaGenerator(CodeGenerator):
    """Code generator for Java accessor and object-identity methods."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize Java generator with configuration."""
        super().__init__(config)

        self.resolver = create_java_resolver(self.config.naming)
        self.type_mapper = JavaTypeMapper(self.config.immutable_types)

    def get_template_directory(self) -> Optional[Path]:
        """Return the Java templates directory."""
        template_dir = Path(__file__).parent / "templates"
        return template_dir if template_dir.exists() else None

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "java"

    def generate(self, context: ClassContext) -> str:
        """Generate the enabled sections in order: getters, setters, copy constructor, equals/hash."""
        for template_name in (METHOD_TEMPLATE, SECTION_TEMPLATE):
            if not self.template_exists(template_name):
                raise GeneratorError(f"{template_name} template not found")

        self.resolver.reset_cache()
        add_comments = self.config.add_comments
        sections = []

        if self.config.generate_getters:
            methods = emit_getters(context, self.resolver, add_comments)
            sections.append(self._render_section("Getters", methods))

        if self.config.generate_setters:
            methods = emit_setters(context, self.resolver, add_comments)
            sections.append(self._render_section("Setters", methods))

        if self.config.generate_copy_constructor:
            method = emit_copy_constructor(context, self.type_mapper, add_comments)
            sections.append(self._render_section("Copy Constructor", [method]))

        if self.config.generate_equals_hash:
            methods = [
                emit_equals(context, self.resolver, self.type_mapper, add_comments),
                emit_hash_code(context, self.resolver, self.type_mapper, add_comments),
            ]
            sections.append(self._render_section("Equals and HashCode", methods))

        logger.debug(
            "Generated %d section(s) for %s (%d field(s))",
            len(sections),
            context.class_name,
            len(context.fields),
        )
        return "\n".join(sections)

    def render_method(self, method: JavaMethod) -> str:
        """Render one method without outer indentation."""
        return self.render_template(
            METHOD_TEMPLATE,
            {"method": method, "indent_size": self.config.indent_size},
        )

    def _render_section(self, title: str, methods: List[JavaMethod]) -> str:
        rendered = [self.render_method(method) for method in methods]
        return self.render_template(
            SECTION_TEMPLATE,
            {
                "title": title,
                "methods": rendered,
                "indent_size": self.config.indent_size,
            },
        )

    def validate_context(self, context: ClassContext) -> List[str]:
        """Validate a class context for Java generation."""
        warnings = super().validate_context(context)

        if context.class_name:
            for error in validate_java_identifier(context.class_name):
                warnings.append(f"Class name: {error}")

        getters = {}
        for field in context.fields:
            names = self.resolver.resolve(field)

            if not names.plain_name:
                warnings.append(
                    f"Field {field.name} is empty after removing prefix "
                    f"'{self.config.naming.var_prefix}'"
                )
                continue

            if self.config.generate_setters:
                for error in validate_java_identifier(names.plain_name):
                    warnings.append(f"Setter parameter for {field.name}: {error}")

            if self.config.generate_getters or self.config.generate_equals_hash:
                other = getters.get(names.getter_name)
                if other is not None:
                    warnings.append(
                        f"Fields {other} and {field.name} both resolve to "
                        f"getter {names.getter_name}()"
                    )
                getters[names.getter_name] = field.name

        return warnings


def create_java_generator(config: Optional[GeneratorConfig] = None) -> JavaGenerator:
    """Create a Java generator, using default configuration when none is given."""
    return JavaGenerator(config)
