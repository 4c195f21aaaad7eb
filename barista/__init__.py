"""
Barista: boilerplate generator for Java classes.

Reads the source of a Java class and emits getters, setters, a deep-copy
constructor and equals()/hashCode() from its private field declarations.
"""

__version__ = "0.1.0"

from .codegen import (
    ClassContext,
    FieldDescriptor,
    GenerationResult,
    GeneratorConfig,
    NamingConfig,
    extract_fields,
    find_class_name,
    generate_boilerplate,
    load_config,
)

__all__ = [
    "ClassContext",
    "FieldDescriptor",
    "GenerationResult",
    "GeneratorConfig",
    "NamingConfig",
    "extract_fields",
    "find_class_name",
    "generate_boilerplate",
    "load_config",
    "__version__",
]
