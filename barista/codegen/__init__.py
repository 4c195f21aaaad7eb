"""
Barista Code Generation Module

Generates Java boilerplate (accessors, copy constructor, equals/hashCode)
from the field declarations of a class.
"""

from typing import Any, Dict, Optional, Union

from ..logging_config import get_logger
from .core.generator import CodeGenerator, GeneratorError, GenerationResult, generate_code
from .core.schema import ClassContext, FieldDescriptor, TypeKind
from .core.extractor import ExtractionError, ExtractionResult, extract_fields, find_class_name
from .core.naming import NameResolver
from .core.config import GeneratorConfig, NamingConfig, ConfigManager, ConfigError, load_config
from .languages.java import JavaGenerator, create_java_generator

logger = get_logger(__name__)


def generate_boilerplate(
    source: str,
    class_name: Optional[str] = None,
    config: Optional[Union[GeneratorConfig, Dict[str, Any]]] = None,
) -> GenerationResult:
    """
    Generate boilerplate for the class declared in ``source``.

    Args:
        source: Full Java class source text
        class_name: Class name; detected from the source when omitted
        config: Generator configuration or a dict of flat config keys

    Returns:
        GenerationResult with generated code, warnings and metadata

    Raises:
        GeneratorError: If no class name is given and none can be detected
        ExtractionError: If the source cannot be lexed as Java
    """
    if config is None:
        config = GeneratorConfig()
    elif isinstance(config, dict):
        config = load_config(custom_config=config)

    if class_name is None:
        class_name = find_class_name(source)
        if class_name is None:
            raise GeneratorError("Could not determine class name from source")
        logger.debug("Detected class name %s", class_name)

    extraction = extract_fields(source, config.naming.var_prefix)
    context = ClassContext(
        class_name=class_name,
        fields=tuple(extraction.fields),
        prefix_mismatches=extraction.prefix_mismatches,
    )

    generator = create_java_generator(config)
    result = generate_code(generator, context)
    result.warnings = extraction.warnings + result.warnings
    return result


__all__ = [
    "CodeGenerator",
    "GeneratorError",
    "GenerationResult",
    "generate_code",
    "generate_boilerplate",
    "ClassContext",
    "FieldDescriptor",
    "TypeKind",
    "ExtractionError",
    "ExtractionResult",
    "extract_fields",
    "find_class_name",
    "NameResolver",
    "GeneratorConfig",
    "NamingConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    "JavaGenerator",
    "create_java_generator",
]
