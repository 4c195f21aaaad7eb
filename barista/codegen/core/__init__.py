"""
Core boilerplate generation components.

Provides the data model, field extraction, naming, configuration and
the base generator used by language generators.
"""

from .generator import CodeGenerator, GeneratorError, GenerationResult, generate_code
from .schema import ClassContext, FieldDescriptor, TypeKind
from .extractor import ExtractionError, ExtractionResult, extract_fields, find_class_name
from .naming import NameResolver, ResolvedNames
from .config import (
    GeneratorConfig,
    NamingConfig,
    ConfigManager,
    ConfigError,
    load_config,
)
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Base generator interface
    "CodeGenerator",
    "GeneratorError",
    "GenerationResult",
    "generate_code",
    # Data model
    "ClassContext",
    "FieldDescriptor",
    "TypeKind",
    # Field extraction
    "ExtractionError",
    "ExtractionResult",
    "extract_fields",
    "find_class_name",
    # Naming
    "NameResolver",
    "ResolvedNames",
    # Configuration system
    "GeneratorConfig",
    "NamingConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Template system
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
