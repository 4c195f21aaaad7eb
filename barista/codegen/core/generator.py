"""
Generator contract and the guarded entry point that runs it.

A language generator turns a ClassContext into source text. Callers go
through :func:`generate_code`, which handles the degenerate cases, runs
validation and never lets an exception escape.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Any, Optional
from pathlib import Path

from ...logging_config import get_logger
from .config import GeneratorConfig
from .schema import ClassContext
from .templates import TemplateEngine, create_template_engine

logger = get_logger(__name__)

NO_OPTIONS_MESSAGE = (
    "// No generation options selected. Run with --help to see available options."
)
NO_FIELDS_MESSAGE = (
    "// No non-static, non-final, non-transient private fields found to process."
)
NO_PREFIX_MATCH_MESSAGE = "// No fields found with the specified prefix '{prefix}'."

# Longest run of blank lines kept by format_code
MAX_BLANK_LINES = 2


class GeneratorError(Exception):
    """Raised when a generator cannot produce code."""

    pass


class CodeGenerator(ABC):
    """Base class for boilerplate generators of one target language."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        self.config = config or GeneratorConfig()
        self._template_engine: Optional[TemplateEngine] = None

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Target language identifier, e.g. ``java``."""
        pass

    def get_template_directory(self) -> Optional[Path]:
        """
        Where this generator's templates live.

        The default of None gives an empty in-memory engine; generators
        that ship ``.j2`` files override it.
        """
        return None

    @property
    def template_engine(self) -> TemplateEngine:
        """Template engine, created on first use."""
        if self._template_engine is None:
            self._template_engine = create_template_engine(
                self.get_template_directory()
            )
        return self._template_engine

    @abstractmethod
    def generate(self, context: ClassContext) -> str:
        """
        Produce the enabled sections for one class.

        Args:
            context: Class name and its eligible fields, at least one

        Returns:
            Unformatted source text
        """
        pass

    def validate_context(self, context: ClassContext) -> List[str]:
        """
        Check a context for problems that do not prevent generation.

        Returns:
            Warning messages, empty when nothing looks wrong
        """
        warnings = []

        if not context.class_name:
            warnings.append("Class name is empty")

        seen = set()
        for field in context.fields:
            if field.name in seen:
                warnings.append(f"Field {field.name} is declared more than once")
            seen.add(field.name)

        return warnings

    def format_code(self, code: str) -> str:
        """
        Normalize whitespace of generated code.

        Strips trailing whitespace, collapses runs of more than two blank
        lines and ends the text with exactly one newline.
        """
        lines = []
        blank_run = 0

        for line in code.split("\n"):
            line = line.rstrip()
            if line:
                blank_run = 0
            else:
                blank_run += 1
                if blank_run > MAX_BLANK_LINES:
                    continue
            lines.append(line)

        return "\n".join(lines).strip("\n") + "\n"

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        return self.template_engine.render_template(template_name, context)

    def template_exists(self, template_name: str) -> bool:
        return self.template_engine.template_exists(template_name)


class GenerationResult:
    """Outcome of one generation run: code, warnings and metadata."""

    def __init__(
        self,
        code: str,
        warnings: Optional[List[str]] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ):
        self.code = code
        self.warnings = list(warnings or [])
        self.metadata = dict(metadata or {})
        self.success = True
        self.error_message: Optional[str] = None
        self.exception: Optional[Exception] = None

    @classmethod
    def error(
        cls, message: str, exception: Optional[Exception] = None
    ) -> "GenerationResult":
        """Build a failed result carrying no code."""
        result = cls(code="")
        result.success = False
        result.error_message = message
        result.exception = exception
        return result


def informational_message(
    config: GeneratorConfig, context: ClassContext
) -> Optional[str]:
    """
    Return the single-line no-op message for a degenerate run, if any.

    A run is degenerate when no emitter is enabled or the class has no
    eligible fields; neither case is an error. The prefix message is used
    only when eligible fields exist but none carry the prefix.
    """
    if not config.any_enabled:
        return NO_OPTIONS_MESSAGE

    if context.is_empty:
        prefix = config.naming.var_prefix
        if prefix and context.prefix_mismatches:
            return NO_PREFIX_MATCH_MESSAGE.format(prefix=prefix)
        return NO_FIELDS_MESSAGE

    return None


def generate_code(generator: CodeGenerator, context: ClassContext) -> GenerationResult:
    """
    Run a generator on one class and capture the outcome.

    Args:
        generator: Language generator to run
        context: Class to generate boilerplate for

    Returns:
        GenerationResult; failures are reported through ``success`` and
        ``error_message`` rather than raised
    """
    metadata = {
        "language": generator.language_name,
        "class_name": context.class_name,
        "field_count": len(context.fields),
    }

    message = informational_message(generator.config, context)
    if message is not None:
        logger.info(message.lstrip("/ "))
        return GenerationResult(message + "\n", metadata=metadata)

    try:
        warnings = generator.validate_context(context)
        code = generator.format_code(generator.generate(context))
    except Exception as e:
        logger.debug("Generation failed", exc_info=True)
        return GenerationResult.error(f"Code generation failed: {e}", exception=e)

    return GenerationResult(code, warnings, metadata)
