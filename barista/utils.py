"""Utility functions for loading Java source files.

This module provides the file checks the CLI performs before handing
source text to the generator.
"""

from pathlib import Path

from .logging_config import get_logger

logger = get_logger(__name__)


class JavaSourceError(Exception):
    """Custom exception for source loading errors."""

    pass


def load_java_source(file_path: str | Path) -> str:
    """Load Java source text from a local file.

    Args:
        file_path: Path to the Java source file.

    Returns:
        The source text.

    Raises:
        FileNotFoundError: If file doesn't exist.
        JavaSourceError: If the path is not a file or cannot be read.
    """
    file_path = Path(file_path)
    logger.debug(f"Attempting to load Java source from file: {file_path}")

    if not file_path.exists():
        logger.error(f"File not found: {file_path}")
        raise FileNotFoundError(f"File not found: {file_path}")

    if not file_path.is_file():
        logger.error(f"Not a regular file: {file_path}")
        raise JavaSourceError(f"Not a regular file: {file_path}")

    if file_path.suffix.lower() != ".java":
        logger.warning(f"File does not have .java extension: {file_path}")
        # Don't raise, just warn - might still be a Java class

    try:
        text = file_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        logger.error(f"File is not valid UTF-8 {file_path}: {e}")
        raise JavaSourceError(f"File is not valid UTF-8: {file_path}") from e
    except OSError as e:
        logger.error(f"Error reading file {file_path}: {e}", exc_info=True)
        raise JavaSourceError(f"Error reading file {file_path}: {e}") from e

    logger.info(f"Successfully loaded Java source from {file_path}")
    return text
