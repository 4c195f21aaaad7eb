"""
Language-specific boilerplate generators.
"""

from .java import JavaGenerator, create_java_generator

__all__ = ["JavaGenerator", "create_java_generator"]
