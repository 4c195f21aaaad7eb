"""
Command-line interface for barista.

Parses flags, loads the Java source file, and prints the generated
boilerplate. Generated code goes to stdout (or a file); status,
warnings and errors go to stderr.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any, Sequence

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table

from . import __version__
from .codegen import (
    ConfigError,
    GenerationResult,
    GeneratorConfig,
    GeneratorError,
    find_class_name,
    generate_boilerplate,
    load_config,
)
from .codegen.core.config import VALID_BOOLEAN_PREFIXES
from .logging_config import configure_logging, get_logger
from .utils import JavaSourceError, load_java_source

logger = get_logger(__name__)


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


# Diagnostics console; generated code is written to stdout separately
console = Console(stderr=True, soft_wrap=True)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the barista command."""
    parser = argparse.ArgumentParser(
        prog="barista",
        description="Barista: boilerplate generator for Java classes",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  barista -f Car.java -g -s
  barista -f Car.java -p m_ -e
  barista -f Car.java -b get -m 37 -g -e -o Car.boilerplate.java
        """.strip(),
    )

    parser.add_argument(
        "-f",
        "--file",
        required=True,
        metavar="JAVA_FILE",
        help="Path to the Java source file",
    )

    naming_group = parser.add_argument_group("naming options")
    naming_group.add_argument(
        "-p",
        "--prefix",
        metavar="PREFIX",
        help="Prefix of instance variables to include (e.g. 'm_')",
    )
    naming_group.add_argument(
        "-b",
        "--boolean-prefix",
        choices=VALID_BOOLEAN_PREFIXES,
        help="Prefix for boolean getters (default: is)",
    )
    naming_group.add_argument(
        "-m",
        "--multiplier",
        type=int,
        metavar="N",
        help="Multiplier used in hashCode() (default: 31)",
    )

    generation_group = parser.add_argument_group("generation options")
    generation_group.add_argument(
        "-g", "--getters", action="store_true", help="Generate getter methods"
    )
    generation_group.add_argument(
        "-s", "--setters", action="store_true", help="Generate setter methods"
    )
    generation_group.add_argument(
        "-c",
        "--copy-constructor",
        action="store_true",
        help="Generate a deep-copy constructor",
    )
    generation_group.add_argument(
        "-e",
        "--equals",
        action="store_true",
        help="Generate equals() and hashCode()",
    )
    generation_group.add_argument(
        "--no-comments",
        action="store_true",
        help="Don't generate documentation comments",
    )
    generation_group.add_argument(
        "--indent",
        type=int,
        metavar="N",
        help="Spaces per indentation level (default: 4)",
    )
    generation_group.add_argument(
        "--config", metavar="FILE", help="JSON configuration file"
    )

    output_group = parser.add_argument_group("output options")
    output_group.add_argument(
        "-o",
        "--output",
        metavar="FILE",
        help="Output file for generated code (default: stdout)",
    )
    output_group.add_argument(
        "--pretty",
        action="store_true",
        help="Syntax-highlight generated code when stdout is a terminal",
    )
    output_group.add_argument(
        "--verbose",
        action="store_true",
        help="Show generation metadata and debug logging",
    )
    output_group.add_argument(
        "--log-file", metavar="FILE", help="Write a debug log to FILE"
    )

    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    return parser


def build_config(args: argparse.Namespace) -> GeneratorConfig:
    """Build configuration from the config file and CLI arguments.

    Flags that were not given leave config file values untouched.
    """
    overrides: dict[str, Any] = {}

    if args.prefix is not None:
        overrides["var_prefix"] = args.prefix
    if args.boolean_prefix is not None:
        overrides["boolean_prefix"] = args.boolean_prefix
    if args.multiplier is not None:
        overrides["hash_multiplier"] = args.multiplier
    if args.indent is not None:
        overrides["indent_size"] = args.indent
    if args.no_comments:
        overrides["add_comments"] = False

    if args.getters:
        overrides["getters"] = True
    if args.setters:
        overrides["setters"] = True
    if args.copy_constructor:
        overrides["copy_constructor"] = True
    if args.equals:
        overrides["equals_hash"] = True

    try:
        return load_config(custom_config=overrides, config_file=args.config)
    except ConfigError as e:
        raise CLIError(f"Configuration error: {e}") from e


def _load_source(path: str) -> tuple[str, str]:
    """Load the source file and resolve its class name."""
    try:
        source = load_java_source(path)
    except FileNotFoundError as e:
        raise CLIError(f"File '{path}' does not exist.") from e
    except JavaSourceError as e:
        raise CLIError(str(e)) from e

    class_name = find_class_name(source)
    if class_name is None:
        raise CLIError(f"Could not determine class name from '{path}'.")

    return source, class_name


def _write_output(result: GenerationResult, args: argparse.Namespace) -> None:
    if args.output:
        output_path = Path(args.output)
        try:
            output_path.write_text(result.code, encoding="utf-8")
        except OSError as e:
            raise CLIError(f"Failed to write to {output_path}: {e}") from e
        console.print(
            f"[green]✓[/green] Generated code saved to [cyan]{escape(str(output_path))}[/cyan]"
        )
    elif args.pretty and sys.stdout.isatty():
        Console(soft_wrap=True).print(Syntax(result.code, "java", theme="monokai"))
    else:
        sys.stdout.write(result.code)
        sys.stdout.flush()


def _print_metadata(result: GenerationResult) -> None:
    metadata_table = Table(
        title="📊 Generation Metadata",
        box=box.SIMPLE,
        show_header=True,
        header_style="bold cyan",
    )
    metadata_table.add_column("Property", style="bold")
    metadata_table.add_column("Value", style="green")

    for key, value in result.metadata.items():
        metadata_table.add_row(key.replace("_", " ").title(), escape(str(value)))

    console.print()
    console.print(metadata_table)


def _print_warnings(result: GenerationResult) -> None:
    console.print("[yellow]⚠️  Warnings:[/yellow]")
    for warning in result.warnings:
        console.print(f"  [yellow]•[/yellow] {escape(warning)}")


def run(args: argparse.Namespace) -> int:
    """
    Run generation for parsed arguments.

    Returns:
        Exit code (0 for success, 1 for configuration or generation errors)
    """
    try:
        config = build_config(args)
        source, class_name = _load_source(args.file)
        logger.info("Generating boilerplate for class %s", class_name)

        result = generate_boilerplate(source, class_name, config)
        if not result.success:
            console.print(f"[red]✗ {escape(result.error_message)}[/red]")
            return 1

        _write_output(result, args)

        if args.verbose and result.metadata:
            _print_metadata(result)

        if result.warnings:
            _print_warnings(result)

        return 0

    except CLIError as e:
        console.print(f"[red]✗ Error:[/red] {escape(str(e))}")
        return 1
    except GeneratorError as e:
        console.print(f"[red]✗[/red] {escape(str(e))}")
        return 1


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the barista command."""
    parser = create_parser()
    args = parser.parse_args(argv)

    log_file = Path(args.log_file) if args.log_file else None
    configure_logging(verbose=args.verbose, log_file=log_file)

    return run(args)


if __name__ == "__main__":
    sys.exit(main())
