"""
Command-line interface for enum member generation.

Reads a class descriptor, runs one generation pass and prints or writes
the regenerated class.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence

from rich import box
from rich.console import Console
from rich.syntax import Syntax
from rich.table import Table

from . import __version__
from .codegen import (
    AmbiguousTypeError,
    GeneratorConfig,
    GeneratorError,
    InMemoryClass,
    generate_members,
    get_dialect,
    get_language_info,
    is_language_supported,
    list_supported_languages,
    load_config,
)
from .codegen.core.config import ConfigError, get_config_manager
from .logging_config import get_logger, setup_logging
from .utils import DescriptorLoadError, load_descriptor, save_descriptor

logger = get_logger(__name__)

console = Console()


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="enum-generator",
        description="Regenerate accessors, mutators, lookups and constructors of an enum",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  enum-generator status.json
  enum-generator status.json -o Status.java
  enum-generator --url https://example.com/status.json --save status.json
        """.strip(),
    )

    input_group = parser.add_mutually_exclusive_group(required=False)
    input_group.add_argument("file", nargs="?", help="Class descriptor JSON file")
    input_group.add_argument("--url", help="URL to fetch the class descriptor from")

    parser.add_argument("--output", "-o", metavar="FILE", help="Write rendered source to FILE")
    parser.add_argument(
        "--save",
        metavar="FILE",
        help="Write the regenerated class descriptor to FILE",
    )
    parser.add_argument("--config", metavar="FILE", help="JSON configuration file")
    parser.add_argument(
        "--save-config",
        metavar="FILE",
        help="Write the effective configuration to FILE",
    )
    parser.add_argument("--language", "-l", help="Target language (default: java)")
    parser.add_argument("--indent", type=int, metavar="N", help="Spaces per indent level")
    parser.add_argument("--tabs", action="store_true", help="Indent with tabs")
    parser.add_argument(
        "--comments", action="store_true", help="Mark generated members with a comment"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Show generation result metadata"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    parser.add_argument(
        "--list-languages",
        action="store_true",
        help="List supported target languages and exit",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _build_config(args: argparse.Namespace) -> GeneratorConfig:
    """Build configuration from CLI arguments."""
    overrides = {}
    if args.indent is not None:
        overrides["indent_size"] = args.indent
    if args.tabs:
        overrides["use_tabs"] = True
    if args.comments:
        overrides["add_comments"] = True

    language = (args.language or "java").lower()
    if not is_language_supported(language):
        raise CLIError(
            f"Unsupported language: {language}. "
            f"Available: {', '.join(list_supported_languages())}"
        )
    # Aliases map onto the primary language name
    language = get_language_info(language)["name"]

    try:
        config = load_config(language, custom_config=overrides, config_file=args.config)
    except ConfigError as e:
        raise CLIError(f"Configuration error: {e}") from e
    if args.language:
        config.language = language
    return config


def _list_languages() -> int:
    table = Table(title="Supported Languages", box=box.ROUNDED, title_style="bold cyan")
    table.add_column("Language", style="bold green", no_wrap=True)
    table.add_column("Extension", style="cyan")
    table.add_column("Aliases", style="dim")
    for language in list_supported_languages():
        info = get_language_info(language)
        table.add_row(
            info["name"], info["file_extension"], ", ".join(info["aliases"]) or "-"
        )
    console.print(table)
    return 0


def _print_metadata(metadata: dict) -> None:
    table = Table(
        title="Generation Metadata",
        box=box.SIMPLE,
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("Property", style="bold")
    table.add_column("Value", style="green")
    for key, value in metadata.items():
        table.add_row(key.replace("_", " ").title(), str(value))
    console.print()
    console.print(table)


def run(args: argparse.Namespace) -> int:
    if args.list_languages:
        return _list_languages()

    config = _build_config(args)
    manager = get_config_manager()
    for warning in manager.validate_config(config):
        console.print(f"[yellow]Config warning:[/yellow] {warning}")

    if args.save_config:
        try:
            manager.save_config(config, args.save_config)
        except ConfigError as e:
            raise CLIError(str(e)) from e
        console.print(
            f"[green]✓[/green] Configuration saved to [cyan]{args.save_config}[/cyan]"
        )
        if not (args.file or args.url):
            return 0

    if not (args.file or args.url):
        raise CLIError("Input source required (file or --url)")

    try:
        source, descriptor = load_descriptor(file_path=args.file, url=args.url)
    except (DescriptorLoadError, FileNotFoundError) as e:
        raise CLIError(str(e)) from e

    try:
        target = InMemoryClass.from_dict(descriptor)
    except ValueError as e:
        raise CLIError(f"Invalid descriptor {source}: {e}") from e

    result = generate_members(target, config)
    if not result.success:
        console.print(f"[red]✗[/red] {result.error_message}")
        return 1

    if result.skipped:
        reason = result.metadata.get("reason", "not applicable")
        console.print(f"[yellow]{target.name}: {reason}; nothing generated[/yellow]")
        return 0

    console.print(
        f"[green]✓[/green] {target.name}: {len(result.added)} member(s) generated, "
        f"{len(result.removed)} replaced"
    )

    dialect = get_dialect(config.language, config)
    code = dialect.render_class(target)

    if args.output:
        output_path = Path(args.output)
        try:
            output_path.write_text(code, encoding="utf-8")
        except OSError as e:
            raise CLIError(f"Failed to write to {output_path}: {e}") from e
        console.print(f"[green]✓[/green] Source saved to [cyan]{output_path}[/cyan]")
    else:
        console.print(Syntax(code, dialect.language_name, theme="monokai"))

    if args.save:
        try:
            save_descriptor(target.to_dict(), args.save)
        except DescriptorLoadError as e:
            raise CLIError(str(e)) from e
        console.print(f"[green]✓[/green] Descriptor saved to [cyan]{args.save}[/cyan]")

    if args.verbose and result.metadata:
        _print_metadata(result.metadata)

    if result.warnings:
        console.print("\n[yellow]Warnings:[/yellow]")
        for warning in result.warnings:
            console.print(f"  [yellow]•[/yellow] {warning}")

    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    try:
        return run(args)
    except CLIError as e:
        console.print(f"[red]✗ Error:[/red] {e}")
        logger.debug("CLI error", exc_info=True)
        return 1
    except AmbiguousTypeError as e:
        console.print(f"[red]✗ Ambiguous type:[/red] {e}")
        return 1
    except GeneratorError as e:
        console.print(f"[red]✗[/red] {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
