"""
Command-line interface for pg_typegen.

Reads a catalog (live database or JSON dump) and prints or writes the
generated type declarations.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from .catalog import CatalogError, CatalogReader, InMemoryCatalog, PostgresCatalog
from .codegen import (
    ConfigError,
    GeneratorConfig,
    RegistryError,
    generate_file,
    get_language_info,
    is_language_supported,
    list_all_language_info,
    list_supported_languages,
    load_config,
)
from .logging_config import get_logger, setup_logging

logger = get_logger(__name__)


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


# Status messages go to stderr so generated code can be piped
console = Console(stderr=True)


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="pg-typegen",
        description="Generate type declarations from PostgreSQL catalog metadata",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  pg-typegen --language go --dsn postgresql://localhost/app
  pg-typegen -l typescript -s public -o types.ts --catalog-file catalog.json
  pg-typegen -l python -t users -t orders --dsn postgresql://localhost/app
  pg-typegen --dsn postgresql://localhost/app --dump-catalog catalog.json
  pg-typegen --list-languages
        """.strip(),
    )

    # Catalog sources (mutually exclusive)
    source_group = parser.add_mutually_exclusive_group()
    source_group.add_argument(
        "--dsn", help="PostgreSQL connection string (default: DATABASE_URL / PG* env)"
    )
    source_group.add_argument(
        "--catalog-file", metavar="FILE", help="JSON catalog dump to read instead"
    )

    # Core generation options
    parser.add_argument("--language", "-l", help="Target language")
    parser.add_argument("--schema", "-s", help="Schema to generate (default: public)")
    parser.add_argument(
        "--table",
        "-t",
        action="append",
        dest="tables",
        metavar="TABLE",
        help="Generate only this table (repeatable)",
    )
    parser.add_argument("--output", "-o", help="Output file (default: stdout)")
    parser.add_argument("--config", help="Configuration file path (JSON)")

    # Style options
    style_group = parser.add_argument_group("style options")
    style_group.add_argument(
        "--no-comments",
        action="store_true",
        help="Don't emit foreign-key and default-value comments",
    )
    style_group.add_argument(
        "--indent-size", type=int, metavar="N", help="Spaces per indent level"
    )
    style_group.add_argument(
        "--use-tabs", action="store_true", help="Indent fields with tabs"
    )
    style_group.add_argument(
        "--profile-fallback",
        action="store_true",
        help="Use the language's own fallback type for unknown column types",
    )
    style_group.add_argument(
        "--type-source",
        choices=["data_type", "udt_name"],
        help="Catalog column used as the declared type (database only)",
    )

    # Informational commands
    info_group = parser.add_argument_group("information")
    info_group.add_argument(
        "--list-languages",
        action="store_true",
        help="List supported languages and exit",
    )
    info_group.add_argument(
        "--language-info",
        metavar="LANGUAGE",
        help="Show detailed info about a language and exit",
    )
    info_group.add_argument(
        "--dump-catalog",
        metavar="FILE",
        help="Write the schema's catalog metadata to a JSON file and exit",
    )
    info_group.add_argument(
        "--verbose", action="store_true", help="Show generation result metadata"
    )
    info_group.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    info_group.add_argument(
        "--log-file", metavar="FILE", help="Also write log messages to FILE"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the CLI.

    Args:
        argv: Argument list (defaults to sys.argv)

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        _setup_logging(args)

        # Handle informational commands first
        if args.list_languages:
            return _list_languages()

        if args.language_info:
            return _show_language_info(args.language_info)

        config = _build_config(args)

        if args.dump_catalog:
            return _dump_catalog(args, config)

        # Require language for generation
        if not args.language:
            console.print("[red]✗[/red] --language is required for code generation")
            return 1

        if not _validate_language(args.language):
            return 1

        catalog = _open_catalog(args, config)
        return _generate_and_output(catalog, args.language, config, args)

    except CLIError as e:
        console.print(f"[red]✗ Error:[/red] {escape(str(e))}")
        return 1
    except (CatalogError, RegistryError) as e:
        console.print(f"[red]✗ Error:[/red] {escape(str(e))}")
        logger.debug("Command failed", exc_info=True)
        return 1


def _list_languages() -> int:
    """List supported languages with details."""
    language_info = list_all_language_info()

    if not language_info:
        console.print("[yellow]⚠️ No language profiles registered[/yellow]")
        return 0

    table = Table(
        title="📋 Supported Languages", box=box.ROUNDED, title_style="bold cyan"
    )

    table.add_column("Language", style="bold green", no_wrap=True)
    table.add_column("Extension", style="cyan")
    table.add_column("Aliases", style="blue")
    table.add_column("Preamble", style="dim")

    for lang_name, info in sorted(language_info.items()):
        aliases = ", ".join(info["aliases"]) if info["aliases"] else "[dim]none[/dim]"
        preamble = "yes" if info["preamble"] else "no"
        table.add_row(f"🔧 {lang_name}", info["file_extension"], aliases, preamble)

    console.print()
    console.print(table)
    console.print()

    console.print(
        Panel(
            "[bold]Usage:[/bold] pg-typegen --language [cyan]LANGUAGE[/cyan] --dsn [dim]DSN[/dim]\n"
            "[bold]Info:[/bold] pg-typegen --language-info [cyan]LANGUAGE[/cyan]",
            title="💡 Quick Start",
            border_style="blue",
        )
    )

    return 0


def _show_language_info(language: str) -> int:
    """Show detailed information about a specific language."""
    if not _validate_language(language, silent=True):
        console.print(f"[red]✗ Language '{language}' is not supported[/red]")
        console.print("[dim]Use --list-languages to see available options[/dim]")
        return 1

    info = get_language_info(language)

    info_text = f"""[bold]Language:[/bold] {info['name']}
[bold]File Extension:[/bold] {info['file_extension']}"""

    if info["aliases"]:
        info_text += f"\n[bold]Aliases:[/bold] {', '.join(info['aliases'])}"

    console.print()
    console.print(
        Panel(
            info_text,
            title=f"🔧 {info['name'].title()} Profile",
            border_style="green",
        )
    )

    types_table = Table(
        title="⚙️  Type Mapping",
        box=box.SIMPLE,
        show_header=True,
        header_style="bold cyan",
    )
    types_table.add_column("Category", style="bold")
    types_table.add_column("Type", style="green")

    for name, spelling in info["types"].items():
        label = name.replace("_type", "").replace("_", " ").title()
        types_table.add_row(label, escape(spelling) if spelling else "[dim](empty)[/dim]")

    console.print()
    console.print(types_table)

    if info["preamble"]:
        console.print(
            Panel(escape(info["preamble"]), title="Preamble", border_style="blue")
        )

    return 0


def _validate_language(language: str, silent: bool = False) -> bool:
    """Validate that a language is supported."""
    if is_language_supported(language):
        return True
    if not silent:
        supported = list_supported_languages()
        console.print(f"[red]✗ Unsupported language '{language}'[/red]")
        console.print(f"[dim]Supported languages: {', '.join(supported)}[/dim]")
    return False


def _setup_logging(args: argparse.Namespace) -> None:
    """Configure logging from CLI arguments."""
    try:
        setup_logging(args.log_level, args.log_file)
    except OSError as e:
        raise CLIError(f"Cannot open log file {args.log_file}: {e}")


def _build_config(args: argparse.Namespace) -> GeneratorConfig:
    """Build configuration from the config file and CLI arguments."""
    config_dict = {}

    # Override with CLI arguments
    if args.schema:
        config_dict["schema_name"] = args.schema

    if args.dsn:
        config_dict["dsn"] = args.dsn

    if args.output:
        config_dict["output_file"] = args.output

    if args.no_comments:
        config_dict["add_comments"] = False

    if args.indent_size is not None:
        config_dict["indent_size"] = args.indent_size

    if args.use_tabs:
        config_dict["use_tabs"] = True

    if args.profile_fallback:
        config_dict["use_profile_fallback"] = True

    if args.type_source:
        config_dict["type_source"] = args.type_source

    try:
        return load_config(custom_config=config_dict, config_file=args.config)
    except ConfigError as e:
        raise CLIError(f"Configuration error: {e}")


def _open_catalog(args: argparse.Namespace, config: GeneratorConfig) -> CatalogReader:
    """Open the catalog selected on the command line."""
    if args.catalog_file:
        return InMemoryCatalog.from_file(args.catalog_file)
    return PostgresCatalog(config.dsn, type_source=config.type_source)


def _dump_catalog(args: argparse.Namespace, config: GeneratorConfig) -> int:
    """Snapshot a schema's catalog metadata into a JSON file."""
    catalog = _open_catalog(args, config)
    snapshot = InMemoryCatalog.snapshot(catalog, config.schema_name)
    snapshot.save(args.dump_catalog)

    table_count = len(snapshot.list_tables(config.schema_name))
    console.print(
        f"[green]✓[/green] Catalog of schema [cyan]{config.schema_name}[/cyan] "
        f"({table_count} table(s)) saved to [cyan]{args.dump_catalog}[/cyan]"
    )
    return 0


def _generate_and_output(
    catalog: CatalogReader,
    language: str,
    config: GeneratorConfig,
    args: argparse.Namespace,
) -> int:
    """Generate code and handle output with rich formatting."""
    with console.status(f"[green]Generating {language} types..."):
        result = generate_file(catalog, language, tables=args.tables, config=config)

    if not result.success:
        console.print(f"[red]✗[/red] {escape(result.error_message)}")
        return 1

    # Output code
    output_file = config.output_file
    if output_file:
        output_path = Path(output_file)
        try:
            output_path.write_text(result.code + "\n", encoding="utf-8")
        except OSError as e:
            console.print(f"[red]✗ Failed to write to {output_path}:[/red] {e}")
            return 1
        console.print(
            f"[green]✓[/green] Generated {language} types saved to [cyan]{output_path}[/cyan]"
        )
    else:
        _print_code(result.code, result.metadata["language"])

    # Show metadata if verbose
    if args.verbose and result.metadata:
        metadata_table = Table(
            title="📊 Generation Metadata",
            box=box.SIMPLE,
            show_header=True,
            header_style="bold cyan",
        )

        metadata_table.add_column("Property", style="bold")
        metadata_table.add_column("Value", style="green")

        for key, value in result.metadata.items():
            metadata_table.add_row(key.replace("_", " ").title(), str(value))

        console.print()
        console.print(metadata_table)

    # Show warnings with rich formatting
    if result.warnings:
        console.print("\n[yellow]⚠️  Warnings:[/yellow]")
        for warning in result.warnings:
            console.print(f"  [yellow]•[/yellow] {warning}")
        console.print()

    return 0


def _print_code(code: str, language: str) -> None:
    """Print code, highlighted on a terminal and raw when piped."""
    if not sys.stdout.isatty():
        sys.stdout.write(code + "\n")
        return

    Console().print(Syntax(code, language, theme="monokai"))
