"""
Command-line interface for namespace generation.

Example:
  bridgegen builtins --remap Exception=PyException --remap AssertionError=PyAssertionError
"""

import argparse
import sys
from typing import Dict, List, Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from . import __version__
from .codegen import GeneratorError, NamespaceEmitter, load_options
from .codegen.templates import create_template_engine
from .logging_config import configure_logging, get_logger, level_from_flags

logger = get_logger(__name__)


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


console = Console()


def parse_remaps(pairs: Optional[List[str]]) -> Dict[str, str]:
    """Parse ``FOREIGN=HOST`` pairs into a remap table."""
    remaps: Dict[str, str] = {}
    for pair in pairs or []:
        foreign, sep, host = pair.partition("=")
        if not sep or not foreign or not host:
            raise CLIError(f"Invalid remap '{pair}', expected FOREIGN=HOST")
        remaps[foreign] = host
    return remaps


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bridgegen",
        description="Generate a static Python namespace module for a live module or class",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  bridgegen numpy
  bridgegen builtins --remap Exception=PyException
  bridgegen collections.OrderedDict --output-fname ordered_dict.py
        """.strip(),
    )

    parser.add_argument("target", help="Dotted path of the module or class")

    output_group = parser.add_argument_group("output")
    output_group.add_argument(
        "--output-fname", metavar="FILE", help="Override the derived file path"
    )
    output_group.add_argument(
        "--output-dir", metavar="DIR", help="Output directory (default: src)"
    )
    output_group.add_argument(
        "--ns-symbol", metavar="SYMBOL", help="Fully qualified namespace symbol"
    )
    output_group.add_argument(
        "--ns-prefix", metavar="PREFIX", help="Namespace prefix (default: python)"
    )
    output_group.add_argument(
        "--template-dir",
        metavar="DIR",
        help="Directory with templates overriding the built-in ones",
    )

    naming_group = parser.add_argument_group("naming")
    naming_group.add_argument(
        "--remap",
        action="append",
        metavar="FOREIGN=HOST",
        help="Declare attribute FOREIGN under the name HOST (repeatable)",
    )
    naming_group.add_argument(
        "--exclude",
        action="append",
        metavar="NAME",
        help="Name declared as intentionally shadowed (repeatable, replaces defaults)",
    )
    naming_group.add_argument(
        "--no-exclude",
        action="store_true",
        help="Declare no shadowed names",
    )

    parser.add_argument("--config", metavar="FILE", help="JSON configuration file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    parser.add_argument("--quiet", "-q", action="store_true", help="Errors only")
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser


def _build_overrides(args: argparse.Namespace) -> Dict[str, object]:
    overrides: Dict[str, object] = {}
    for key in ("output_fname", "output_dir", "ns_symbol", "ns_prefix"):
        value = getattr(args, key, None)
        if value:
            overrides[key] = value

    remaps = parse_remaps(args.remap)
    if remaps:
        overrides["symbol_name_remaps"] = remaps

    if args.no_exclude:
        overrides["exclude"] = ()
    elif args.exclude:
        overrides["exclude"] = tuple(args.exclude)
    return overrides


def _print_result(result) -> None:
    table = Table(box=box.SIMPLE, show_header=False)
    table.add_column("Key", style="bold cyan")
    table.add_column("Value")
    table.add_row("Namespace", result.module_symbol)
    table.add_row("File", str(result.path))
    table.add_row("Declarations", str(len(result.emitted)))
    table.add_row("Skipped", str(len(result.skipped)))

    console.print(
        Panel(table, title="✅ Namespace generated", border_style="green", expand=False)
    )


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the CLI.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    parser = create_parser()
    args = parser.parse_args(argv)
    configure_logging(level_from_flags(args.verbose, args.quiet), console=console)

    try:
        options = load_options(
            custom_config=_build_overrides(args), config_file=args.config
        )
        emitter = NamespaceEmitter(
            template_engine=create_template_engine(args.template_dir)
        )
        result = emitter.write_namespace(args.target, options)
    except (CLIError, GeneratorError) as e:
        logger.debug("Generation failed", exc_info=True)
        console.print(f"[red]✗ Error:[/red] {e}")
        return 1

    _print_result(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
