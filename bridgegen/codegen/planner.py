"""
Output planning for generated namespaces.

Derives the module symbol and target file path for a target specifier and
prepares the directory the file will be written into.
"""

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional

from ..logging_config import get_logger
from .config import SOURCE_EXTENSION, NamespaceOptions
from .errors import ConfigurationError, OutputError

logger = get_logger(__name__)


@dataclass(frozen=True)
class GenerationPlan:
    """Where and under which name a namespace gets written."""

    target_path: Path
    module_symbol: str
    module_doc: Optional[str] = None

    def with_doc(self, module_doc: Optional[str]) -> "GenerationPlan":
        return replace(self, module_doc=module_doc)


def module_symbol_for(target: str, options: NamespaceOptions) -> str:
    """Return the in-source namespace symbol; dashes are kept."""
    if not isinstance(target, str) or not target.strip():
        raise ConfigurationError("Target specifier must be a non-empty string")

    symbol = options.ns_symbol or f"{options.ns_prefix}.{target}"
    if any(not segment for segment in symbol.split(".")):
        raise ConfigurationError(f"Cannot derive a module path from '{symbol}'")
    return symbol


def path_for_symbol(symbol: str, output_dir: str) -> Path:
    """
    Map a dotted module symbol onto a source file path.

    Dashes become underscores in the path segments only.

    Example:
        ``python.my-mod`` under ``src`` maps to ``src/python/my_mod.py``
    """
    segments = symbol.replace("-", "_").split(".")
    path = Path(output_dir, *segments)
    return path.with_name(path.name + SOURCE_EXTENSION)


def plan_generation(target: str, options: NamespaceOptions) -> GenerationPlan:
    """
    Compute the plan for generating ``target``.

    Args:
        target: Target specifier, e.g. ``numpy`` or ``os.path``
        options: Generation options

    Returns:
        GenerationPlan without a module docstring

    Raises:
        ConfigurationError: If the symbol or path cannot be derived
    """
    symbol = module_symbol_for(target, options)
    if options.output_fname:
        target_path = Path(options.output_fname)
    else:
        target_path = path_for_symbol(symbol, options.output_dir)
    return GenerationPlan(target_path=target_path, module_symbol=symbol)


def prepare_output(plan: GenerationPlan) -> Path:
    """
    Create missing parent directories of the plan's target path.

    Raises:
        OutputError: If the directories cannot be created
    """
    parent = plan.target_path.parent
    try:
        parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise OutputError(f"Cannot create output directory {parent}: {e}") from e
    if plan.target_path.is_dir():
        raise OutputError(f"Output path is a directory: {plan.target_path}")
    logger.debug("Prepared output directory %s", parent)
    return plan.target_path
