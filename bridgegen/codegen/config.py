"""
Configuration management for namespace generation.

Handles loading and merging options from JSON files and keyword
overrides on top of immutable defaults.
"""

import json
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from .errors import ConfigurationError
from .naming import DEFAULT_EXCLUDE, shadowed_names

DEFAULT_OUTPUT_DIR = "src"
DEFAULT_NS_PREFIX = "python"
SOURCE_EXTENSION = ".py"


@dataclass(frozen=True)
class NamespaceOptions:
    """Options for a single generation run."""

    # Output settings
    output_fname: Optional[str] = None
    output_dir: str = DEFAULT_OUTPUT_DIR

    # Namespace settings
    ns_symbol: Optional[str] = None
    ns_prefix: str = DEFAULT_NS_PREFIX

    # Naming settings
    symbol_name_remaps: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType({})
    )
    exclude: Tuple[str, ...] = DEFAULT_EXCLUDE

    def __post_init__(self):
        remaps = self.symbol_name_remaps
        if remaps is None:
            remaps = {}
        if not isinstance(remaps, Mapping):
            raise ConfigurationError("symbol_name_remaps must be a mapping")
        object.__setattr__(self, "symbol_name_remaps", MappingProxyType(dict(remaps)))
        object.__setattr__(self, "exclude", shadowed_names(self.exclude))

    def with_overrides(self, **overrides: Any) -> "NamespaceOptions":
        """Return a copy with ``overrides`` applied."""
        _check_keys(overrides)
        return replace(self, **overrides)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-serialisable dictionary."""
        return {
            "output_fname": self.output_fname,
            "output_dir": self.output_dir,
            "ns_symbol": self.ns_symbol,
            "ns_prefix": self.ns_prefix,
            "symbol_name_remaps": dict(self.symbol_name_remaps),
            "exclude": list(self.exclude),
        }


def _option_names():
    return {f.name for f in fields(NamespaceOptions)}


def _check_keys(config: Mapping[str, Any]):
    unknown = sorted(set(config) - _option_names())
    if unknown:
        raise ConfigurationError(f"Unknown option(s): {', '.join(unknown)}")


def _load_config_file(config_path: Union[str, Path]) -> Dict[str, Any]:
    """Load options from a JSON file."""
    path = Path(config_path)

    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            config = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationError(
            f"Invalid JSON in configuration file {path}: {str(e)}"
        ) from e
    except OSError as e:
        raise ConfigurationError(
            f"Failed to load configuration file {path}: {str(e)}"
        ) from e

    if not isinstance(config, dict):
        raise ConfigurationError(
            f"Configuration file must contain a JSON object: {path}"
        )

    return config


def load_options(
    custom_config: Optional[Mapping[str, Any]] = None,
    config_file: Optional[Union[str, Path]] = None,
) -> NamespaceOptions:
    """
    Build options from defaults, a JSON file and explicit overrides.

    Later sources win: file values override defaults, ``custom_config``
    overrides the file.

    Args:
        custom_config: Option overrides
        config_file: Path to JSON configuration file

    Returns:
        Merged options
    """
    merged: Dict[str, Any] = {}

    if config_file:
        merged.update(_load_config_file(config_file))

    if custom_config:
        merged.update(custom_config)

    _check_keys(merged)
    return NamespaceOptions(**merged)


def coerce_options(
    options: Union[NamespaceOptions, Mapping[str, Any], None] = None,
    **overrides: Any,
) -> NamespaceOptions:
    """Accept options as a NamespaceOptions, a mapping or None."""
    if options is None:
        base = NamespaceOptions()
    elif isinstance(options, NamespaceOptions):
        base = options
    elif isinstance(options, Mapping):
        base = load_options(custom_config=options)
    else:
        raise ConfigurationError(f"Invalid options type: {type(options).__name__}")

    if overrides:
        base = base.with_overrides(**overrides)
    return base
